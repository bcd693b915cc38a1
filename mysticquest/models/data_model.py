from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Character(ABC):
    name: str
    health: int

    def take_damage(self, amount: int) -> None:
        self.health = max(0, self.health - max(0, amount))

    @abstractmethod
    def stats_line(self) -> str:
        ...

    @abstractmethod
    def attack(self, target: "Character") -> str:
        ...


@dataclass
class Player(Character):
    DEFAULT_HEALTH = 100
    ATTACK_DAMAGE = 20

    health: int = DEFAULT_HEALTH
    treasures_collected: int = 0

    def stats_line(self) -> str:
        return f"Player: {self.name}, Health: {self.health}, Treasures: {self.treasures_collected}"

    def attack(self, target: Character) -> str:
        target.take_damage(self.ATTACK_DAMAGE)
        return f"{self.name} attacks the enemy!"

    def collect_treasure(self) -> str:
        self.treasures_collected += 1
        return f"Collected a treasure! Total: {self.treasures_collected}"


@dataclass
class Enemy(Character):
    DEFAULT_HEALTH = 50
    ATTACK_DAMAGE = 15

    name: str = "Goblin"
    health: int = DEFAULT_HEALTH

    def stats_line(self) -> str:
        return f"Enemy: {self.name}, Health: {self.health}"

    def attack(self, target: Character) -> str:
        target.take_damage(self.ATTACK_DAMAGE)
        return f"{self.name} attacks the player!"
