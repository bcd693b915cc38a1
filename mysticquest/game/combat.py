import logging
from enum import Enum

from ..models import Player, Enemy

logger = logging.getLogger(__name__)

ACTION_MENU = "1. Attack\n2. Collect Treasure\n3. Save and Exit"


class CombatOutcome(Enum):
    ONGOING = "ongoing"
    VICTORY = "player-victory"
    DEFEAT = "player-defeated"
    SAVED = "saved-exit"


class CombatLoop:
    def __init__(self, config, save_manager, console, panels, read_input):
        self.config = config
        self.save_manager = save_manager
        self.console = console
        self.panels = panels
        self.read_input = read_input

    def resolve_attack(self, player: Player, enemy: Enemy) -> list:
        messages = [player.attack(enemy)]
        if enemy.health > 0:
            messages.append(enemy.attack(player))
        logger.debug("Exchange resolved: %s at %d, %s at %d", player.name, player.health, enemy.name, enemy.health)
        return messages

    def check_outcome(self, player: Player, enemy: Enemy) -> CombatOutcome:
        if player.health <= 0:
            return CombatOutcome.DEFEAT
        if enemy.health <= 0:
            return CombatOutcome.VICTORY
        return CombatOutcome.ONGOING

    def display_combatants(self, player: Player, enemy: Enemy):
        self.console.print(self.panels.render_char_panel("PLAYER", player.stats_line()))
        self.console.print(self.panels.render_enemy_panel("ENEMY", enemy.stats_line()))

    def save_and_exit(self, player: Player) -> CombatOutcome:
        result = self.save_manager.save(player)
        if result.ok:
            self.console.print(self.panels.render_status_panel("SAVE", "Game state saved successfully."))
        else:
            self.console.print(self.panels.render_error_panel("ERROR", f"Error saving game: {result.error}"))
        return CombatOutcome.SAVED

    def run(self, player: Player) -> CombatOutcome:
        enemy = Enemy(self.config.enemy_name)
        logger.debug("Combat started: %s vs %s", player.name, enemy.name)

        while self.check_outcome(player, enemy) is CombatOutcome.ONGOING:
            self.display_combatants(player, enemy)
            self.console.print(self.panels.render_menu_panel("CHOOSE AN ACTION", ACTION_MENU))
            action = self.read_input("\nACTION >>>  ").strip()

            if action == "1":
                messages = self.resolve_attack(player, enemy)
                self.console.print(self.panels.render_status_panel("COMBAT", "\n".join(messages)))
            elif action == "2":
                self.console.print(self.panels.render_status_panel("TREASURE", player.collect_treasure()))
            elif action == "3":
                return self.save_and_exit(player)
            else:
                self.console.print(self.panels.render_error_panel("ERROR", "Invalid action. Try again."))

        outcome = self.check_outcome(player, enemy)
        if outcome is CombatOutcome.DEFEAT:
            self.console.print(self.panels.render_end_panel("GAME OVER", "You have been defeated. Game over.", won=False))
        else:
            self.console.print(self.panels.render_end_panel("VICTORY", "You defeated the enemy! Victory!", won=True))
        logger.debug("Combat finished: %s", outcome.value)
        return outcome
