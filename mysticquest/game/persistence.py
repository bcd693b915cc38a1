import logging
from dataclasses import dataclass
from typing import Optional

from ..models import Player

logger = logging.getLogger(__name__)


@dataclass
class PersistenceResult:
    player: Optional[Player] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SaveManager:
    """Reads and writes the player's name and health as a two line text file.

    Only the player side is stored. Loading rebuilds a full health player and
    applies the missing health as damage, so a saved value above the default
    health comes back as the default.
    """

    def __init__(self, save_file: str = "game_state.txt"):
        self.save_file = save_file

    def save(self, player: Player) -> PersistenceResult:
        try:
            with open(self.save_file, "w") as file:
                file.write(f"{player.name}\n")
                file.write(f"{player.health}\n")
        except OSError as error:
            logger.warning("Could not write %s: %s", self.save_file, error)
            return PersistenceResult(error=f"Failed to open file for saving. ({error})")
        logger.debug("Saved %s with %d health to %s", player.name, player.health, self.save_file)
        return PersistenceResult(player=player)

    def load(self) -> PersistenceResult:
        try:
            with open(self.save_file) as file:
                tokens = file.read().split()
        except (OSError, UnicodeDecodeError) as error:
            logger.warning("Could not read %s: %s", self.save_file, error)
            return PersistenceResult(error=f"Failed to open file for loading. ({error})")

        try:
            name, health = tokens[0], int(tokens[1])
        except (IndexError, ValueError):
            logger.warning("Malformed save file %s: %r", self.save_file, tokens)
            return PersistenceResult(error="Save file is malformed.")

        player = Player(name)
        player.take_damage(Player.DEFAULT_HEALTH - health)
        logger.debug("Loaded %s with %d health from %s", player.name, player.health, self.save_file)
        return PersistenceResult(player=player)
