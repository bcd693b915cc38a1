import logging
from typing import Optional

from ..models import Player

logger = logging.getLogger(__name__)


class GameState:
    def __init__(self):
        self.player: Optional[Player] = None

    def set_player(self, player: Player):
        self.player = player
        logger.debug("Session player set to %s", player.name)

    def release_player(self):
        if self.player is not None:
            logger.debug("Releasing session player %s", self.player.name)
        self.player = None

    def has_player(self) -> bool:
        return self.player is not None
