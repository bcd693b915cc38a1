from .core import Game
from .combat import CombatLoop, CombatOutcome
from .persistence import SaveManager, PersistenceResult
from .state import GameState
from .music import BackgroundMusic
