from .config import Config
from .data_model import Character, Player, Enemy
