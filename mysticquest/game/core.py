import logging
from rich.console import Console

from ..models import Config, Player
from ..ui import Panels
from .state import GameState
from .combat import CombatLoop
from .persistence import SaveManager
from .music import BackgroundMusic

logger = logging.getLogger(__name__)

MAIN_MENU = "1. Start Game\n2. Load Game\n3. Exit"


class Game:
    def __init__(self, config: Config = None, console: Console = None, read_input=None) -> None:
        self.config = config or Config()

        self.console = console or Console()
        self.read_input = read_input or self.console.input
        self.panels = Panels(self.config)

        self.state = GameState()
        self.save_manager = SaveManager(self.config.save_file)
        self.combat = CombatLoop(self.config, self.save_manager, self.console, self.panels, self.read_input)

    def display_opening_screen(self):
        instructions = "\n".join(f"{index}. {line}" for index, line in enumerate(self.config.instructions, start=1))
        self.console.print(self.panels.render_title_panel("WELCOME", f"Welcome to {self.config.title}!"))
        self.console.print(self.panels.render_menu_panel("INSTRUCTIONS", instructions))

    def display_menu(self):
        while True:
            self.console.print(self.panels.render_menu_panel("MENU", MAIN_MENU))
            choice = self.read_input("Choose an option: ").strip()

            if choice == "1":
                self.start_game()
            elif choice == "2":
                self.load_game()
            elif choice == "3":
                self.console.print(self.panels.render_title_panel(self.config.title.upper(), f"Thank you for playing {self.config.title}!"))
                break
            else:
                self.console.print(self.panels.render_error_panel("ERROR", "Invalid choice. Please try again."))

    def start_game(self):
        player_name = ""
        while not player_name:
            entry = self.read_input("Enter your name: ").split()
            player_name = entry[0] if entry else ""

        self.state.set_player(Player(player_name))
        self.console.print(self.panels.render_status_panel("NEW GAME", "Starting new game..."))
        self.play()

    def load_game(self):
        result = self.save_manager.load()
        if not result.ok:
            self.console.print(self.panels.render_error_panel("ERROR", f"Error loading game: {result.error}"))
            return

        self.state.set_player(result.player)
        self.console.print(self.panels.render_status_panel("LOAD", "Game state loaded successfully."))
        self.play()

    def play(self):
        if not self.state.has_player():
            logger.debug("No session player, skipping combat")
            return None
        try:
            return self.combat.run(self.state.player)
        finally:
            self.state.release_player()

    def start(self) -> BackgroundMusic:
        self.display_opening_screen()

        music = BackgroundMusic(self.console, self.config.music_duration)
        if self.config.music_enabled:
            music.start()
        else:
            logger.debug("Background music disabled")

        self.display_menu()
        return music
