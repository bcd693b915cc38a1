import yaml

DEFAULT_INSTRUCTIONS = [
    "Navigate through the forest.",
    "Solve puzzles, battle enemies, and collect treasures.",
    "Escape the forest to win.",
]


class Config:
    def __init__(self, settings_path: str = None, save_file: str = None, music_enabled: bool = None) -> None:
        self.settings_path = settings_path

        if settings_path:
            with open(settings_path) as settings_file:
                game_parameters = yaml.safe_load(settings_file) or {}
        else:
            game_parameters = {}

        game_settings = game_parameters.get("game_settings", {}) or {}
        self.title = game_settings.get("title", "Mystic Quest")
        self.instructions = game_settings.get("instructions") or DEFAULT_INSTRUCTIONS
        if isinstance(self.instructions, str):
            self.instructions = [self.instructions]
        self.save_file = game_settings.get("save_file", "game_state.txt")
        self.enemy_name = game_settings.get("enemy_name", "Goblin")
        self.music_enabled = game_settings.get("music_enabled", True)
        self.music_duration = game_settings.get("music_duration", 5)
        self.character_panel_color = game_settings.get("character_panel_color", "cyan")
        self.enemy_panel_color = game_settings.get("enemy_panel_color", "red")
        self.status_panel_color = game_settings.get("status_panel_color", "white")

        if save_file is not None:
            self.save_file = save_file
        if music_enabled is not None:
            self.music_enabled = music_enabled
