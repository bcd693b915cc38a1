from rich.panel import Panel
from rich.text import Text


class Panels:
    def __init__(self, config):
        self.config = config

    def render_title_panel(self, title: str, message: str) -> Panel:
        return Panel(Text(message, justify="center", style="bold"), title=f"{title}", border_style="bright_black")

    def render_menu_panel(self, title: str, message: str) -> Panel:
        return Panel(Text(message, justify="left"), title=f"{title}", title_align="left", border_style="bright_black")

    def render_status_panel(self, title: str, message: str) -> Panel:
        return Panel(Text(message, justify="left"), title=f"{title}", border_style=self.config.status_panel_color)

    def render_char_panel(self, title: str, message: str) -> Panel:
        return Panel(Text(message, justify="center", style=self.config.character_panel_color), title=f"{title}", border_style=self.config.character_panel_color)

    def render_enemy_panel(self, title: str, message: str) -> Panel:
        return Panel(Text(message, justify="center", style=self.config.enemy_panel_color), title=f"{title}", subtitle=self.config.enemy_name, border_style=self.config.enemy_panel_color)

    def render_error_panel(self, title: str, message: str) -> Panel:
        return Panel(Text(message, justify="left", style="bold yellow"), title=f"{title}", title_align="left", border_style="yellow")

    def render_end_panel(self, title: str, message: str, won: bool = False) -> Panel:
        border_style = "green" if won else "red"
        return Panel(Text(message, justify="center", style=f"bold {border_style}"), title=f"{title}", border_style=border_style)
