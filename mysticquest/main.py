import argparse
import logging
from rich.logging import RichHandler

from mysticquest.game import Game
from mysticquest.models import Config


def setup_logging(debug: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def main():
    parser = argparse.ArgumentParser(description="Play Mystic Quest!")
    parser.add_argument("--settings", help="Path to game configuration YAML file (e.g., config.yaml)")
    parser.add_argument("--save-file", help="Path to the save file (defaults to game_state.txt)")
    parser.add_argument("--no-music", action="store_true", help="Skip the background music")
    parser.add_argument("--debug", action="store_true", help="Show debug logging")
    args = parser.parse_args()

    setup_logging(args.debug)
    config = Config(args.settings, save_file=args.save_file, music_enabled=False if args.no_music else None)
    music = Game(config).start()
    music.join()


if __name__ == "__main__":
    main()
