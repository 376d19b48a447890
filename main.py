import argparse
import logging
from pathlib import Path

from config import HIGHSCORE_FILE, DEFAULT_DIFFICULTY
from game import Game
from session import Difficulty


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Wrap-around snake arcade game.")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=DEFAULT_DIFFICULTY,
        help="starting difficulty (default: %(default)s)",
    )
    parser.add_argument(
        "--highscore-file",
        type=Path,
        default=HIGHSCORE_FILE,
        help="where the high score is kept (default: %(default)s)",
    )
    parser.add_argument("--mute", action="store_true", help="disable sound effects")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = Game(
        difficulty=Difficulty(args.difficulty),
        highscore_path=args.highscore_file,
        sound=not args.mute,
    )
    game.run()


if __name__ == "__main__":
    main()
