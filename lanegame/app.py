"""Command line entry point: opens the window and runs a scene."""

from __future__ import annotations

import argparse
from typing import Dict, List, Optional, Type

from lanegame.game_manager import GameManager
from lanegame.pvz_scene import PVZScene
from lanegame.sample_scene import SampleScene
from lanegame.scene import Scene

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
GOAL_SIZE = 100

TITLE = "PVZ"
FPS_LIMIT = 60
BLACK = (0, 0, 0)

SCENES: Dict[str, Type[Scene]] = {
    "pvz": PVZScene,
    "sample": SampleScene,
}


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be positive")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="lanegame", description="Run a game scene.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="pvz")
    parser.add_argument("--width", type=_positive_int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=_positive_int, default=WINDOW_HEIGHT)
    parser.add_argument("--fps", type=_positive_int, default=FPS_LIMIT)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Open the window and run the chosen scene until it is closed."""
    args = parse_args(argv)
    manager = GameManager.get()
    manager.create_window(args.width, args.height, TITLE, args.fps, BLACK)
    manager.launch_scene(SCENES[args.scene])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())