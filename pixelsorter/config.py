"""Command-line configuration for the visualizer."""
import argparse
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .grid import PIXEL_SIZE

logger = logging.getLogger(__name__)

DEFAULT_WIDTH      = 800
DEFAULT_HEIGHT     = 600
DEFAULT_FPS        = 60
DEFAULT_FRAME_SKIP = 1

# cells kept free beside the bars and above the tallest one
SPARE_COLUMNS = 2
SPARE_ROWS    = 10


@dataclass
class VisualizerConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    sound: bool = True
    fps: int = DEFAULT_FPS
    frame_skip: int = DEFAULT_FRAME_SKIP
    seed: Optional[int] = None
    algorithm: str = "quick"
    custom_sorters: List[str] = field(default_factory=list)

    @property
    def element_count(self) -> int:
        return max(0, self.width // PIXEL_SIZE - SPARE_COLUMNS)

    @property
    def max_value(self) -> int:
        return max(1, self.height // PIXEL_SIZE - SPARE_ROWS)


def parse_size(width, height):
    """
    Convert width/height option strings. If either is not an integer
    both fall back to the defaults.
    """
    try:
        w = DEFAULT_WIDTH if width is None else int(width)
        h = DEFAULT_HEIGHT if height is None else int(height)
    except ValueError:
        logger.warning("Invalid size parameters (%s x %s), using defaults %d x %d",
                       width, height, DEFAULT_WIDTH, DEFAULT_HEIGHT)
        return DEFAULT_WIDTH, DEFAULT_HEIGHT
    return w, h


def parse_bool(value) -> bool:
    return str(value).strip().lower() == "true"


def _positive_or_default(name, value, default):
    if value < 1:
        logger.warning("Invalid %s %s, using %s", name, value, default)
        return default
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelsorter",
        description="Animated sorting visualizer with swap tones",
    )
    parser.add_argument("--width", type=str, default=None, help="Canvas width in pixels")
    parser.add_argument("--height", type=str, default=None, help="Canvas height in pixels")
    parser.add_argument("--sound", type=str, default="true", help="true/false")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="Ticks per second")
    parser.add_argument(
        "--frame-skip",
        type=int,
        default=DEFAULT_FRAME_SKIP,
        help="Advance the animation every N frames",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for arrays")
    parser.add_argument(
        "--algorithm",
        type=str,
        default="quick",
        help="quick, bubble, selection or insertion",
    )
    parser.add_argument(
        "--sorter",
        action="append",
        default=[],
        metavar="PATH",
        help="Load a custom sorter module (repeatable)",
    )
    return parser


def parse_config(argv=None) -> VisualizerConfig:
    args = build_parser().parse_args(argv)
    width, height = parse_size(args.width, args.height)
    return VisualizerConfig(
        width=width,
        height=height,
        sound=parse_bool(args.sound),
        fps=_positive_or_default("fps", args.fps, DEFAULT_FPS),
        frame_skip=_positive_or_default("frame skip", args.frame_skip, DEFAULT_FRAME_SKIP),
        seed=args.seed,
        algorithm=args.algorithm,
        custom_sorters=list(args.sorter),
    )
