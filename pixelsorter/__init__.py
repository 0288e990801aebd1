"""PixelSorter - step-by-step animated sorting visualizer with swap tones."""

__version__ = "0.1.0"

from .actions import Action, ActionKind, ActionQueue
from .engine import AnimationEngine, PlaybackMode
from .visualizer import Visualizer

__all__ = [
    'Action',
    'ActionKind',
    'ActionQueue',
    'AnimationEngine',
    'PlaybackMode',
    'Visualizer',
]
