import os
import sys

# pygame-backed tests must not open a window or an audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from pixelsorter import sorters
from pixelsorter.engine import AnimationEngine


class FakeGrid:
    """Records drawing calls instead of touching pixels."""

    def __init__(self, cell_width=10, cell_height=20):
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_rectangle(self, x, y, w, h, has_frame, has_space, color):
        self.calls.append(("rect", x, y, w, h, has_frame, has_space, color))

    def clear_rectangle(self, x, y, w, h):
        self.calls.append(("clear_rect", x, y, w, h))

    def draw_triangle_marker(self, x, y, color):
        self.calls.append(("triangle", x, y, color))

    def of(self, kind):
        return [c for c in self.calls if c[0] == kind]


class FakeSound:
    def __init__(self):
        self.tones = []

    def play_tone(self, frequency, duration_ms):
        self.tones.append((frequency, duration_ms))


@pytest.fixture
def grid():
    return FakeGrid()


@pytest.fixture
def sound():
    return FakeSound()


@pytest.fixture
def engine(grid, sound):
    return AnimationEngine(grid, sound=sound)


@pytest.fixture
def restore_algorithms():
    algorithms = list(sorters.ALGORITHMS)
    custom = dict(sorters._custom_sorters)
    yield
    sorters.ALGORITHMS[:] = algorithms
    sorters._custom_sorters.clear()
    sorters._custom_sorters.update(custom)


def drain(engine, limit=1_000_000):
    """Tick a running engine until its queue is empty."""
    engine.run_continuous()
    ticks = 0
    while not engine.queue.is_empty():
        engine.tick()
        ticks += 1
        assert ticks < limit, "queue never drained"
    return ticks
