"""
Animation engine: plays the action queue back one stage per tick.

The engine keeps its own copy of the array (the rendered array) and only
changes it halfway through a SWAP action, so the picture lags behind the
sort that has already finished.
"""
import logging
from enum import Enum

from .actions import ActionKind, ActionQueue
from .colors import (BAR_COLOR, MARKER_A, MARKER_B, MARKER_NEUTRAL,
                     invert_color, stage_color)
from .sound import SWAP_TONE_MS, swap_frequency

logger = logging.getLogger(__name__)


class PlaybackMode(Enum):
    IDLE         = "idle"
    STEP_PENDING = "step"
    CONTINUOUS   = "continuous"


class AnimationEngine:
    """
    Parameters
    ----------
    grid      : pixel surface with draw_rectangle / clear_rectangle /
                draw_triangle_marker and cell_width / cell_height
    sound     : object with play_tone(frequency, duration_ms), or None
    bar_color : base color of the bars
    sound_enabled : False keeps swaps silent even with a sound player
    """

    def __init__(self, grid, sound=None, bar_color=BAR_COLOR, sound_enabled=True):
        if grid is None:
            raise ValueError("AnimationEngine needs a drawing surface")
        if grid.cell_width <= 0 or grid.cell_height <= 0:
            raise ValueError(
                f"Drawing surface has no cells ({grid.cell_width}x{grid.cell_height})")
        self.grid          = grid
        self.sound         = sound
        self.sound_enabled = sound_enabled
        self.bar_color     = bar_color
        self.pivot_color   = invert_color(bar_color)
        self.queue         = ActionQueue()
        self.values        = []
        self.mode          = PlaybackMode.IDLE

        self._renderers = {
            ActionKind.SWAP:    self._render_swap,
            ActionKind.PIVOT:   self._render_pivot,
            ActionKind.COMPARE: self._render_compare,
        }

    # ---- playback control ----

    def run_continuous(self):
        self.mode = PlaybackMode.CONTINUOUS

    def pause(self):
        self.mode = PlaybackMode.IDLE

    def single_step(self):
        # a step while running would pause after it; keep running instead
        if self.mode is PlaybackMode.IDLE:
            self.mode = PlaybackMode.STEP_PENDING

    def reset(self):
        """Drop every queued action, including a half-played one."""
        self.queue.clear()
        self.mode = PlaybackMode.IDLE

    @property
    def active(self) -> bool:
        return self.mode is not PlaybackMode.IDLE

    # ---- tick ----

    def tick(self):
        if not self.active:
            return
        try:
            self.play_stage()
        finally:
            if self.mode is PlaybackMode.STEP_PENDING:
                self.mode = PlaybackMode.IDLE

    def play_stage(self):
        """Render the front action's current stage, then advance it."""
        action = self.queue.peek()
        if action is None:
            return
        self._renderers[action.kind](action)
        if action.advance():
            self.queue.pop()

    # ---- stage renderers ----

    def _render_swap(self, action):
        a, b  = action.index_a, action.index_b
        color = stage_color(self.bar_color, action.stage, action.total_stages)

        if action.stage == action.total_stages // 2:
            self.values[a], self.values[b] = self.values[b], self.values[a]
            self._play_swap_sound(abs(b - a))
            self.grid.clear_rectangle(a, 0, 1, self.grid.cell_height - 1)
            self.grid.clear_rectangle(b, 0, 1, self.grid.cell_height - 1)

        self.draw_bar(a, color)
        self.draw_bar(b, color)

    def _render_pivot(self, action):
        color = self.bar_color if action.stage % 2 else self.pivot_color
        self.draw_bar(action.index_a, color)

    def _render_compare(self, action):
        a, b = action.index_a, action.index_b
        row  = self.grid.cell_height - 1
        for x in range(self.grid.cell_width):
            if x != a and x != b:
                self.grid.draw_triangle_marker(x, row, MARKER_NEUTRAL)
        if action.stage > 1:
            self.grid.draw_triangle_marker(a, row, MARKER_A)
            self.grid.draw_triangle_marker(b, row, MARKER_B)
        else:
            self.grid.draw_triangle_marker(a, row, MARKER_NEUTRAL)
            self.grid.draw_triangle_marker(b, row, MARKER_NEUTRAL)

    def _play_swap_sound(self, distance):
        if not self.sound_enabled or self.sound is None:
            return
        frequency = swap_frequency(distance, len(self.values))
        self.sound.play_tone(frequency, SWAP_TONE_MS)

    # ---- drawing ----

    def bar_top(self, value):
        return self.grid.cell_height - value - 1

    def draw_bar(self, index, color=None):
        value = self.values[index]
        self.grid.draw_rectangle(index, self.bar_top(value), 1, value,
                                 True, True, color or self.bar_color)

    def draw_all(self):
        for i in range(len(self.values)):
            self.draw_bar(i)
        self.grid.draw_rectangle(0, self.grid.cell_height - 1, self.grid.cell_width, 1,
                                 True, True, MARKER_NEUTRAL)
