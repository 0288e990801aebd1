import pygame

from .colors import BACKGROUND_COLOR, FRAME_COLOR, to_rgba255

PIXEL_SIZE = 16


class PixelGrid:
    """
    Drawing surface addressed in square cells of PIXEL_SIZE pixels.

    Everything is drawn into an offscreen pygame Surface; the application
    blits `surface` to the window once per frame. Only whole cells are
    drawable: a canvas that is not a multiple of PIXEL_SIZE keeps its
    leftover strip untouched.
    """

    def __init__(self, width: int, height: int, background=BACKGROUND_COLOR,
                 surface=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width       = width
        self.height      = height
        self.cell_width  = width // PIXEL_SIZE
        self.cell_height = height // PIXEL_SIZE
        self.background  = background
        self.surface     = surface if surface is not None else pygame.Surface((width, height))
        self.surface.set_clip(pygame.Rect(0, 0,
                                          self.cell_width * PIXEL_SIZE,
                                          self.cell_height * PIXEL_SIZE))

    def clear(self):
        self.surface.fill(to_rgba255(self.background))

    def _cell_rect(self, x, y, w, h):
        return pygame.Rect(x * PIXEL_SIZE, y * PIXEL_SIZE, w * PIXEL_SIZE, h * PIXEL_SIZE)

    def clear_rectangle(self, x, y, w, h):
        if w <= 0 or h <= 0:
            return
        self.surface.fill(to_rgba255(self.background), self._cell_rect(x, y, w, h))

    def draw_rectangle(self, x, y, w, h, has_frame, has_space, color):
        """
        Fill a block of cells.

        has_space leaves the block's left pixel column and bottom pixel row
        as background so neighbouring bars stay apart; has_frame outlines
        what remains with a one pixel dark border.
        """
        if w <= 0 or h <= 0:
            return
        outer = self._cell_rect(x, y, w, h)
        self.surface.fill(to_rgba255(self.background), outer)

        body = outer.copy()
        if has_space:
            body.x += 1; body.w -= 1; body.h -= 1
        if has_frame:
            self.surface.fill(to_rgba255(FRAME_COLOR), body)
            body.inflate_ip(-2, -2)
        if body.w > 0 and body.h > 0:
            self.surface.fill(to_rgba255(color), body)

    def draw_triangle_marker(self, x, y, color):
        """Small upward-pointing triangle inside cell (x, y)."""
        if x < 0 or x >= self.cell_width or y < 0 or y >= self.cell_height:
            return
        cx   = x * PIXEL_SIZE + PIXEL_SIZE // 2
        top  = y * PIXEL_SIZE + 1
        rows = PIXEL_SIZE // 2 - 1
        points = [(cx - 1, top), (cx + 1, top),
                  (cx + rows, top + rows - 1), (cx - rows, top + rows - 1)]
        pygame.draw.polygon(self.surface, to_rgba255(color), points)
