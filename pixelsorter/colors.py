# ============================================================
# ========================= PALETTE ==========================
# ============================================================
#
# Colors are (r, g, b, a) tuples of floats in [0, 1]. The pixel grid
# converts them to 0-255 bytes when it draws.

BAR_COLOR        = (0.3, 0.6, 0.9, 1.0)
BACKGROUND_COLOR = (211 / 255, 211 / 255, 211 / 255, 1.0)
FRAME_COLOR      = (0.0, 0.0, 0.0, 1.0)
MARKER_NEUTRAL   = (173 / 255, 216 / 255, 230 / 255, 1.0)
MARKER_A         = (0.0, 100 / 255, 0.0, 1.0)
MARKER_B         = (0.0, 0.0, 1.0, 1.0)

# Deepest darkening reached halfway through a swap pulse.
PULSE_DEPTH = 0.6


def invert_color(color):
    r, g, b, a = color
    return (1.0 - r, 1.0 - g, 1.0 - b, a)


def stage_color(base, stage, total_stages):
    """
    Color of a pulsing bar at the given stage.

    The first and last stage use the base color unchanged. In between the
    bar darkens linearly towards PULSE_DEPTH at the midpoint and brightens
    back:

        progress = (total - stage) / total          0 .. 1
        pulse    = 2 * progress        (progress <= 0.5)
                   2 * (1 - progress)  (progress >  0.5)
        channel  = max(0, channel * (1 - PULSE_DEPTH * pulse))
    """
    if stage == total_stages or stage == 1:
        return base
    progress = (total_stages - stage) / total_stages
    if progress <= 0.5:
        pulse = progress * 2
    else:
        pulse = (1 - progress) * 2
    factor = 1 - PULSE_DEPTH * pulse
    r, g, b, a = base
    return (max(0.0, r * factor), max(0.0, g * factor), max(0.0, b * factor), a)


def to_rgba255(color):
    """Float color -> pygame (r, g, b, a) byte tuple."""
    return tuple(int(max(0.0, min(1.0, c)) * 255) for c in color)
