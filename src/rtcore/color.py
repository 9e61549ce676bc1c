# rtcore/color.py
import logging
import math

from rtcore.vector import Color

logger = logging.getLogger(__name__)

# Just under 256 so a channel of exactly 1.0 maps to 255.
COLOR_SCALE = 255.999

INT32_MIN = -2147483648
INT32_MAX = 2147483647


def _to_channel(value: float) -> int:
    """
    Truncates toward zero, saturating at the 32-bit signed range.
    NaN maps to 0.
    """
    scaled = COLOR_SCALE * value
    if math.isnan(scaled):
        return 0
    if scaled >= INT32_MAX:
        return INT32_MAX
    if scaled <= INT32_MIN:
        return INT32_MIN
    return int(scaled)


def write_color(out, pixel_color: Color) -> None:
    """
    Writes one "r g b" pixel line to a text stream.

    Channels are scaled by COLOR_SCALE and truncated, not rounded or
    clamped, so values outside [0, 1] produce integers outside [0, 255].
    Errors raised by the stream propagate to the caller.
    """
    r = _to_channel(pixel_color.x)
    g = _to_channel(pixel_color.y)
    b = _to_channel(pixel_color.z)
    try:
        out.write(f"{r} {g} {b}\n")
    except (OSError, ValueError):
        logger.error("Writing color %d %d %d failed", r, g, b)
        raise
