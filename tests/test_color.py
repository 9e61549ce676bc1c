# tests/test_color.py
import io
import logging
import math

import pytest

from rtcore.color import COLOR_SCALE, write_color
from rtcore.vector import Color


def _written(color: Color) -> str:
    out = io.StringIO()
    write_color(out, color)
    return out.getvalue()


def test_write_color():
    assert _written(Color(0.2, 0.3, 0.4)) == "51 76 102\n"


def test_full_intensity_does_not_overflow():
    assert COLOR_SCALE == 255.999
    assert _written(Color(1.0, 1.0, 1.0)) == "255 255 255\n"


def test_black():
    assert _written(Color(0.0, 0.0, 0.0)) == "0 0 0\n"


def test_channels_truncate_not_round():
    # 0.999 * 255.999 = 255.743...
    assert _written(Color(0.999, 0.5, 0.0021)) == "255 127 0\n"


def test_out_of_range_is_not_clamped():
    assert _written(Color(-0.5, 0.0, 2.0)) == "-127 0 511\n"


def test_non_finite_channels_saturate():
    assert _written(Color(math.nan, math.inf, -math.inf)) == "0 2147483647 -2147483648\n"


def test_one_line_per_call():
    out = io.StringIO()
    write_color(out, Color(0.0, 0.0, 0.0))
    write_color(out, Color(1.0, 1.0, 1.0))
    assert out.getvalue() == "0 0 0\n255 255 255\n"


def test_closed_stream_raises(caplog):
    out = io.StringIO()
    out.close()
    with caplog.at_level(logging.ERROR, logger="rtcore.color"):
        with pytest.raises(ValueError):
            write_color(out, Color(0.2, 0.3, 0.4))
    assert "51 76 102" in caplog.text


class BrokenSink:
    def write(self, text):
        raise BrokenPipeError("sink went away")


def test_broken_sink_propagates():
    with pytest.raises(BrokenPipeError):
        write_color(BrokenSink(), Color(0.2, 0.3, 0.4))
