import itertools

import numpy as np
import pytest

from lumachroma.conversions.hex_codec import color_to_hex, hex_to_color, np_colors_to_hex, np_hex_to_colors
from lumachroma.errors import InvalidFormat, PaletteError
from ..samples import samples_rgb_hex, invalid_hex


def test_color_to_hex():
    for rgb, code in samples_rgb_hex.items():
        assert color_to_hex(rgb) == code


def test_hex_to_color():
    for rgb, code in samples_rgb_hex.items():
        assert hex_to_color(code) == rgb


def test_lowercase_is_accepted():
    assert hex_to_color("#abcdef") == (171, 205, 239)
    assert hex_to_color("#aBcDeF") == (171, 205, 239)


def test_hex_round_trip_is_exact():
    for rgb in itertools.product(range(0, 256, 15), repeat=3):
        assert hex_to_color(color_to_hex(rgb)) == rgb


@pytest.mark.parametrize("text", invalid_hex)
def test_invalid_format(text):
    with pytest.raises(InvalidFormat):
        hex_to_color(text)


def test_invalid_format_is_a_value_error():
    with pytest.raises(ValueError):
        hex_to_color("not-a-color")
    with pytest.raises(PaletteError) as excinfo:
        hex_to_color("#GGHHII")
    assert excinfo.value.text == "#GGHHII"


def test_non_string_is_invalid():
    with pytest.raises(InvalidFormat):
        hex_to_color(0xFF0000)


def test_color_out_of_range():
    with pytest.raises(ValueError):
        color_to_hex((256, 0, 0))
    with pytest.raises(ValueError):
        color_to_hex((0, -1, 0))


def test_np_colors_to_hex():
    colors = np.array([[255, 0, 0], [0, 128, 255]], dtype=np.uint8)
    assert np_colors_to_hex(colors) == ["#FF0000", "#0080FF"]


def test_np_hex_to_colors():
    colors = np_hex_to_colors(["#FF0000", "#0080ff"])
    assert colors.dtype == np.uint8
    assert colors.tolist() == [[255, 0, 0], [0, 128, 255]]
    assert np_hex_to_colors([]).shape == (0, 3)


def test_every_channel_value_round_trips():
    for c in range(256):
        rgb = (c, 255 - c, (c * 7) % 256)
        assert hex_to_color(color_to_hex(rgb)) == rgb
