import numpy as np
import pytest

from lumachroma.palettes import qualitative, Palette
from lumachroma.errors import InvalidCount


def hue_distance(a, b):
    return np.abs((np.asarray(a) - np.asarray(b) + 180.0) % 360.0 - 180.0)


def test_qualitative_lch():
    lch = qualitative.qualitative_lch(65.0, 100.0, (15.0, 285.0), 4)
    assert lch.shape == (4, 3)
    assert lch[:, 0].tolist() == [65.0] * 4
    assert lch[:, 1].tolist() == [100.0] * 4
    assert lch[:, 2].tolist() == [15.0, 105.0, 195.0, 285.0]


def test_default_hues():
    assert qualitative.default_hues(4) == (15.0, 285.0)
    assert qualitative.default_hues(2) == (15.0, 195.0)
    with pytest.raises(InvalidCount):
        qualitative.default_hues(1)


def test_basic_hues_evenly_spaced():
    palette = qualitative.basic(4)
    assert isinstance(palette, Palette)
    assert len(palette) == 4
    hues = palette.to_lch()[:, 2]
    # out-of-gamut colors get clipped, which shifts hue a little
    assert np.all(hue_distance(hues, [15.0, 105.0, 195.0, 285.0]) < 6.0)


@pytest.mark.parametrize("n", [2, 3, 8, 12])
def test_basic_length(n):
    palette = qualitative.basic(n)
    assert len(palette) == n


@pytest.mark.parametrize("n", [1, 0, 2.5])
def test_basic_invalid_count(n):
    with pytest.raises(InvalidCount):
        qualitative.basic(n)


def test_full_in_gamut_keeps_luminance_and_chroma():
    palette = qualitative.full(60.0, 30.0, (0.0, 300.0), 6)
    lch = palette.to_lch()
    assert np.allclose(lch[:, 0], 60.0, atol=1.0)
    assert np.allclose(lch[:, 1], 30.0, atol=2.0)
    assert np.all(hue_distance(lch[:, 2], [0.0, 60.0, 120.0, 180.0, 240.0, 300.0]) < 4.0)


def test_for_hues_defaults():
    assert qualitative.for_hues((15.0, 285.0), 4) == qualitative.basic(4)
    assert qualitative.for_hues((0.0, 90.0), 3) == qualitative.full(65.0, 100.0, (0.0, 90.0), 3)


def test_cold_and_warm():
    assert qualitative.cold_hues(5) == qualitative.for_hues((270.0, 150.0), 5)
    assert qualitative.warm_hues(5) == qualitative.for_hues((90.0, -30.0), 5)
    assert qualitative.warm_hues(3).hex_codes() != qualitative.cold_hues(3).hex_codes()


def test_deterministic():
    assert qualitative.basic(6) == qualitative.basic(6)
