import numpy as np
import pytest

from lumachroma.colors import ColorRGB
from lumachroma.palettes import diverging
from lumachroma.errors import InvalidCount


def hue_distance(a, b):
    return abs((a - b + 180.0) % 360.0 - 180.0)


def test_diverging_lch():
    lch = diverging.diverging_lch((1.5, 1.5), (30.0, 90.0), 80.0, (260.0, 0.0), 5)
    assert lch.shape == (5, 3)
    assert lch[0].tolist() == [30.0, 80.0, 260.0]
    assert lch[2].tolist() == [90.0, 0.0, 0.0]
    assert lch[-1].tolist() == [30.0, 80.0, 0.0]
    assert lch[1, 2] == 260.0
    assert lch[3, 2] == 0.0
    assert lch[1, 0] == pytest.approx(90.0 - 60.0 * 0.5 ** 1.5)


def test_symmetric_luminance_and_chroma():
    lch = diverging.diverging_lch((1.5, 1.5), (30.0, 90.0), 80.0, (260.0, 0.0), 8)
    assert np.allclose(lch[:, 0], lch[::-1, 0])
    assert np.allclose(lch[:, 1], lch[::-1, 1])


def test_basic_seven(no_runtime_warnings):
    palette = diverging.basic(7)
    assert len(palette) == 7
    lch = palette.to_lch()
    assert lch[3, 1] < 1.0
    assert palette[3] == ColorRGB((227, 227, 227))
    assert hue_distance(lch[0, 2], 260.0) < 2.0
    assert hue_distance(lch[-1, 2], 0.0) < 2.0
    assert np.allclose(lch[:, 0], lch[::-1, 0], atol=1.0)


def test_even_count_has_no_neutral_center():
    lch = diverging.basic(6).to_lch()
    assert np.all(lch[:, 1] > 5.0)


def test_presets():
    assert diverging.basic(5) == diverging.for_hues((260.0, 0.0), 5)
    assert diverging.for_hues((130.0, 43.0), 9) == diverging.full((1.5, 1.5), (30.0, 90.0), 80.0, (130.0, 43.0), 9)


@pytest.mark.parametrize("n", [1, 0, 2.5])
def test_invalid_count(n):
    with pytest.raises(InvalidCount):
        diverging.basic(n)
