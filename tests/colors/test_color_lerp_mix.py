import pytest

from chromatic.colors import Grey, Hsl, HslAlpha, Hsv, Lab, Rgb, RgbAlpha, lerp
from chromatic.utils.interpolate_hue import shortest_hue_delta


def test_lerp_midpoint():
    assert Rgb(0, 0, 0).lerp(Rgb(1, 1, 1), 0.5) == Rgb(0.5, 0.5, 0.5)
    assert Lab(0, -20, 40).lerp(Lab(100, 20, -40), 0.25) == Lab(25, -10, 20)


def test_lerp_endpoints():
    pairs = [
        (Rgb(0.1, 0.2, 0.3), Rgb(0.7, 0.8, 0.9)),
        (Hsl(300, 0.2, 0.4), Hsl(40, 0.9, 0.6)),
        (RgbAlpha(1, 0, 0, 0), RgbAlpha(0, 0, 1, 1)),
    ]
    for a, b in pairs:
        assert a.lerp(b, 0) == a
        assert a.lerp(b, 1).isclose(b, tolerance=1e-12)


def test_hue_takes_shorter_arc():
    assert Hsl(350, 1, 0.5).lerp(Hsl(10, 1, 0.5), 0.5).hue == 0.0
    assert Hsl(10, 1, 0.5).lerp(Hsl(350, 1, 0.5), 0.5).hue == 0.0
    assert Hsv(350, 1, 1).lerp(Hsv(10, 1, 1), 0.25).hue == 355.0
    assert Hsv(0, 1, 1).lerp(Hsv(90, 1, 1), 0.5).hue == 45.0


def test_lerp_extrapolates_without_validation():
    result = Rgb(0, 0, 0).lerp(Rgb(1, 1, 1), 1.5)
    assert result.components == (1.5, 1.5, 1.5)
    assert Hsl(0, 1, 0.5).lerp(Hsl(90, 1, 0.5), -1).hue == 270.0


def test_lerp_different_classes():
    with pytest.raises(TypeError):
        Rgb(0, 0, 0).lerp(Hsl(0, 0, 0), 0.5)
    with pytest.raises(TypeError):
        Rgb(0, 0, 0).lerp(RgbAlpha(0, 0, 0, 1), 0.5)


def test_module_lerp():
    assert lerp(Grey(0), Grey(1), 0.25) == Grey(0.25)


def test_mix_weighted_sum():
    mixed = Rgb.mix([Rgb(1, 0, 0), Rgb(0, 0, 1)], [0.5, 0.5])
    assert mixed == Rgb(0.5, 0, 0.5)
    assert Rgb.mix([Rgb(0.2, 0.4, 0.6)], [1.0]).isclose(Rgb(0.2, 0.4, 0.6), tolerance=1e-12)
    # weights are not normalised
    assert Grey.mix([Grey(0.25), Grey(0.25)], [1, 1]) == Grey(0.5)


def test_mix_uses_circular_hue():
    mixed = Hsl.mix([Hsl(350, 1, 0.5), Hsl(10, 1, 0.5)], [0.5, 0.5])
    assert abs(shortest_hue_delta(mixed.hue, 0.0)) < 1e-9
    assert abs(mixed.saturation - 1.0) < 1e-12

    three = Hsv.mix([Hsv(0, 1, 1), Hsv(120, 1, 1), Hsv(60, 1, 1)], [1, 1, 1])
    assert abs(three.hue - 60.0) < 1e-9

    weighted = HslAlpha.mix([HslAlpha(0, 1, 0.5, 1), HslAlpha(90, 1, 0.5, 0)], [0.25, 0.75])
    assert 45.0 < weighted.hue < 90.0
    assert weighted.alpha == 0.25


def test_mix_opposite_hues():
    mixed = Hsl.mix([Hsl(0, 1, 0.5), Hsl(180, 1, 0.5)], [0.5, 0.5])
    assert mixed.hue == 0.0


def test_mix_errors():
    with pytest.raises(ValueError):
        Rgb.mix([], [])
    with pytest.raises(ValueError):
        Rgb.mix([Rgb(0, 0, 0), Rgb(1, 1, 1)], [1.0])
    with pytest.raises(ValueError):
        Rgb.mix([Rgb(0, 0, 0), Rgb(1, 1, 1)], [1.0, -0.5])
    with pytest.raises(TypeError):
        Rgb.mix([Rgb(0, 0, 0), Hsl(0, 0, 0)], [0.5, 0.5])


def test_isclose():
    assert Hsl(359.999, 1, 0.5).isclose(Hsl(0.001, 1, 0.5))
    assert not Hsl(350, 1, 0.5).isclose(Hsl(10, 1, 0.5))
    assert Rgb(0.5, 0.5, 0.5).isclose(Rgb(0.501, 0.5, 0.5))
    assert not Rgb(0.5, 0.5, 0.5).isclose(Rgb(0.51, 0.5, 0.5))
    with pytest.raises(TypeError):
        Rgb(0, 0, 0).isclose(Hsl(0, 0, 0))
