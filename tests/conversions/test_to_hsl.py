from chromatic.conversions.to_hsl import hsv_to_hsl, unit_rgb_to_hsl
from chromatic.conversions.to_rgb import hsv_to_unit_rgb
from chromatic.samples.colors import HSL_SAMPLES, HSV_SAMPLES, RGB_SAMPLES


def test_unit_rgb_to_hsl():
    for name, (r, g, b) in RGB_SAMPLES.items():
        h_exp, s_exp, l_exp = HSL_SAMPLES[name]
        h_out, s_out, l_out = unit_rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1e-9, name
        assert abs(s_out - s_exp) < 1e-9, name
        assert abs(l_out - l_exp) < 1e-9, name


def test_hsv_to_hsl():
    for name, (h, s, v) in HSV_SAMPLES.items():
        h_exp, s_exp, l_exp = HSL_SAMPLES[name]
        h_out, s_out, l_out = hsv_to_hsl(h, s, v)

        assert abs(h_out - h_exp) < 1e-9, name
        assert abs(s_out - s_exp) < 1e-9, name
        assert abs(l_out - l_exp) < 1e-9, name


def test_achromatic_hue_is_zero():
    for value in (0.0, 0.25, 0.5, 1.0):
        h, s, l = unit_rgb_to_hsl(value, value, value)
        assert h == 0.0
        assert s == 0.0
        assert l == value


def test_hsv_to_hsl_wraps_hue():
    h, _, _ = hsv_to_hsl(370.0, 1.0, 1.0)
    assert abs(h - 10.0) < 1e-9


def test_hsv_to_hsl_achromatic_matches_rgb_route():
    for hsv in [(120.0, 0.0, 0.5), (300.0, 0.5, 0.0), (90.0, 0.0, 1.0), (10.0, 1.0, 0.0)]:
        direct = hsv_to_hsl(*hsv)
        via_rgb = unit_rgb_to_hsl(*hsv_to_unit_rgb(*hsv))
        assert direct[:2] == (0.0, 0.0), hsv
        assert via_rgb[:2] == (0.0, 0.0), hsv
        assert abs(direct[2] - via_rgb[2]) < 1e-12, hsv


def test_hsv_to_hsl_matches_rgb_route():
    for h in (0.0, 37.5, 120.0, 200.0, 359.0):
        for s in (0.25, 0.5, 1.0):
            for v in (0.2, 0.5, 0.8, 1.0):
                direct = hsv_to_hsl(h, s, v)
                via_rgb = unit_rgb_to_hsl(*hsv_to_unit_rgb(h, s, v))
                assert abs(direct[0] - via_rgb[0]) < 1e-9, (h, s, v)
                assert abs(direct[1] - via_rgb[1]) < 1e-9, (h, s, v)
                assert abs(direct[2] - via_rgb[2]) < 1e-9, (h, s, v)
