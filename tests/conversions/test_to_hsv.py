from chromatic.conversions.to_hsv import hsl_to_hsv, unit_rgb_to_hsv
from chromatic.conversions.to_rgb import hsl_to_unit_rgb
from chromatic.samples.colors import HSL_SAMPLES, HSV_SAMPLES, RGB_SAMPLES


def test_unit_rgb_to_hsv():
    for name, (r, g, b) in RGB_SAMPLES.items():
        h_exp, s_exp, v_exp = HSV_SAMPLES[name]
        h_out, s_out, v_out = unit_rgb_to_hsv(r, g, b)

        assert abs(h_out - h_exp) < 1e-9, name
        assert abs(s_out - s_exp) < 1e-9, name
        assert abs(v_out - v_exp) < 1e-9, name


def test_hsl_to_hsv():
    for name, (h, s, l) in HSL_SAMPLES.items():
        h_exp, s_exp, v_exp = HSV_SAMPLES[name]
        h_out, s_out, v_out = hsl_to_hsv(h, s, l)

        assert abs(h_out - h_exp) < 1e-9, name
        assert abs(s_out - s_exp) < 1e-9, name
        assert abs(v_out - v_exp) < 1e-9, name


def test_black_has_zero_saturation():
    assert unit_rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    assert hsl_to_hsv(120.0, 1.0, 0.0) == (0.0, 0.0, 0.0)


def test_hue_sectors():
    # one colour per 60 degree sector, each with the maximal channel changing
    cases = {
        (1.0, 0.25, 0.0): 15.0,
        (0.75, 1.0, 0.0): 75.0,
        (0.0, 1.0, 0.5): 150.0,
        (0.0, 0.5, 1.0): 210.0,
        (0.5, 0.0, 1.0): 270.0,
        (1.0, 0.0, 0.5): 330.0,
    }
    for rgb, hue in cases.items():
        h, _, _ = unit_rgb_to_hsv(*rgb)
        assert abs(h - hue) < 1e-9, rgb


def test_hsl_to_hsv_achromatic_matches_rgb_route():
    # greys keep no hue, whatever hue they started with
    for hsl in [(120.0, 0.0, 0.5), (200.0, 1.0, 1.0), (45.0, 0.7, 0.0), (300.0, 0.0, 0.2)]:
        direct = hsl_to_hsv(*hsl)
        via_rgb = unit_rgb_to_hsv(*hsl_to_unit_rgb(*hsl))
        assert direct[:2] == (0.0, 0.0), hsl
        assert via_rgb[:2] == (0.0, 0.0), hsl
        assert abs(direct[2] - via_rgb[2]) < 1e-12, hsl


def test_hsl_to_hsv_matches_rgb_route():
    for h in (0.0, 37.5, 120.0, 200.0, 359.0):
        for s in (0.25, 0.5, 1.0):
            for l in (0.2, 0.5, 0.8):
                direct = hsl_to_hsv(h, s, l)
                via_rgb = unit_rgb_to_hsv(*hsl_to_unit_rgb(h, s, l))
                assert abs(direct[0] - via_rgb[0]) < 1e-9, (h, s, l)
                assert abs(direct[1] - via_rgb[1]) < 1e-9, (h, s, l)
                assert abs(direct[2] - via_rgb[2]) < 1e-9, (h, s, l)
