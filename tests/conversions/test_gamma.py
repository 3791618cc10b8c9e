from chromatic.conversions.gamma import gamma_decode, gamma_encode, rgb_to_srgb, srgb_to_rgb
from chromatic.samples.colors import GAMMA_SAMPLES


def test_gamma_encode():
    for linear, encoded in GAMMA_SAMPLES:
        assert abs(gamma_encode(linear) - encoded) < 1e-6


def test_gamma_decode():
    for linear, encoded in GAMMA_SAMPLES:
        assert abs(gamma_decode(encoded) - linear) < 1e-6


def test_linear_segment_below_threshold():
    assert gamma_encode(0.003) == 12.92 * 0.003
    assert gamma_decode(0.04) == 0.04 / 12.92


def test_encode_is_monotonic():
    values = [i / 100 for i in range(101)]
    encoded = [gamma_encode(v) for v in values]
    assert encoded == sorted(encoded)


def test_rgb_srgb_round_trip():
    for i in range(11):
        c = i / 10
        r, g, b = srgb_to_rgb(*rgb_to_srgb(c, c / 2, 1 - c))
        assert abs(r - c) < 1e-9
        assert abs(g - c / 2) < 1e-9
        assert abs(b - (1 - c)) < 1e-9
