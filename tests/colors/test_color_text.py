import numpy as np
import pytest

from chromatic.colors import Grey, GreyAlpha, Hsl, Hsv, Lab, Rgb, RgbAlpha, Srgb, Xyz
from chromatic.errors import ColourParsingError, InvalidColourError
from chromatic.samples.colors import HEX_SAMPLES, HSL_SAMPLES, LAB_SAMPLES, RGB_SAMPLES


def test_to_hex():
    assert Rgb(1, 0, 0).to_hex() == "#FF0000"
    assert Rgb(1, 0.5, 0).to_hex() == "#FF8000"
    assert RgbAlpha(0, 0, 1, 0.5).to_hex() == "#0000FF80"
    assert Grey(0.5).to_hex() == "#80"
    assert GreyAlpha(1, 0).to_hex() == "#FF00"
    for text, rgb in HEX_SAMPLES.items():
        assert Rgb(*rgb).to_hex() == text
        assert Srgb(*rgb).to_hex() == text


def test_from_hex():
    assert Rgb.from_hex("#00FF00") == Rgb(0, 1, 0)
    for text, rgb in HEX_SAMPLES.items():
        assert Rgb.from_hex(text) == Rgb(*rgb)
        assert Rgb.from_hex(text.lower().lstrip("#")) == Rgb(*rgb)


def test_from_hex_short_forms():
    assert Rgb.from_hex("#F80") == Rgb.from_hex("#FF8800")
    assert RgbAlpha.from_hex("#F808") == RgbAlpha.from_hex("#FF880088")
    assert Grey.from_hex("8") == Grey.from_hex("88")
    assert GreyAlpha.from_hex("#8F") == GreyAlpha.from_hex("#88FF")


def test_from_hex_whitespace_and_case():
    assert Rgb.from_hex("  #ff8000 ") == Rgb.from_hex("#FF8000")


def test_from_hex_alpha():
    rgba = RgbAlpha.from_hex("#FF000080")
    assert rgba.components[:3] == (1.0, 0.0, 0.0)
    assert rgba.alpha == 128 / 255


def test_hub_spaces_use_rgb_hex():
    for name, hsl in HSL_SAMPLES.items():
        hsl_colour = Hsl.from_hex(Rgb(*RGB_SAMPLES[name]).to_hex())
        assert hsl_colour.to_rgb().isclose(Rgb(*RGB_SAMPLES[name]), tolerance=1e-9), name
    assert Hsv(120, 1, 1).to_hex() == "#00FF00"
    assert Lab(*LAB_SAMPLES["red"]).to_hex() == "#FF0000"
    assert Xyz.from_hex("#FFFFFF").to_hex() == "#FFFFFF"


def test_malformed_hex():
    for text in ["", "#", "#12345", "#1234567", "#GG0000", "red", "#FF 000", "0x00FF00"]:
        with pytest.raises(ColourParsingError):
            Rgb.from_hex(text)
    with pytest.raises(ColourParsingError):
        Grey.from_hex("#FF0000")
    with pytest.raises(ColourParsingError) as exc_info:
        Rgb.from_hex("#XYZ")
    assert exc_info.value.text == "#XYZ"


def test_bytes():
    assert Rgb.from_bytes([255, 0, 0]) == Rgb(1, 0, 0)
    assert Rgb(0.5, 0.5, 0.5).to_bytes() == (128, 128, 128)
    assert Grey.from_bytes((0,)) == Grey(0)
    assert RgbAlpha(1, 1, 1, 0).to_bytes() == (255, 255, 255, 0)
    assert Hsl(0, 1, 0.5).to_bytes() == (255, 0, 0)
    for data in ([256, 0, 0], [-1, 0, 0], [1, 2], [1, 2, 3, 4], [0.5, 0, 0]):
        with pytest.raises(ColourParsingError):
            Rgb.from_bytes(data)


def test_from_bytes_accepts_numpy_integers():
    assert Rgb.from_bytes(np.array([255, 0, 0], dtype=np.uint8)) == Rgb(1, 0, 0)
    assert RgbAlpha.from_bytes(np.array([0, 255, 0, 51], dtype=np.int64)) == RgbAlpha(0, 1, 0, 0.2)
    assert Grey.from_bytes([np.uint8(0)]) == Grey(0)
    assert Rgb.from_hex("#FF8000").to_bytes() == Rgb.from_bytes(np.array([255, 128, 0])).to_bytes()
    for data in ([True, 0, 0], np.array([256, 0, 0]), [np.float64(1.0), 0, 0]):
        with pytest.raises(ColourParsingError):
            Rgb.from_bytes(data)


def test_to_bytes_clamps():
    assert Rgb(1, 0, 0).lerp(Rgb(0, 0, 0), -1).to_bytes() == (255, 0, 0)
    assert Rgb(0, 0, 0).lerp(Rgb(1, 1, 1), -0.5).to_bytes() == (0, 0, 0)


def test_hex_round_trip():
    for i in range(21):
        c = i / 20
        rgb = Rgb(c, 1 - c, c / 2)
        back = Rgb.from_hex(rgb.to_hex())
        assert rgb.isclose(back, tolerance=1 / 255)


def test_to_rgb_bytes():
    assert Hsl(120, 1, 0.5).to_rgb_bytes() == (0, 255, 0)
    assert GreyAlpha(1, 0.5).to_rgb_bytes() == (255, 255, 255)


def test_repr():
    assert repr(Rgb(1, 0.5, 0)) == "Rgb(r=1.0, g=0.5, b=0.0)"
    hsla = Hsl(10, 0.5, 0.25).with_alpha(1.0)
    assert repr(hsla) == "HslAlpha(hue=10.0, saturation=0.5, lightness=0.25, alpha=1.0)"


def test_str_and_format():
    rgb = Rgb(1, 0.5, 0)
    assert str(rgb) == "1, 0.5, 0"
    assert rgb.to_string() == "1, 0.5, 0"
    assert f"{rgb}" == "1, 0.5, 0"
    assert f"{rgb:.2f}" == "1.00, 0.50, 0.00"
    assert f"{rgb:hex}" == "#FF8000"
    assert format(Lab(50, -20.5, 3), ".1f") == "50.0, -20.5, 3.0"


def test_from_string():
    assert Rgb.from_string("0.2, 0.4, 0.6") == Rgb(0.2, 0.4, 0.6)
    assert Rgb.from_string("#336699") == Rgb(0.2, 0.4, 0.6)
    assert Hsl.from_string("370,1,0.5") == Hsl(10, 1, 0.5)
    assert RgbAlpha.from_string(" 1 , 0 , 0 , 0.5 ") == RgbAlpha(1, 0, 0, 0.5)


def test_string_round_trip():
    for colour in (Rgb(0.25, 0.5, 0.75), Hsv(200, 0.1, 0.9), Lab(12.5, -3, 40)):
        assert type(colour).from_string(colour.to_string()) == colour


def test_malformed_string():
    for text in ["1, 2", "1, 2, 3, 4", "a, b, c", "", "1;2;3"]:
        with pytest.raises(ColourParsingError):
            Rgb.from_string(text)
    with pytest.raises(InvalidColourError):
        Rgb.from_string("2, 0, 0")
    with pytest.raises(InvalidColourError):
        Rgb.from_string("nan, 0, 0")
