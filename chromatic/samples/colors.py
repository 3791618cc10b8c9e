"""Reference colours in every space, keyed by name.

Rgb here is linear light, so for the primaries and black/white it equals
sRGB. Lab and XYZ are relative to D65.
"""

RGB_SAMPLES = {
    "red": (1.0, 0.0, 0.0),
    "green": (0.0, 1.0, 0.0),
    "blue": (0.0, 0.0, 1.0),
    "yellow": (1.0, 1.0, 0.0),
    "cyan": (0.0, 1.0, 1.0),
    "magenta": (1.0, 0.0, 1.0),
    "white": (1.0, 1.0, 1.0),
    "black": (0.0, 0.0, 0.0),
    "grey": (0.5, 0.5, 0.5),
    "orange": (1.0, 0.5, 0.0),
    "teal": (0.0, 0.5, 0.5),
}

HSL_SAMPLES = {
    "red": (0.0, 1.0, 0.5),
    "green": (120.0, 1.0, 0.5),
    "blue": (240.0, 1.0, 0.5),
    "yellow": (60.0, 1.0, 0.5),
    "cyan": (180.0, 1.0, 0.5),
    "magenta": (300.0, 1.0, 0.5),
    "white": (0.0, 0.0, 1.0),
    "black": (0.0, 0.0, 0.0),
    "grey": (0.0, 0.0, 0.5),
    "orange": (30.0, 1.0, 0.5),
    "teal": (180.0, 1.0, 0.25),
}

HSV_SAMPLES = {
    "red": (0.0, 1.0, 1.0),
    "green": (120.0, 1.0, 1.0),
    "blue": (240.0, 1.0, 1.0),
    "yellow": (60.0, 1.0, 1.0),
    "cyan": (180.0, 1.0, 1.0),
    "magenta": (300.0, 1.0, 1.0),
    "white": (0.0, 0.0, 1.0),
    "black": (0.0, 0.0, 0.0),
    "grey": (0.0, 0.0, 0.5),
    "orange": (30.0, 1.0, 1.0),
    "teal": (180.0, 1.0, 0.5),
}

XYZ_SAMPLES = {
    "red": (0.4124564, 0.2126729, 0.0193339),
    "green": (0.3575761, 0.7151522, 0.1191920),
    "blue": (0.1804375, 0.0721750, 0.9503041),
    "white": (0.95047, 1.0, 1.08883),
    "black": (0.0, 0.0, 0.0),
}

LAB_SAMPLES = {
    "red": (53.2408, 80.0925, 67.2032),
    "green": (87.7347, -86.1827, 83.1793),
    "blue": (32.2970, 79.1875, -107.8602),
    "white": (100.0, 0.0, 0.0),
    "black": (0.0, 0.0, 0.0),
}

GREY_SAMPLES = {
    "red": (0.2126,),
    "green": (0.7152,),
    "blue": (0.0722,),
    "white": (1.0,),
    "black": (0.0,),
    "grey": (0.5,),
}

# (linear, gamma encoded) pairs
GAMMA_SAMPLES = [
    (0.0, 0.0),
    (1.0, 1.0),
    (0.5, 0.7353569),
    (0.2140411, 0.5),
    (0.002, 0.02584),
]

HEX_SAMPLES = {
    "#FF0000": (1.0, 0.0, 0.0),
    "#00FF00": (0.0, 1.0, 0.0),
    "#0000FF": (0.0, 0.0, 1.0),
    "#FFFFFF": (1.0, 1.0, 1.0),
    "#000000": (0.0, 0.0, 0.0),
    "#336699": (0.2, 0.4, 0.6),
}

__all__ = [
    "RGB_SAMPLES",
    "HSL_SAMPLES",
    "HSV_SAMPLES",
    "XYZ_SAMPLES",
    "LAB_SAMPLES",
    "GREY_SAMPLES",
    "GAMMA_SAMPLES",
    "HEX_SAMPLES",
]
