# No dependencies
from enum import Enum


class HexLength(int, Enum):
    """Digits per channel in a hex string."""
    SHORT = 1
    LONG = 2


BYTE_MAX = 255
HEX_PREFIX = "#"
COMPONENT_SEPARATOR = ","

# Default tolerance for approximate colour comparison: half a byte step.
DEFAULT_TOLERANCE = 1.0 / 256.0

# Format spec accepted by format(colour, "hex").
HEX_FORMAT_SPEC = "hex"

HUE_360 = 360.0
HUE_HALF_TURN = 180.0
