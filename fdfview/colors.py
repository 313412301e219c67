"""Height-to-colour palette for wireframe rendering."""

WHITE = 0xFFFFFF
RED = 0xFF0000
YELLOW = 0xFFFF00
GREEN = 0x00FF00
BLUE = 0x0000FF

SHALLOW_WATER = 0x3366FF
WATER = 0x0000FF
DEEP_WATER = 0x0000CC
DEEPER_WATER = 0x000099
ABYSS = 0x000066


def pick_color(z: float) -> int:
    """Return the RGB colour used to draw a point at height ``z``.

    The bands are checked in a fixed order; values that fall on a gap
    between bands (such as exactly -10) come out white.
    """
    if -10.0 < z <= 0.0:
        return SHALLOW_WATER
    if -20.0 <= z < -10.0:
        return WATER
    if -30.0 <= z < -20.0:
        return DEEP_WATER
    if -40.0 <= z < -30.0:
        return DEEPER_WATER
    if z < -40.0:
        return ABYSS
    if 0.0 < z <= 15.0:
        return GREEN
    if 15.0 <= z <= 60.0:
        return YELLOW
    if 60.0 <= z <= 90.0:
        return RED
    return WHITE