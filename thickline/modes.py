"""Overlap flags and thickness modes for line rasterization."""

import enum


class Overlap(enum.IntFlag):
    """Extra pixels drawn when a Bresenham step changes the minor coordinate.

    Sample line:
        00+
         -0000+
             -0000+
                 -00

      0 pixels are drawn for a plain line (NONE)
      + pixels are added by MAJOR
      - pixels are added by MINOR
    """

    NONE = 0
    # Step the main direction first, then the minor one
    MAJOR = 1 << 0
    # Step the minor direction first, then the main one
    MINOR = 1 << 1
    BOTH = MAJOR | MINOR


class ThicknessMode(enum.Enum):
    """Which side of the requested line the thickness grows on."""

    MIDDLE = "middle"
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


def draw_start_adjust_count(thickness: int, mode: ThicknessMode) -> int:
    """Number of offset lines drawn before the requested line position."""
    if mode is ThicknessMode.COUNTERCLOCKWISE:
        return thickness - 1
    if mode is ThicknessMode.CLOCKWISE:
        return 0
    if mode is ThicknessMode.MIDDLE:
        return thickness // 2
    raise ValueError(f"Unknown thickness mode: {mode!r}")
