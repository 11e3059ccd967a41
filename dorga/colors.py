"""Colour palettes for the rocket, the background and world objects."""

from __future__ import annotations

from typing import NamedTuple


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


BACKGROUND_PALETTES = 21
ROCKET_PALETTES = 2

_ROCKET = (Color(213, 167, 247), Color(189, 129, 237))

_FIRE = (Color(229, 197, 247), Color(229, 197, 247))

_BACKGROUND = (
    Color(133, 60, 217), Color(55, 69, 109), Color(18, 52, 95), Color(0, 63, 102),
    Color(22, 86, 102), Color(55, 100, 102), Color(22, 97, 81), Color(37, 102, 54),
    Color(34, 102, 27), Color(66, 102, 19), Color(88, 102, 27), Color(102, 98, 13),
    Color(102, 83, 12), Color(102, 56, 0), Color(102, 41, 0), Color(102, 27, 0),
    Color(102, 7, 0), Color(102, 0, 51), Color(125, 43, 115), Color(99, 0, 102),
    Color(38, 38, 38),
)

_COIN = (
    Color(236, 176, 246), Color(129, 162, 240), Color(120, 183, 240), Color(0, 147, 239),
    Color(53, 204, 240), Color(130, 237, 240), Color(46, 240, 198), Color(46, 240, 97),
    Color(81, 240, 63), Color(156, 240, 46), Color(206, 239, 61), Color(246, 248, 0),
    Color(240, 194, 28), Color(240, 133, 0), Color(239, 96, 0), Color(240, 63, 0),
    Color(239, 17, 0), Color(239, 0, 119), Color(240, 102, 226), Color(232, 0, 240),
    Color(242, 242, 242),
)

_BACKGROUND_STARS = (
    Color(229, 197, 247), Color(106, 134, 197), Color(44, 125, 231), Color(44, 125, 231),
    Color(43, 166, 197), Color(106, 194, 197), Color(37, 197, 163), Color(37, 197, 80),
    Color(128, 197, 37), Color(128, 197, 37), Color(170, 197, 51), Color(197, 189, 37),
    Color(197, 160, 24), Color(197, 108, 0), Color(197, 79, 0), Color(197, 53, 0),
    Color(197, 13, 0), Color(197, 0, 99), Color(197, 85, 186), Color(191, 0, 197),
    Color(127, 127, 127),
)

_ASTEROID_000 = (
    Color(190, 130, 237), Color(88, 111, 163), Color(31, 88, 163), Color(0, 101, 163),
    Color(36, 138, 163), Color(88, 161, 163), Color(31, 163, 135), Color(31, 163, 66),
    Color(55, 163, 42), Color(106, 163, 31), Color(141, 163, 42), Color(163, 157, 31),
    Color(163, 132, 20), Color(163, 90, 0), Color(163, 55, 0), Color(163, 44, 0),
    Color(163, 11, 0), Color(163, 0, 82), Color(163, 70, 154), Color(158, 0, 163),
    Color(127, 127, 127),
)

_ASTEROID_001 = (
    Color(150, 76, 225), Color(72, 90, 133), Color(25, 70, 129), Color(0, 82, 133),
    Color(29, 112, 133), Color(72, 131, 133), Color(25, 129, 107), Color(25, 133, 54),
    Color(44, 133, 34), Color(95, 133, 45), Color(115, 133, 34), Color(133, 127, 25),
    Color(133, 107, 16), Color(133, 73, 0), Color(133, 53, 0), Color(133, 35, 0),
    Color(133, 9, 0), Color(133, 0, 66), Color(133, 57, 125), Color(128, 0, 133),
    Color(89, 89, 89),
)


class ColorManager:
    """Tracks the selected palette entries and hands out colours."""

    def __init__(self) -> None:
        self._rocket_base = 0
        self._rocket_top = 1
        self._rocket_window = 1
        self._rocket_propeller_000 = 1
        self._rocket_propeller_001 = 1
        self._rocket_propeller_002 = 1
        self._rocket_fire = 1

        self._background = 0
        self._coin = 0
        self._asteroid = 0

    def next_palette(self) -> None:
        """Advance the background, coin and asteroid palettes, wrapping around."""
        self._background = (self._background + 1) % BACKGROUND_PALETTES
        self._coin = (self._coin + 1) % BACKGROUND_PALETTES
        self._asteroid = (self._asteroid + 1) % BACKGROUND_PALETTES

    def rocket_base(self) -> Color:
        return _ROCKET[self._rocket_base]

    def rocket_top(self) -> Color:
        return _ROCKET[self._rocket_top]

    def rocket_window(self) -> Color:
        return _ROCKET[self._rocket_window]

    def rocket_propeller_000(self) -> Color:
        return _ROCKET[self._rocket_propeller_000]

    def rocket_propeller_001(self) -> Color:
        return _ROCKET[self._rocket_propeller_001]

    def rocket_propeller_002(self) -> Color:
        return _ROCKET[self._rocket_propeller_002]

    def rocket_fire(self) -> Color:
        return _FIRE[self._rocket_fire]

    def background(self) -> Color:
        return _BACKGROUND[self._background]

    def coin(self) -> Color:
        return _COIN[self._coin]

    def background_star(self) -> Color:
        return _BACKGROUND_STARS[self._background]

    def asteroid_000(self) -> Color:
        return _ASTEROID_000[self._asteroid]

    def asteroid_001(self) -> Color:
        return _ASTEROID_001[self._asteroid]