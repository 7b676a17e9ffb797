"""Distance conversions between centimetres, miles and inches."""

from __future__ import annotations

from unitconv.screen import Reader, Writer, _Conversion, _conversion_menu

CENTIMETERS_PER_MILE = 160934.4
CENTIMETERS_PER_INCH = 2.54
INCHES_PER_MILE = 63360


def centimeter_to_mile(value: float) -> float:
    return value / CENTIMETERS_PER_MILE


def centimeter_to_inch(value: float) -> float:
    return value / CENTIMETERS_PER_INCH


def mile_to_centimeter(value: float) -> float:
    return value * CENTIMETERS_PER_MILE


def mile_to_inch(value: float) -> float:
    return value * INCHES_PER_MILE


def inch_to_centimeter(value: float) -> float:
    return value * CENTIMETERS_PER_INCH


def inch_to_mile(value: float) -> float:
    return value / INCHES_PER_MILE


_CONVERSIONS = (
    _Conversion("Centimeter (CM) -> Mile (MI)", "CM", "MI", centimeter_to_mile),
    _Conversion("Centimeter (CM) -> Inch (IN)", "CM", "IN", centimeter_to_inch),
    _Conversion("Mile (MI) -> Centimeter (CM)", "MI", "CM", mile_to_centimeter),
    _Conversion("Mile (MI) -> Inch (IN)", "MI", "IN", mile_to_inch),
    _Conversion("Inch (IN) -> Centimeter (CM)", "IN", "CM", inch_to_centimeter),
    _Conversion("Inch (IN) -> Mile (MI)", "IN", "MI", inch_to_mile),
)


def distance_menu(read: Reader | None = None, write: Writer | None = None) -> None:
    """Interactively convert distances; a value that is not positive ends the menu."""
    _conversion_menu("Distance", _CONVERSIONS, read, write, positive_only=True)