"""Weight conversions between grams, kilograms, ounces and pounds."""

from __future__ import annotations

from unitconv.screen import Reader, Writer, _Conversion, _conversion_menu

GRAMS_PER_POUND = 453.59237
GRAMS_PER_OUNCE = 28.3495
POUNDS_PER_KILOGRAM = 2.20462
OUNCES_PER_KILOGRAM = 35.274
OUNCES_PER_POUND = 16.0


def gram_to_kilogram(value: float) -> float:
    return value / 1000.0


def gram_to_pound(value: float) -> float:
    return value / GRAMS_PER_POUND


def gram_to_ounce(value: float) -> float:
    return value / GRAMS_PER_OUNCE


def kilogram_to_gram(value: float) -> float:
    return value * 1000.0


def kilogram_to_pound(value: float) -> float:
    return value * POUNDS_PER_KILOGRAM


def kilogram_to_ounce(value: float) -> float:
    return value / OUNCES_PER_KILOGRAM


def ounce_to_gram(value: float) -> float:
    return value * GRAMS_PER_OUNCE


def ounce_to_pound(value: float) -> float:
    return value / OUNCES_PER_POUND


def ounce_to_kilogram(value: float) -> float:
    return value / OUNCES_PER_KILOGRAM


def pound_to_gram(value: float) -> float:
    return value * GRAMS_PER_POUND


def pound_to_ounce(value: float) -> float:
    return value * OUNCES_PER_POUND


def pound_to_kilogram(value: float) -> float:
    return value / POUNDS_PER_KILOGRAM


_CONVERSIONS = (
    _Conversion("Gram (G) -> Kilogram (KG)", "G", "KG", gram_to_kilogram),
    _Conversion("Gram (G) -> Pound (LB)", "G", "LB", gram_to_pound),
    _Conversion("Gram (G) -> Ounce (OZ)", "G", "OZ", gram_to_ounce),
    _Conversion("Kilogram (KG) -> Gram (G)", "KG", "G", kilogram_to_gram),
    _Conversion("Kilogram (KG) -> Pound (LB)", "KG", "LB", kilogram_to_pound),
    _Conversion("Kilogram (KG) -> Ounce (OZ)", "KG", "OZ", kilogram_to_ounce),
    _Conversion("Ounce (OZ) -> Gram (G)", "OZ", "G", ounce_to_gram),
    _Conversion("Ounce (OZ) -> Pound (LB)", "OZ", "LB", ounce_to_pound),
    _Conversion("Ounce (OZ) -> Kilogram (KG)", "OZ", "KG", ounce_to_kilogram),
    _Conversion("Pound (LB) -> Gram (G)", "LB", "G", pound_to_gram),
    _Conversion("Pound (LB) -> Ounce (OZ)", "LB", "OZ", pound_to_ounce),
    _Conversion("Pound (LB) -> Kilogram (KG)", "LB", "KG", pound_to_kilogram),
)


def weight_menu(read: Reader | None = None, write: Writer | None = None) -> None:
    """Interactively convert weights; a value that is not positive ends the menu."""
    _conversion_menu("Weight", _CONVERSIONS, read, write, positive_only=True)