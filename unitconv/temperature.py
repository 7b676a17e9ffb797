"""Temperature conversions between Celsius, Fahrenheit and Kelvin."""

from __future__ import annotations

from unitconv.screen import Reader, Writer, _Conversion, _conversion_menu


def celsius_to_fahrenheit(value: float) -> float:
    return value * 1.8 + 32


def celsius_to_kelvin(value: float) -> float:
    return value + 273.15


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32) * 5.0 / 9.0


def fahrenheit_to_kelvin(value: float) -> float:
    return (value - 32) * 5.0 / 9.0 + 273.15


def kelvin_to_celsius(value: float) -> float:
    return value - 273.15


def kelvin_to_fahrenheit(value: float) -> float:
    return (value - 273.15) * 1.8 + 32


_CONVERSIONS = (
    _Conversion("Celsius (°C) -> Fahrenheit (°F)", "°C", "°F", celsius_to_fahrenheit),
    _Conversion("Celsius (°C) -> Kelvin (K)", "°C", "K", celsius_to_kelvin),
    _Conversion("Fahrenheit (°F) -> Celsius (°C)", "°F", "°C", fahrenheit_to_celsius),
    _Conversion("Fahrenheit (°F) -> Kelvin (K)", "°F", "K", fahrenheit_to_kelvin),
    _Conversion("Kelvin (K) -> Celsius (°C)", "K", "°C", kelvin_to_celsius),
    _Conversion("Kelvin (K) -> Fahrenheit (°F)", "K", "°F", kelvin_to_fahrenheit),
)


def temperature_menu(read: Reader | None = None, write: Writer | None = None) -> None:
    """Interactively convert temperatures; any number, even negative, is accepted."""
    _conversion_menu("Temperature", _CONVERSIONS, read, write, positive_only=False)