"""Utility functions for dyson_mcp."""

import math
from typing import Union

from .const import (
    AIR_QUALITY_HAZARDOUS,
    AIR_QUALITY_LEVELS,
    FAN_SPEED_AUTO,
    FAN_SPEED_RANGE,
)
from .exceptions import DysonInvalidFanSpeed

Number = Union[int, float]

# 273.15 K in tenths, with the half rounded down
KELVIN_OFFSET_TENTHS = 2732


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def encode_fan_speed(speed: Union[str, int]) -> str:
    """Encode "auto" or 1-10 into the wire fan speed."""
    text = str(speed).strip()
    if text.upper() == FAN_SPEED_AUTO:
        return FAN_SPEED_AUTO
    if not text.isdecimal():
        raise DysonInvalidFanSpeed(speed)
    value = int(text)
    low, high = FAN_SPEED_RANGE
    if not low <= value <= high:
        raise DysonInvalidFanSpeed(speed)
    return f"{value:04d}"


def decode_fan_speed(fnsp: str) -> str:
    """Decode the wire fan speed into "auto" or a plain number."""
    if fnsp == FAN_SPEED_AUTO:
        return "auto"
    return str(int(fnsp))


def kelvin_tenths_to_celsius(value: int) -> float:
    """Convert a temperature in tenths of kelvin to celsius with one decimal.

    Every wire value lands exactly on a half (2982 is 25.05 C), halves are
    rounded down so 2982 gives 25.0 and 2983 gives 25.1.
    """
    return (value - KELVIN_OFFSET_TENTHS) / 10


def classify_air_quality(pm25: Number) -> str:
    """Return the air quality level for a PM2.5 reading."""
    for upper_bound, label in AIR_QUALITY_LEVELS:
        if pm25 <= upper_bound:
            return label
    return AIR_QUALITY_HAZARDOUS


def celsius_to_fahrenheit(celsius: Number) -> int:
    """Convert celsius to whole degrees fahrenheit."""
    return round_half_up(celsius * 9 / 5 + 32)


def format_temperature(celsius: Number, unit: str = "C") -> str:
    """Format a celsius temperature for display."""
    unit = unit.upper()
    if unit == "C":
        return f"{celsius}°C"
    if unit == "F":
        return f"{celsius_to_fahrenheit(celsius)}°F"
    raise ValueError(f"Unsupported temperature unit: {unit}")


def describe_index(value: Number) -> str:
    """Describe a VOC or NO2 index reading."""
    if value < 3:
        return "Low"
    if value < 6:
        return "Moderate"
    return "High"


def describe_humidity(value: Number) -> str:
    """Describe a relative humidity reading."""
    if value < 30:
        return "Too dry"
    if value > 60:
        return "Too humid"
    return "Comfortable"
