"""Dyson device state.

The cloud returns device state as a flat mapping of short field codes to
string values. :class:`DeviceState` validates that mapping and
:class:`DeviceStatus` is the typed projection handed to callers.
"""

import logging
from typing import Dict, Mapping, Optional

import attr

from .const import (
    FAN_SPEED_AUTO,
    FIELD_AUTO_MODE,
    FIELD_FAN_SPEED,
    FIELD_HUMIDITY,
    FIELD_NIGHT_MODE,
    FIELD_NO2,
    FIELD_OSCILLATION,
    FIELD_PARTICULATES,
    FIELD_PM10,
    FIELD_PM25,
    FIELD_POWER,
    FIELD_TEMPERATURE,
    FIELD_VOC,
    STATE_ON,
)
from .exceptions import DysonParseError
from .utils import decode_fan_speed, kelvin_tenths_to_celsius

_LOGGER = logging.getLogger(__name__)

REQUIRED_FIELDS = (FIELD_POWER, FIELD_FAN_SPEED)

KNOWN_FIELDS = frozenset(
    (
        FIELD_POWER,
        FIELD_FAN_SPEED,
        FIELD_OSCILLATION,
        FIELD_NIGHT_MODE,
        FIELD_AUTO_MODE,
        FIELD_HUMIDITY,
        FIELD_TEMPERATURE,
        FIELD_PARTICULATES,
        FIELD_PM25,
        FIELD_PM10,
        FIELD_VOC,
        FIELD_NO2,
    )
)

# Any of these being reported means the device has environmental sensors
AIR_QUALITY_FIELDS = (FIELD_PM25, FIELD_PARTICULATES, FIELD_HUMIDITY)


@attr.s(auto_attribs=True, frozen=True)
class AirQuality:
    """Environmental sensor readings."""

    pm25: int
    pm10: int
    voc: int
    no2: int
    humidity: int
    temperature: float  # Celsius


@attr.s(auto_attribs=True, frozen=True)
class DeviceStatus:
    """Semantic device status."""

    serial: str
    name: str
    power: bool
    fan_speed: str  # "auto" or "1".."10"
    oscillation: bool
    night_mode: bool
    auto_mode: bool
    air_quality: Optional[AirQuality]


@attr.s(auto_attribs=True, frozen=True)
class DeviceState:
    """Wire state of a device."""

    fields: Mapping[str, str]

    @classmethod
    def from_raw(cls, raw) -> "DeviceState":
        """Parse raw state returned by the cloud API."""
        if not isinstance(raw, dict):
            raise DysonParseError(
                f"Device state must be an object, got {type(raw).__name__}"
            )
        fields: Dict[str, str] = {}
        for key, value in raw.items():
            # Unused fields and null readings are not reported values
            if key not in KNOWN_FIELDS or value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (str, int)):
                raise DysonParseError(
                    f"Device state field {key} has unexpected value {value!r}"
                )
            fields[key] = str(value)
        for key in REQUIRED_FIELDS:
            if key not in fields:
                raise DysonParseError(f"Device state is missing field {key}")
        fnsp = fields[FIELD_FAN_SPEED]
        if fnsp != FAN_SPEED_AUTO and not fnsp.isdecimal():
            raise DysonParseError(f"Unexpected fan speed {fnsp!r}")
        return cls(fields)

    def get(self, field: str) -> Optional[str]:
        """Return the raw value of a field, or None if not reported."""
        value = self.fields.get(field)
        if not value:
            return None
        return value

    def is_on(self, field: str) -> bool:
        """Return if a switch field is ON."""
        return self.get(field) == STATE_ON

    def reading(self, field: str) -> Optional[int]:
        """Return a numeric sensor reading.

        Sensors report markers such as OFF or INIT while warming up, those
        are treated as not reported.
        """
        value = self.get(field)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            _LOGGER.debug("Ignoring non-numeric %s reading: %s", field, value)
            return None

    @property
    def fan_speed(self) -> str:
        """Return fan speed as "auto" or a plain number."""
        return decode_fan_speed(self.fields[FIELD_FAN_SPEED])

    @property
    def air_quality(self) -> Optional[AirQuality]:
        """Return sensor readings, or None if the device has no sensors."""
        if not any(self.get(field) is not None for field in AIR_QUALITY_FIELDS):
            return None

        pm25 = self.reading(FIELD_PM25)
        if pm25 is None:
            pm25 = self.reading(FIELD_PARTICULATES)
        tact = self.reading(FIELD_TEMPERATURE)
        return AirQuality(
            pm25=pm25 or 0,
            pm10=self.reading(FIELD_PM10) or 0,
            voc=self.reading(FIELD_VOC) or 0,
            no2=self.reading(FIELD_NO2) or 0,
            humidity=self.reading(FIELD_HUMIDITY) or 0,
            temperature=kelvin_tenths_to_celsius(tact) if tact is not None else 0,
        )

    def to_status(self, serial: str, name: str) -> DeviceStatus:
        """Project the wire state into a semantic status."""
        return DeviceStatus(
            serial=serial,
            name=name,
            power=self.is_on(FIELD_POWER),
            fan_speed=self.fan_speed,
            oscillation=self.is_on(FIELD_OSCILLATION),
            night_mode=self.is_on(FIELD_NIGHT_MODE),
            auto_mode=self.is_on(FIELD_AUTO_MODE),
            air_quality=self.air_quality,
        )
