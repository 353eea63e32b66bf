"""Tools exposed to MCP hosts.

Each tool maps onto one :class:`~dyson_mcp.client.DysonClient` operation and
renders its result as indented JSON text. Errors never escape a tool call;
they are returned as a :class:`ToolResult` flagged with ``is_error``.
"""

import json
import logging
from typing import Any, Callable, Dict, Optional

import attr

from .client import DysonClient
from .exceptions import (
    DysonException,
    DysonInvalidToolArgument,
    DysonUnknownTool,
)
from .state import AirQuality, DeviceStatus
from .utils import (
    celsius_to_fahrenheit,
    classify_air_quality,
    describe_humidity,
    describe_index,
    format_temperature,
)

_LOGGER = logging.getLogger(__name__)

TOOL_GET_DEVICE_STATUS = "get_device_status"
TOOL_SET_FAN_SPEED = "set_fan_speed"
TOOL_SET_OSCILLATION = "set_oscillation"
TOOL_GET_AIR_QUALITY = "get_air_quality"
TOOL_SET_NIGHT_MODE = "set_night_mode"

ATTR_DEVICE_ID = "device_id"
ATTR_SPEED = "speed"
ATTR_ENABLED = "enabled"

CONCENTRATION_UNIT = "µg/m³"

_DEVICE_ID_SCHEMA = {
    "type": "string",
    "description": "Device serial number (optional, defaults to first device)",
}

TOOL_SCHEMA = [
    {
        "name": TOOL_GET_DEVICE_STATUS,
        "description": "Get current status of a Dyson device including power state, fan speed, oscillation, night mode, and air quality",
        "inputSchema": {
            "type": "object",
            "properties": {ATTR_DEVICE_ID: _DEVICE_ID_SCHEMA},
            "required": [],
        },
    },
    {
        "name": TOOL_SET_FAN_SPEED,
        "description": 'Set the fan speed of a Dyson device. Speed can be 1-10 or "auto"',
        "inputSchema": {
            "type": "object",
            "properties": {
                ATTR_DEVICE_ID: _DEVICE_ID_SCHEMA,
                ATTR_SPEED: {
                    "type": "string",
                    "description": 'Fan speed: 1-10 or "auto"',
                },
            },
            "required": [ATTR_SPEED],
        },
    },
    {
        "name": TOOL_SET_OSCILLATION,
        "description": "Enable or disable oscillation on a Dyson device",
        "inputSchema": {
            "type": "object",
            "properties": {
                ATTR_DEVICE_ID: _DEVICE_ID_SCHEMA,
                ATTR_ENABLED: {
                    "type": "boolean",
                    "description": "true to enable oscillation, false to disable",
                },
            },
            "required": [ATTR_ENABLED],
        },
    },
    {
        "name": TOOL_GET_AIR_QUALITY,
        "description": "Get current air quality readings from a Dyson device including PM2.5, PM10, VOC, NO2, humidity, and temperature",
        "inputSchema": {
            "type": "object",
            "properties": {ATTR_DEVICE_ID: _DEVICE_ID_SCHEMA},
            "required": [],
        },
    },
    {
        "name": TOOL_SET_NIGHT_MODE,
        "description": "Enable or disable night mode on a Dyson device. Night mode reduces noise and dims the display",
        "inputSchema": {
            "type": "object",
            "properties": {
                ATTR_DEVICE_ID: _DEVICE_ID_SCHEMA,
                ATTR_ENABLED: {
                    "type": "boolean",
                    "description": "true to enable night mode, false to disable",
                },
            },
            "required": [ATTR_ENABLED],
        },
    },
]


@attr.s(auto_attribs=True, frozen=True)
class ToolResult:
    """Text result of a tool call."""

    text: str
    is_error: bool = False


def _on_off(value: bool) -> str:
    return "on" if value else "off"


def _dumps(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _device_id(arguments: Dict[str, Any]) -> Optional[str]:
    device_id = arguments.get(ATTR_DEVICE_ID)
    if device_id is not None and not isinstance(device_id, str):
        raise DysonInvalidToolArgument("device_id must be a string")
    return device_id or None


def _enabled(arguments: Dict[str, Any]) -> bool:
    enabled = arguments.get(ATTR_ENABLED)
    if not isinstance(enabled, bool):
        raise DysonInvalidToolArgument("Enabled parameter is required (true/false)")
    return enabled


def format_status(status: DeviceStatus) -> dict:
    """Render a device status for the get_device_status tool."""
    air_quality = status.air_quality
    return {
        "device": {
            "serial": status.serial,
            "name": status.name,
        },
        "state": {
            "power": _on_off(status.power),
            "fanSpeed": status.fan_speed,
            "oscillation": _on_off(status.oscillation),
            "nightMode": _on_off(status.night_mode),
            "autoMode": _on_off(status.auto_mode),
        },
        "airQuality": {
            "pm25": air_quality.pm25,
            "pm10": air_quality.pm10,
            "voc": air_quality.voc,
            "no2": air_quality.no2,
            "humidity": f"{air_quality.humidity}%",
            "temperature": format_temperature(air_quality.temperature),
            "level": classify_air_quality(air_quality.pm25),
        }
        if air_quality is not None
        else None,
    }


def format_air_quality(air_quality: AirQuality) -> dict:
    """Render sensor readings for the get_air_quality tool."""
    return {
        "pm25": {
            "value": air_quality.pm25,
            "unit": CONCENTRATION_UNIT,
            "level": classify_air_quality(air_quality.pm25),
        },
        "pm10": {
            "value": air_quality.pm10,
            "unit": CONCENTRATION_UNIT,
        },
        "voc": {
            "value": air_quality.voc,
            "unit": "index",
            "description": describe_index(air_quality.voc),
        },
        "no2": {
            "value": air_quality.no2,
            "unit": "index",
            "description": describe_index(air_quality.no2),
        },
        "humidity": {
            "value": air_quality.humidity,
            "unit": "%",
            "description": describe_humidity(air_quality.humidity),
        },
        "temperature": {
            "celsius": air_quality.temperature,
            "fahrenheit": celsius_to_fahrenheit(air_quality.temperature),
        },
    }


class DysonTools:
    """Dispatch MCP tool calls to a Dyson client."""

    def __init__(self, client: DysonClient):
        """Initialize the dispatcher."""
        self._client = client
        self._handlers: Dict[str, Callable[[Dict[str, Any]], dict]] = {
            TOOL_GET_DEVICE_STATUS: self._get_device_status,
            TOOL_SET_FAN_SPEED: self._set_fan_speed,
            TOOL_SET_OSCILLATION: self._set_oscillation,
            TOOL_GET_AIR_QUALITY: self._get_air_quality,
            TOOL_SET_NIGHT_MODE: self._set_night_mode,
        }

    @property
    def names(self):
        """Return the names of the available tools."""
        return list(self._handlers)

    def call(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """Run a tool and return its result text."""
        _LOGGER.debug("Calling tool %s with %s", name, arguments)
        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise DysonUnknownTool(name)
            return ToolResult(_dumps(handler(arguments or {})))
        except DysonException as err:
            _LOGGER.warning("Tool %s failed: %s", name, err)
            return ToolResult(f"Error: {err}", is_error=True)
        except Exception as err:  # pylint: disable=broad-except
            _LOGGER.exception("Unexpected error in tool %s", name)
            return ToolResult(f"Error: {err}", is_error=True)

    def _get_device_status(self, arguments: Dict[str, Any]) -> dict:
        status = self._client.get_status(_device_id(arguments))
        return format_status(status)

    def _set_fan_speed(self, arguments: Dict[str, Any]) -> dict:
        speed = arguments.get(ATTR_SPEED)
        if speed is None or speed == "":
            raise DysonInvalidToolArgument('Speed is required. Use 1-10 or "auto"')
        status = self._client.set_fan_speed(_device_id(arguments), str(speed))
        return {
            "message": f"Fan speed set to {status.fan_speed}",
            "device": status.name,
            "newState": {
                "power": _on_off(status.power),
                "fanSpeed": status.fan_speed,
                "autoMode": _on_off(status.auto_mode),
            },
        }

    def _set_oscillation(self, arguments: Dict[str, Any]) -> dict:
        enabled = _enabled(arguments)
        status = self._client.set_oscillation(_device_id(arguments), enabled)
        return {
            "message": f"Oscillation {'enabled' if enabled else 'disabled'}",
            "device": status.name,
            "oscillation": _on_off(status.oscillation),
        }

    def _get_air_quality(self, arguments: Dict[str, Any]) -> dict:
        air_quality = self._client.get_air_quality(_device_id(arguments))
        return format_air_quality(air_quality)

    def _set_night_mode(self, arguments: Dict[str, Any]) -> dict:
        enabled = _enabled(arguments)
        status = self._client.set_night_mode(_device_id(arguments), enabled)
        return {
            "message": f"Night mode {'enabled' if enabled else 'disabled'}",
            "device": status.name,
            "nightMode": _on_off(status.night_mode),
        }
