"""Tests for the MCP tool dispatcher."""

import json
from unittest.mock import MagicMock

import pytest

from dyson_mcp.client import DysonClient
from dyson_mcp.exceptions import (
    DysonAirQualityUnavailable,
    DysonDeviceNotFound,
    DysonInvalidFanSpeed,
    DysonNetworkError,
)
from dyson_mcp.state import AirQuality, DeviceStatus
from dyson_mcp.tools import TOOL_SCHEMA, DysonTools

from .conftest import SERIAL

AIR_QUALITY = AirQuality(pm25=15, pm10=20, voc=3, no2=1, humidity=45, temperature=25.0)

STATUS = DeviceStatus(
    serial=SERIAL,
    name="Living Room",
    power=True,
    fan_speed="7",
    oscillation=False,
    night_mode=True,
    auto_mode=False,
    air_quality=AIR_QUALITY,
)


@pytest.fixture
def client():
    """Return a mocked Dyson client."""
    client = MagicMock(spec=DysonClient)
    client.get_status.return_value = STATUS
    client.get_air_quality.return_value = AIR_QUALITY
    client.set_fan_speed.return_value = STATUS
    client.set_oscillation.return_value = STATUS
    client.set_night_mode.return_value = STATUS
    return client


@pytest.fixture
def tools(client):
    """Return the dispatcher."""
    return DysonTools(client)


def test_tool_schema_matches_handlers(tools):
    """Test that every listed tool has a handler."""
    assert sorted(tool["name"] for tool in TOOL_SCHEMA) == sorted(tools.names)
    for tool in TOOL_SCHEMA:
        assert "device_id" in tool["inputSchema"]["properties"]
        assert "device_id" not in tool["inputSchema"]["required"]


class TestGetDeviceStatus:
    """Test the get_device_status tool."""

    def test_status(self, tools, client):
        """Test the rendered status."""
        result = tools.call("get_device_status", {"device_id": SERIAL})

        assert result.is_error is False
        assert json.loads(result.text) == {
            "device": {"serial": SERIAL, "name": "Living Room"},
            "state": {
                "power": "on",
                "fanSpeed": "7",
                "oscillation": "off",
                "nightMode": "on",
                "autoMode": "off",
            },
            "airQuality": {
                "pm25": 15,
                "pm10": 20,
                "voc": 3,
                "no2": 1,
                "humidity": "45%",
                "temperature": "25.0°C",
                "level": "Moderate",
            },
        }
        client.get_status.assert_called_once_with(SERIAL)

    def test_without_sensors(self, tools, client):
        """Test that missing sensors render as null."""
        client.get_status.return_value = DeviceStatus(
            serial=SERIAL,
            name="Living Room",
            power=False,
            fan_speed="auto",
            oscillation=False,
            night_mode=False,
            auto_mode=True,
            air_quality=None,
        )

        result = tools.call("get_device_status")

        assert json.loads(result.text)["airQuality"] is None
        client.get_status.assert_called_once_with(None)

    def test_empty_device_id(self, tools, client):
        """Test that an empty device id means the first device."""
        tools.call("get_device_status", {"device_id": ""})
        client.get_status.assert_called_once_with(None)


class TestSetFanSpeed:
    """Test the set_fan_speed tool."""

    def test_set_speed(self, tools, client):
        """Test the rendered result."""
        result = tools.call("set_fan_speed", {"speed": "7"})

        assert json.loads(result.text) == {
            "message": "Fan speed set to 7",
            "device": "Living Room",
            "newState": {"power": "on", "fanSpeed": "7", "autoMode": "off"},
        }
        client.set_fan_speed.assert_called_once_with(None, "7")

    def test_numeric_speed(self, tools, client):
        """Test that numbers from the host are accepted."""
        tools.call("set_fan_speed", {"speed": 3})
        client.set_fan_speed.assert_called_once_with(None, "3")

    def test_missing_speed(self, tools, client):
        """Test that speed is required."""
        result = tools.call("set_fan_speed", {})

        assert result.is_error is True
        assert result.text == 'Error: Speed is required. Use 1-10 or "auto"'
        client.set_fan_speed.assert_not_called()

    def test_invalid_speed(self, tools, client):
        """Test that client validation errors are reported."""
        client.set_fan_speed.side_effect = DysonInvalidFanSpeed("11")

        result = tools.call("set_fan_speed", {"speed": "11"})

        assert result.is_error is True
        assert result.text == 'Error: Fan speed must be 1-10 or "auto"'


class TestSwitches:
    """Test the set_oscillation and set_night_mode tools."""

    def test_oscillation(self, tools, client):
        """Test enabling oscillation."""
        result = tools.call("set_oscillation", {"enabled": True, "device_id": SERIAL})

        assert json.loads(result.text) == {
            "message": "Oscillation enabled",
            "device": "Living Room",
            "oscillation": "off",
        }
        client.set_oscillation.assert_called_once_with(SERIAL, True)

    def test_night_mode(self, tools, client):
        """Test disabling night mode."""
        result = tools.call("set_night_mode", {"enabled": False})

        assert json.loads(result.text) == {
            "message": "Night mode disabled",
            "device": "Living Room",
            "nightMode": "on",
        }
        client.set_night_mode.assert_called_once_with(None, False)

    @pytest.mark.parametrize("name", ["set_oscillation", "set_night_mode"])
    @pytest.mark.parametrize("arguments", [{}, {"enabled": "yes"}])
    def test_enabled_required(self, tools, client, name, arguments):
        """Test that enabled must be a boolean."""
        result = tools.call(name, arguments)

        assert result.is_error is True
        assert result.text == "Error: Enabled parameter is required (true/false)"


class TestGetAirQuality:
    """Test the get_air_quality tool."""

    def test_air_quality(self, tools):
        """Test the rendered readings."""
        result = tools.call("get_air_quality", {})

        assert json.loads(result.text) == {
            "pm25": {"value": 15, "unit": "µg/m³", "level": "Moderate"},
            "pm10": {"value": 20, "unit": "µg/m³"},
            "voc": {"value": 3, "unit": "index", "description": "Moderate"},
            "no2": {"value": 1, "unit": "index", "description": "Low"},
            "humidity": {"value": 45, "unit": "%", "description": "Comfortable"},
            "temperature": {"celsius": 25.0, "fahrenheit": 77},
        }

    def test_unavailable(self, tools, client):
        """Test that missing sensors are reported as an error."""
        client.get_air_quality.side_effect = DysonAirQualityUnavailable

        result = tools.call("get_air_quality")

        assert result.is_error is True
        assert result.text == "Error: Air quality data not available for this device"


class TestErrors:
    """Test error conversion."""

    def test_unknown_tool(self, tools):
        """Test that unknown tools are rejected explicitly."""
        result = tools.call("turn_off", {})

        assert result.is_error is True
        assert result.text == "Error: Unknown tool: turn_off"

    def test_device_not_found(self, tools, client):
        """Test that client errors become error results."""
        client.get_status.side_effect = DysonDeviceNotFound("XXX")

        result = tools.call("get_device_status", {"device_id": "XXX"})

        assert result.is_error is True
        assert result.text == "Error: Device not found: XXX"

    def test_network_error(self, tools, client):
        """Test that transport failures become error results."""
        client.get_status.side_effect = DysonNetworkError("timed out")

        result = tools.call("get_device_status")

        assert result.is_error is True
        assert "timed out" in result.text

    def test_unexpected_error(self, tools, client):
        """Test that unexpected errors do not escape."""
        client.get_status.side_effect = KeyError("fnsp")

        result = tools.call("get_device_status")

        assert result.is_error is True
        assert result.text.startswith("Error: ")
