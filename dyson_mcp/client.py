"""Dyson cloud device client."""

import json
import logging
from typing import Dict, Optional, Tuple

from .cloud.account import DysonAccount
from .cloud.device_info import DysonDeviceInfo
from .const import (
    API_PATH_DEVICE_STATE,
    API_PATH_DEVICES,
    DEFAULT_REGION,
    FAN_SPEED_AUTO,
    FIELD_AUTO_MODE,
    FIELD_FAN_SPEED,
    FIELD_NIGHT_MODE,
    FIELD_OSCILLATION,
    FIELD_POWER,
    STATE_OFF,
    STATE_ON,
)
from .exceptions import (
    DysonAirQualityUnavailable,
    DysonDeviceNotFound,
    DysonNoDevicesFound,
    DysonParseError,
    DysonRequestFailed,
    DysonStateUpdateFailed,
)
from .state import AirQuality, DeviceState, DeviceStatus
from .utils import encode_fan_speed

_LOGGER = logging.getLogger(__name__)


def _on_off(enabled: bool) -> str:
    return STATE_ON if enabled else STATE_OFF


def _json(response, what: str):
    try:
        return response.json()
    except ValueError as err:
        raise DysonParseError(f"{what} response is not JSON") from err


class DysonClient:
    """Client for Dyson devices registered to a cloud account.

    Devices are addressed by serial. Operations taking an optional
    ``device_id`` fall back to the first device of the account.
    """

    def __init__(
        self,
        email: str,
        password: str,
        region: str = DEFAULT_REGION,
        account: Optional[DysonAccount] = None,
    ):
        """Initialize the client."""
        self._account = account or DysonAccount(email, password, region)
        self._devices: Tuple[DysonDeviceInfo, ...] = ()

    @property
    def account(self) -> DysonAccount:
        """Return the cloud account."""
        return self._account

    @property
    def devices(self) -> Tuple[DysonDeviceInfo, ...]:
        """Return the cached device directory."""
        return self._devices

    def authenticate(self) -> None:
        """Log in to the cloud account."""
        self._account.authenticate()

    def list_devices(self) -> Tuple[DysonDeviceInfo, ...]:
        """Fetch the device manifest and replace the cached directory.

        This is the only way the directory is refreshed; it is otherwise
        fetched once on first use.
        """
        response = self._account.authorized_request("GET", API_PATH_DEVICES)
        if not response.ok:
            raise DysonRequestFailed("Failed to get devices", response.status_code)

        response_data = _json(response, "Device manifest")
        if not isinstance(response_data, list):
            raise DysonParseError("Device manifest must be a list")
        devices = tuple(DysonDeviceInfo.from_raw(raw) for raw in response_data)
        self._devices = devices

        _LOGGER.debug("Cloud API returned %d devices", len(devices))
        for device in devices:
            _LOGGER.debug(
                "Device %s: %s (%s)",
                device.serial,
                device.name,
                device.product_type_name,
            )
        return devices

    def resolve_device(self, device_id: Optional[str] = None) -> DysonDeviceInfo:
        """Return a device by serial, or the first device if none is given."""
        if not self._devices:
            self.list_devices()

        if device_id:
            for device in self._devices:
                if device.serial == device_id:
                    return device
            raise DysonDeviceNotFound(device_id)

        if not self._devices:
            raise DysonNoDevicesFound
        return self._devices[0]

    def _state_path(self, device: DysonDeviceInfo) -> str:
        return API_PATH_DEVICE_STATE.format(serial=device.serial)

    def get_state(self, device_id: Optional[str] = None) -> DeviceState:
        """Fetch the wire state of a device."""
        self._account.ensure_authenticated()
        device = self.resolve_device(device_id)
        response = self._account.authorized_request("GET", self._state_path(device))
        if not response.ok:
            raise DysonRequestFailed(
                "Failed to get device status", response.status_code
            )
        raw = _json(response, "Device state")
        _LOGGER.debug("State of %s: %s", device.serial, json.dumps(raw))
        return DeviceState.from_raw(raw)

    def get_status(self, device_id: Optional[str] = None) -> DeviceStatus:
        """Return the current status of a device."""
        self._account.ensure_authenticated()
        device = self.resolve_device(device_id)
        state = self.get_state(device.serial)
        return state.to_status(device.serial, device.name)

    def set_state(
        self, device_id: Optional[str], fields: Dict[str, str]
    ) -> DeviceStatus:
        """Update wire fields of a device and return the re-read status."""
        self._account.ensure_authenticated()
        device = self.resolve_device(device_id)
        _LOGGER.debug("Setting %s on %s", fields, device.serial)
        response = self._account.authorized_request(
            "PATCH", self._state_path(device), data=fields
        )
        if not response.ok:
            raise DysonStateUpdateFailed(response.status_code)
        return self.get_status(device.serial)

    def set_fan_speed(self, device_id: Optional[str], speed: str) -> DeviceStatus:
        """Set fan speed to 1-10 or "auto", turning the device on."""
        fnsp = encode_fan_speed(speed)
        auto = STATE_ON if fnsp == FAN_SPEED_AUTO else STATE_OFF
        return self.set_state(
            device_id,
            {
                FIELD_FAN_SPEED: fnsp,
                FIELD_AUTO_MODE: auto,
                FIELD_POWER: STATE_ON,
            },
        )

    def set_oscillation(self, device_id: Optional[str], enabled: bool) -> DeviceStatus:
        """Turn oscillation on or off."""
        return self.set_state(device_id, {FIELD_OSCILLATION: _on_off(enabled)})

    def set_night_mode(self, device_id: Optional[str], enabled: bool) -> DeviceStatus:
        """Turn night mode on or off."""
        return self.set_state(device_id, {FIELD_NIGHT_MODE: _on_off(enabled)})

    def get_air_quality(self, device_id: Optional[str] = None) -> AirQuality:
        """Return the environmental sensor readings of a device."""
        status = self.get_status(device_id)
        if status.air_quality is None:
            raise DysonAirQualityUnavailable
        return status.air_quality
