"""Dyson MCP server library."""

__version__ = "1.0.0"

from .client import DysonClient  # noqa: E402,F401
from .cloud import DysonAccount, DysonDeviceInfo  # noqa: E402,F401
from .exceptions import DysonException  # noqa: E402,F401
from .state import AirQuality, DeviceState, DeviceStatus  # noqa: E402,F401
from .tools import DysonTools, ToolResult  # noqa: E402,F401
from .utils import classify_air_quality, format_temperature  # noqa: E402,F401
