"""Dyson cloud client."""

from .account import DysonAccount, HTTPBearerAuth, get_api_host  # noqa: F401
from .device_info import DysonDeviceInfo, get_product_type_name  # noqa: F401
