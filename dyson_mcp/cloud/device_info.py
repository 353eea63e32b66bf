"""Dyson device info."""

from typing import Optional

import attr

from ..const import PRODUCT_TYPE_NAMES, UNKNOWN_DEVICE_NAME
from ..exceptions import DysonParseError


def get_product_type_name(product_type: Optional[str]) -> str:
    """Return the marketing name of a cloud ProductType."""
    if not product_type:
        return UNKNOWN_DEVICE_NAME
    return PRODUCT_TYPE_NAMES.get(product_type, UNKNOWN_DEVICE_NAME)


@attr.s(auto_attribs=True, frozen=True)
class DysonDeviceInfo:
    """Dyson device info."""

    serial: str
    name: str
    product_type: str
    product_type_name: str
    connection_type: Optional[str] = None
    local_credentials: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: dict) -> "DysonDeviceInfo":
        """Parse raw data from the cloud manifest."""
        if not isinstance(raw, dict):
            raise DysonParseError(
                f"Device entry must be an object, got {type(raw).__name__}"
            )
        serial = raw.get("Serial")
        if not isinstance(serial, str) or not serial:
            raise DysonParseError("Device entry is missing Serial")
        product_type = raw.get("ProductType")
        if isinstance(product_type, int) and not isinstance(product_type, bool):
            product_type = str(product_type)
        if not isinstance(product_type, str) or not product_type:
            raise DysonParseError(f"Device {serial} is missing ProductType")

        return cls(
            serial=serial,
            name=raw.get("Name") or f"Dyson {product_type}",
            product_type=product_type,
            product_type_name=get_product_type_name(product_type),
            connection_type=raw.get("ConnectionType"),
            local_credentials=raw.get("LocalCredentials"),
        )
