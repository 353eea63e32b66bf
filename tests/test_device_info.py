"""Tests for Dyson device info module."""

import pytest

from dyson_mcp.cloud.device_info import DysonDeviceInfo, get_product_type_name
from dyson_mcp.const import UNKNOWN_DEVICE_NAME
from dyson_mcp.exceptions import DysonParseError


class TestGetProductTypeName:
    """Test the get_product_type_name function."""

    @pytest.mark.parametrize(
        "product_type,expected",
        [
            ("358", "Pure Humidify+Cool"),
            ("438", "Pure Cool Formaldehyde"),
            ("455", "Pure Hot+Cool Link"),
            ("469", "Pure Cool Link Desk"),
            ("475", "Pure Cool Link Tower"),
            ("520", "Pure Cool"),
            ("527", "Pure Hot+Cool"),
        ],
    )
    def test_known_product_types(self, product_type, expected):
        """Test the static product table."""
        assert get_product_type_name(product_type) == expected

    def test_unknown_product_type(self):
        """Test that unknown codes get a fixed label."""
        assert get_product_type_name("XYZ123") == UNKNOWN_DEVICE_NAME
        assert get_product_type_name("") == UNKNOWN_DEVICE_NAME
        assert get_product_type_name(None) == UNKNOWN_DEVICE_NAME


class TestDysonDeviceInfo:
    """Test the DysonDeviceInfo class."""

    def test_from_raw_basic(self):
        """Test basic device info creation from raw data."""
        raw_data = {
            "Active": True,
            "Serial": "NK6-EU-MNA1234A",
            "Name": "Living Room",
            "Version": "21.03.08",
            "LocalCredentials": "encrypted_password",
            "ConnectionType": "wss",
            "ProductType": "438",
        }

        device_info = DysonDeviceInfo.from_raw(raw_data)

        assert device_info.serial == "NK6-EU-MNA1234A"
        assert device_info.name == "Living Room"
        assert device_info.product_type == "438"
        assert device_info.product_type_name == "Pure Cool Formaldehyde"
        assert device_info.connection_type == "wss"
        assert device_info.local_credentials == "encrypted_password"

    def test_from_raw_without_name(self):
        """Test that a missing name is derived from the product type."""
        device_info = DysonDeviceInfo.from_raw(
            {"Serial": "NK6-EU-MNA1234A", "ProductType": "520"}
        )
        assert device_info.name == "Dyson 520"
        assert device_info.connection_type is None
        assert device_info.local_credentials is None

    def test_from_raw_unknown_product(self):
        """Test that unknown products do not fail parsing."""
        device_info = DysonDeviceInfo.from_raw(
            {"Serial": "NK6-EU-MNA1234A", "Name": "Lamp", "ProductType": "552"}
        )
        assert device_info.product_type_name == UNKNOWN_DEVICE_NAME

    def test_from_raw_numeric_product_type(self):
        """Test that a numeric ProductType is accepted."""
        device_info = DysonDeviceInfo.from_raw(
            {"Serial": "NK6-EU-MNA1234A", "ProductType": 527}
        )
        assert device_info.product_type == "527"
        assert device_info.product_type_name == "Pure Hot+Cool"

    @pytest.mark.parametrize(
        "raw",
        [
            {"ProductType": "438"},
            {"Serial": "", "ProductType": "438"},
            {"Serial": "NK6-EU-MNA1234A"},
            "NK6-EU-MNA1234A",
        ],
    )
    def test_from_raw_invalid(self, raw):
        """Test that malformed entries raise a parse error."""
        with pytest.raises(DysonParseError):
            DysonDeviceInfo.from_raw(raw)

    def test_dataclass_frozen(self):
        """Test that DysonDeviceInfo is immutable (frozen)."""
        device_info = DysonDeviceInfo(
            serial="NK6-EU-MNA1234A",
            name="Living Room",
            product_type="438",
            product_type_name="Pure Cool Formaldehyde",
        )

        # Attempting to modify should raise an error
        with pytest.raises(AttributeError):
            device_info.name = "Bedroom"
