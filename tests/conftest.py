"""Fixtures for dyson_mcp tests."""

from typing import Any, Optional
from unittest.mock import MagicMock, patch

import pytest

SERIAL = "NK6-EU-MNA1234A"
SERIAL_2 = "VS9-EU-KNA5678B"

MANIFEST = [
    {
        "Serial": SERIAL,
        "Name": "Living Room",
        "ProductType": "438",
        "ConnectionType": "wss",
        "LocalCredentials": "encrypted_password",
    },
    {
        "Serial": SERIAL_2,
        "Name": "Bedroom",
        "ProductType": "527",
        "ConnectionType": "wss",
    },
]

STATE = {
    "fpwr": "ON",
    "fnsp": "0007",
    "oson": "OFF",
    "nmod": "ON",
    "auto": "OFF",
    "pm25": "0015",
    "pm10": "0020",
    "vact": "0003",
    "noxl": "0001",
    "hact": "0045",
    "tact": "2982",
}


def make_response(status_code: int = 200, body: Optional[Any] = None) -> MagicMock:
    """Create a fake requests response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.json.return_value = body
    return response


@pytest.fixture
def mock_request():
    """Patch the HTTP layer of the cloud account."""
    with patch("dyson_mcp.cloud.account.requests.request") as request:
        yield request
