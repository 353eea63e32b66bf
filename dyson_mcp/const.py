"""Constants for dyson_mcp."""

from types import MappingProxyType

DEFAULT_REGION = "US"

# Dyson API hosts by region
REGION_HOSTS = MappingProxyType(
    {
        "US": "appapi.cp.dyson.com",
        "GB": "appapi.cp.dyson.co.uk",
        "DE": "appapi.cp.dyson.de",
        "FR": "appapi.cp.dyson.fr",
        "AU": "appapi.cp.dyson.com.au",
        "CN": "appapi.cp.dyson.cn",
    }
)

DYSON_API_HEADERS = {"User-Agent": "android client"}

API_PATH_AUTHENTICATE = "/v1/userregistration/authenticate"
API_PATH_DEVICES = "/v2/provisioningservice/manifest"
API_PATH_DEVICE_STATE = "/v2/provisioningservice/devices/{serial}/state"

# Cloud ProductType codes
PRODUCT_TYPE_NAMES = MappingProxyType(
    {
        "358": "Pure Humidify+Cool",
        "438": "Pure Cool Formaldehyde",
        "455": "Pure Hot+Cool Link",
        "469": "Pure Cool Link Desk",
        "475": "Pure Cool Link Tower",
        "520": "Pure Cool",
        "527": "Pure Hot+Cool",
    }
)
UNKNOWN_DEVICE_NAME = "Unknown Dyson Device"

# Wire state field codes
FIELD_POWER = "fpwr"
FIELD_FAN_SPEED = "fnsp"
FIELD_OSCILLATION = "oson"
FIELD_NIGHT_MODE = "nmod"
FIELD_AUTO_MODE = "auto"
FIELD_HUMIDITY = "hact"
FIELD_TEMPERATURE = "tact"
FIELD_PARTICULATES = "pact"
FIELD_PM25 = "pm25"
FIELD_PM10 = "pm10"
FIELD_VOC = "vact"
FIELD_NO2 = "noxl"

STATE_ON = "ON"
STATE_OFF = "OFF"
FAN_SPEED_AUTO = "AUTO"

FAN_SPEED_RANGE = (1, 10)

# Upper bounds are inclusive
AIR_QUALITY_LEVELS = (
    (12, "Good"),
    (35, "Moderate"),
    (55, "Unhealthy for Sensitive Groups"),
    (150, "Unhealthy"),
    (250, "Very Unhealthy"),
)
AIR_QUALITY_HAZARDOUS = "Hazardous"

ENV_EMAIL = "DYSON_EMAIL"
ENV_PASSWORD = "DYSON_PASSWORD"
ENV_COUNTRY = "DYSON_COUNTRY"
ENV_LOG_LEVEL = "DYSON_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

SERVER_NAME = "dyson-mcp"
