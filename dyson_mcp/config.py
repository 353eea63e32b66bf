"""Environment configuration for dyson_mcp."""

import os
from typing import Mapping, Optional

import attr
import voluptuous as vol

from .const import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_REGION,
    ENV_COUNTRY,
    ENV_EMAIL,
    ENV_LOG_LEVEL,
    ENV_PASSWORD,
)
from .exceptions import DysonConfigError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _upper(value):
    return str(value).strip().upper()


CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(ENV_EMAIL): vol.All(str, vol.Strip, vol.Length(min=1)),
        vol.Required(ENV_PASSWORD): vol.All(str, vol.Length(min=1)),
        vol.Optional(ENV_COUNTRY, default=DEFAULT_REGION): _upper,
        vol.Optional(ENV_LOG_LEVEL, default=DEFAULT_LOG_LEVEL): vol.All(
            _upper, vol.In(LOG_LEVELS)
        ),
    },
    extra=vol.REMOVE_EXTRA,
)


@attr.s(auto_attribs=True, frozen=True)
class DysonConfig:
    """Process configuration."""

    email: str
    password: str = attr.ib(repr=False)
    region: str = DEFAULT_REGION
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DysonConfig":
        """Load configuration from environment variables."""
        if environ is None:
            environ = os.environ
        # Unset and empty variables are treated the same
        values = {key: value for key, value in environ.items() if value != ""}
        try:
            data = CONFIG_SCHEMA(values)
        except vol.MultipleInvalid as err:
            missing = [
                str(error.path[0])
                for error in err.errors
                if isinstance(error, vol.RequiredFieldInvalid)
                or str(error.path[0]) in (ENV_EMAIL, ENV_PASSWORD)
            ]
            if missing:
                raise DysonConfigError(
                    f"{ENV_EMAIL} and {ENV_PASSWORD} environment variables are required"
                ) from err
            raise DysonConfigError(f"Invalid configuration: {err}") from err

        return cls(
            email=data[ENV_EMAIL],
            password=data[ENV_PASSWORD],
            region=data[ENV_COUNTRY],
            log_level=data[ENV_LOG_LEVEL],
        )
