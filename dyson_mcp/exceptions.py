"""Dyson MCP exceptions."""


class DysonException(Exception):
    """Base class for exceptions."""


class DysonNetworkError(DysonException):
    """Represents network error."""

    def __init__(self, reason: str = "unknown error"):
        """Initialize the error."""
        super().__init__(f"Network error talking to Dyson cloud: {reason}")


class DysonInvalidCredentials(DysonException):
    """Represents rejected account credentials."""

    def __init__(self):
        """Initialize the error."""
        super().__init__("Invalid Dyson credentials")


class DysonAuthenticationFailed(DysonException):
    """Represents failure during logging in."""

    def __init__(self, status: int):
        """Initialize the error."""
        super().__init__(f"Authentication failed: {status}")
        self.status = status


class DysonInvalidAuth(DysonException):
    """Represents a session token rejected by the cloud."""

    def __init__(self):
        """Initialize the error."""
        super().__init__("Dyson cloud rejected the session token")


class DysonRequestFailed(DysonException):
    """Represents a non-success response from the cloud."""

    def __init__(self, action: str, status: int):
        """Initialize the error."""
        super().__init__(f"{action}: {status}")
        self.action = action
        self.status = status


class DysonStateUpdateFailed(DysonRequestFailed):
    """Represents failure to update device state."""

    def __init__(self, status: int):
        """Initialize the error."""
        super().__init__("Failed to set device state", status)


class DysonParseError(DysonException):
    """Represents an unexpected response shape."""


class DysonDeviceNotFound(DysonException):
    """Represents an unknown device serial."""

    def __init__(self, device_id: str):
        """Initialize the error."""
        super().__init__(f"Device not found: {device_id}")
        self.device_id = device_id


class DysonNoDevicesFound(DysonException):
    """Represents an account without devices."""

    def __init__(self):
        """Initialize the error."""
        super().__init__("No Dyson devices found in account")


class DysonInvalidFanSpeed(DysonException):
    """Represents an out of range fan speed."""

    def __init__(self, speed=None):
        """Initialize the error."""
        super().__init__('Fan speed must be 1-10 or "auto"')
        self.speed = speed


class DysonAirQualityUnavailable(DysonException):
    """Represents a device without environmental sensors."""

    def __init__(self):
        """Initialize the error."""
        super().__init__("Air quality data not available for this device")


class DysonUnknownTool(DysonException):
    """Represents a call to a tool that does not exist."""

    def __init__(self, name: str):
        """Initialize the error."""
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class DysonInvalidToolArgument(DysonException):
    """Represents a missing or malformed tool argument."""


class DysonConfigError(DysonException):
    """Represents invalid process configuration."""
