"""Error types raised by influxline.

Serialization itself never fails. Errors surface either at schema
registration (ConfigurationError) or from the opt-in strict validation
mode (PointValidationError).
"""


class LineProtocolError(Exception):
    """Base class for all influxline errors."""

    pass


class ConfigurationError(LineProtocolError, TypeError):
    """Raised when a point schema cannot be built from a record type.

    Detected once, at registration time, before any record is serialized.
    """

    pass


class PointValidationError(LineProtocolError, ValueError):
    """Raised by strict mode when a point would produce an invalid line."""

    pass
