class RaidIpError(Exception):
    """Base class for anything that ends a poll cycle early."""


class LogAccessError(RaidIpError):
    """Log directory or log file could not be opened."""


class NotFoundError(RaidIpError):
    """No session directory under the log root."""


class NoMatchError(RaidIpError):
    """No line in the log file carries the raid marker."""


class PatternMismatchError(RaidIpError):
    """Marker line found but it holds no IP."""


class NetworkError(RaidIpError):
    """Geolocation request failed at the transport level."""


class DecodeError(RaidIpError):
    """Geolocation response body could not be understood."""
