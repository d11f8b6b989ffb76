class MonitorError(Exception):
    """Base exception for all event monitor errors."""
    pass

class CameraSourceError(MonitorError):
    """Raised when the camera list cannot be read or parsed."""
    pass

class ConfigurationError(MonitorError):
    """Raised when configuration is invalid."""
    pass
