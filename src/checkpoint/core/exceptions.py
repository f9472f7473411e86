class CheckpointError(Exception):
    """Base class for every error raised by the check harness."""

    pass


class ConfigurationError(CheckpointError):
    """Raised when a check is missing a required field or is otherwise invalid."""

    pass


class UnsupportedRouterError(ConfigurationError):
    """Raised when a route is registered against a routing engine no adapter supports."""

    def __init__(self, engine: object) -> None:
        self.engine = engine
        super().__init__(f"Unsupported router type: {type(engine).__module__}.{type(engine).__qualname__}")


class RequestConstructionError(CheckpointError, ValueError):
    """Raised when the method/target/body combination cannot form a request."""

    pass


class CaptureError(CheckpointError):
    """Raised when the recorded response cannot be read back."""

    pass
