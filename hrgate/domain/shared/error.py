"""Base error types shared across hrgate."""


class HRGateError(Exception):
    """Base for all hrgate errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(HRGateError):
    """Static configuration is invalid. Raised at startup, never per request."""

    def __init__(self, message: str, *, violations: list[str] | None = None) -> None:
        super().__init__(message)
        self.violations = violations or []
