"""Custom exceptions for SolarSite."""


class SolarSiteError(Exception):
    """Base exception for all SolarSite errors."""

    def __init__(self, message: str, details: dict | None = None):
        """Initialize exception.

        Args:
            message: Error message
            details: Optional dictionary with additional context
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class InvalidInputError(SolarSiteError):
    """Raw metrics or manual inputs have the wrong shape or type."""
    pass


class ConfigurationError(SolarSiteError):
    """Criteria catalog, settings, or logging configuration errors."""
    pass
