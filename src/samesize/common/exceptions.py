"""Custom exception hierarchy."""


class SameSizeError(Exception):
    """Base exception for all same-file-size errors."""


class ConfigError(SameSizeError):
    """Configuration error."""


class UsageError(SameSizeError):
    """Command line option not recognized."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option not recognized: {option}")
        self.option = option
