"""Custom exceptions for the Google Custom Search MCP server."""


class MCPToolError(Exception):
    """Custom exception for MCP tool errors that should be returned as JSON-RPC errors."""

    def __init__(self, message: str, code: int = -32000):
        self.message = message
        self.code = code
        super().__init__(message)


# ========================================
# Base Exceptions
# ========================================


class GoogleSearchMCPError(Exception):
    """Base exception for all Google Search MCP errors."""


# ========================================
# Network Exceptions
# ========================================


class NetworkError(GoogleSearchMCPError):
    """Base exception for network-related errors."""


class SearchError(NetworkError):
    """The search provider call failed (network, auth, quota or bad payload)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


# ========================================
# Validation Exceptions
# ========================================


class ValidationError(GoogleSearchMCPError):
    """Base exception for validation errors."""


class ConfigurationError(ValidationError):
    """Configuration validation failed."""


class InputValidationError(ValidationError):
    """Tool arguments were malformed or out of range.

    Carries one ``(field, message)`` pair per offending argument so the
    caller sees field-qualified messages.
    """

    def __init__(self, errors: list[tuple[str, str]]):
        self.errors = errors
        details = ", ".join(f"{field}: {message}" for field, message in errors)
        super().__init__(f"Invalid arguments: {details}")

    @property
    def fields(self) -> list[str]:
        """Names of the offending arguments."""
        return [field for field, _ in self.errors]
