"""
Exception classes for the domain intelligence library.

All exceptions inherit from DomainIntelError and provide structured
error information with codes, messages, and optional details.
"""

from typing import Optional


class DomainIntelError(Exception):
    """Base exception for all domain intelligence errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidHostnameError(DomainIntelError):
    """Raised when a domain is malformed or has no registrable portion."""

    pass


class InvalidOperationError(DomainIntelError):
    """Raised for well-formed requests that are not allowed (e.g. subdomain on an IP)."""

    pass


class EncodingError(DomainIntelError):
    """Raised when a label cannot be converted to its Punycode form."""

    pass


class DecodingError(DomainIntelError):
    """Raised when an xn-- label holds malformed Punycode."""

    pass


class ConfigurationError(DomainIntelError):
    """Raised when configuration cannot be loaded or is inconsistent."""

    pass
