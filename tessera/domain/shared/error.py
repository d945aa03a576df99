"""Error hierarchy for Tessera.

Error layers:
- TesseraError: Base class for all Tessera errors
- DomainError: Business rule violations, validation failures
- InfrastructureError: System-level failures like misconfiguration

The augmentation and ordering core never raises for missing data; these
errors signal programmer error or lookups that were required to succeed.
"""


class TesseraError(Exception):
    """Base class for all Tessera errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(TesseraError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class ConflictError(DomainError):
    """Resource already exists under the requested identity."""


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(TesseraError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
