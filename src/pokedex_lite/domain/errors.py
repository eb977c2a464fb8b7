"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to appropriate formats (HTTP, client exceptions) by protocol adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to HTTP responses or raised again on the client side.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Malformed input caught before it reaches storage.

    Examples:
        - Slug not matching [a-z0-9-]+
        - Name shorter than 2 or longer than 50 characters
        - Sprite that is not a valid URL
        - Empty slug on detail lookup

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "slug", "message": "Must match [a-z0-9-]+"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed, in reporting order."""
        return [error["field"] for error in self.errors or []]

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Pokemon with slug not found

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Pokemon")
            identifier: Resource identifier (e.g., slug)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Store-detected uniqueness violation.

    Examples:
        - Duplicate slug on create

    When the offending field can be derived from the store's conflict
    metadata it is exposed both as ``field`` and as a field-level error,
    so callers can render it next to the right input.

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"

    def __init__(self, message: str, field: str | None = None, **context: Any) -> None:
        self.field = field
        super().__init__(message, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        result = super().to_dict()
        if self.field:
            result["errors"] = [
                {
                    "field": self.field,
                    "message": self.message,
                    "code": "ALREADY_EXISTS",
                }
            ]
        return result


class TransientStoreError(DomainError):
    """Store or network unavailable.

    Retryable by the caller. Never retried automatically by the service.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "STORE_UNAVAILABLE"


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
