"""Domain error classes.

Business failures raised by use cases and translated to HTTP responses by
the exception handlers in ``boxcars.entrypoints.http``.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all marketplace errors.

    Carries a human-readable message, a stable ``error_code`` and any extra
    context that should travel with the error (resource name, identifier...).
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g. resource, identifier)
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
    """Input rejected before touching the store.

    Field errors are collected, never short-circuited, so a single response
    can report every offending field.

    Examples:
        - limit above the listing maximum
        - minPrice greater than maxPrice
        - year outside [1900, current year + 1]
        - malformed identifier

    REST: 400 Bad Request
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
            errors: Field-level errors, each with 'field', 'message' and 'code'
                   Example: [{"field": "limit", "message": "Must be <= 50", "code": "OUT_OF_RANGE"}]
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
    """Identifier does not resolve to an existing record.

    Examples:
        - Vehicle with ID not found
        - Inquiry submitted for a vehicle that no longer exists

    REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Vehicle", "Contact")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class UnauthorizedError(DomainError):
    """Missing, malformed or expired identity token.

    REST: 401 Unauthorized
    """

    error_code: str = "UNAUTHORIZED"


class ForbiddenError(DomainError):
    """Valid identity but insufficient role or ownership.

    Distinct from NotFoundError: the record exists, the caller may not touch it.

    REST: 403 Forbidden
    """

    error_code: str = "FORBIDDEN"


def invalid_uuid(field: str) -> ValidationError:
    """Build the error raised for identifiers that are not UUIDs."""
    return ValidationError(
        message="Invalid ID format",
        errors=[
            {
                "field": field,
                "message": "Must be a valid UUID format",
                "code": "INVALID_UUID",
            }
        ],
    )
