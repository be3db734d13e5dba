"""REST API error response models.

Every error leaves the API as ``{"success": false, "message": ..., "code": ...}``
with an optional ``errors`` list for field-level failures.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "limit",
                "message": "Input should be less than or equal to 50",
                "code": "less_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "success": false,
                "message": "Not authorized to update this vehicle",
                "code": "FORBIDDEN"
            }

        Validation error with multiple fields:
            {
                "success": false,
                "message": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "limit", "message": "...", "code": "less_than_equal"},
                    {"field": "minPrice", "message": "...", "code": "greater_than_equal"}
                ]
            }
    """

    success: bool = False
    message: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"success": False, "message": "Vehicle not found", "code": "NOT_FOUND"},
                {
                    "success": False,
                    "message": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "minPrice",
                            "message": "Must be less than or equal to maxPrice",
                            "code": "INVALID_RANGE",
                        }
                    ],
                },
            ]
        }
    )


# Shared OpenAPI ``responses=`` entries for routes
ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    401: {"model": ErrorResponse, "description": "Missing or invalid token"},
    403: {"model": ErrorResponse, "description": "Insufficient role or not the owner"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
}
