"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation and conflict errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "slug",
                "message": "Must contain only lowercase letters, digits and hyphens",
                "code": "INVALID_SLUG",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Field-level errors (detail + errors array), for validation and conflicts

    Examples:
        Simple error:
            {
                "detail": "Pokemon with identifier 'mew' not found",
                "code": "NOT_FOUND"
            }

        Conflict naming the offending field:
            {
                "detail": "Pokemon with slug 'pikachu' already exists",
                "code": "CONFLICT",
                "errors": [
                    {
                        "field": "slug",
                        "message": "Pokemon with slug 'pikachu' already exists",
                        "code": "ALREADY_EXISTS"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Pokemon with identifier 'mew' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "name",
                            "message": "Must be between 2 and 50 characters",
                            "code": "INVALID_LENGTH",
                        },
                        {
                            "field": "sprite",
                            "message": "Must be a valid http(s) URL",
                            "code": "INVALID_URL",
                        },
                    ],
                },
                {"detail": "Pokemon store is unavailable", "code": "STORE_UNAVAILABLE"},
            ]
        }
    )
