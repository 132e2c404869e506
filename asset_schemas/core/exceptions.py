"""
Custom exceptions for asset metadata validation.

Predicates never raise; these are only used where a caller asks for a typed
result or hands the validator factory a broken schema.
"""

from typing import Any


class AssetSchemaException(Exception):
    """Base exception for all asset schema errors."""

    def __init__(
        self,
        error: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.error = error
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a serializable dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class InvalidSchemaException(AssetSchemaException):
    """A schema fragment passed to the validator factory is not a valid JSON schema."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="invalid_schema",
            message=message,
            details=details,
        )


class WearableValidationException(AssetSchemaException):
    """Wearable metadata was rejected by the validator."""

    def __init__(self, reasons: list[str], wearable_id: str | None = None):
        self.reasons = reasons
        details: dict[str, Any] = {"reasons": reasons}
        if wearable_id:
            details["id"] = wearable_id
        super().__init__(
            error="invalid_wearable",
            message=f"Wearable metadata failed validation ({len(reasons)} problem(s))",
            details=details,
        )
