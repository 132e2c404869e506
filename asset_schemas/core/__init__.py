"""Core utilities and exceptions for asset schemas."""

from asset_schemas.core.exceptions import (
    AssetSchemaException,
    InvalidSchemaException,
    WearableValidationException,
)
from asset_schemas.core.validation import (
    JSONSchema,
    ValidateFunction,
    build_validator,
    collect_errors,
    generate_validator,
    nullable,
)

__all__ = [
    "AssetSchemaException",
    "InvalidSchemaException",
    "WearableValidationException",
    "JSONSchema",
    "ValidateFunction",
    "build_validator",
    "collect_errors",
    "generate_validator",
    "nullable",
]
