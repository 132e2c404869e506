"""
Validation services for asset metadata.
Services combine schema checks with the cross-field rules the schemas cannot express.
"""

from asset_schemas.services.wearable_validator import (
    WearableValidator,
    duplicated_locales,
    get_wearable_validator,
    is_standard,
    is_third_party,
    parse_wearable,
    validate_wearable,
    wearable_errors,
)

__all__ = [
    "WearableValidator",
    "duplicated_locales",
    "get_wearable_validator",
    "is_standard",
    "is_third_party",
    "parse_wearable",
    "validate_wearable",
    "wearable_errors",
]
