"""
Internationalized text entries.
"""

from pydantic import BaseModel, ConfigDict, Field

from asset_schemas.core.validation import JSONSchema, ValidateFunction, generate_validator
from asset_schemas.models.locale import Locale

I18N_SCHEMA: JSONSchema = {
    "type": "object",
    "properties": {
        "code": Locale.schema(),
        "text": {"type": "string"},
    },
    "additionalProperties": False,
    "required": ["code", "text"],
}

validate_i18n: ValidateFunction = generate_validator(I18N_SCHEMA)


class I18N(BaseModel):
    """Localized text keyed by locale code."""

    code: Locale = Field(..., description="Locale code")
    text: str = Field(..., description="Text in that locale")

    model_config = ConfigDict(extra="forbid", frozen=True)
