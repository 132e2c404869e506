"""
Wearable representations: the model files used for each body shape.
"""

from pydantic import BaseModel, ConfigDict, Field

from asset_schemas.core.validation import JSONSchema, ValidateFunction, generate_validator
from asset_schemas.models.body_shape import BodyShape
from asset_schemas.models.wearable_category import WearableCategory

WEARABLE_REPRESENTATION_SCHEMA: JSONSchema = {
    "type": "object",
    "properties": {
        "bodyShapes": {
            "type": "array",
            "items": BodyShape.schema(),
            "minItems": 1,
        },
        "mainFile": {
            "type": "string",
            "minLength": 1,
        },
        "contents": {
            "type": "array",
            "items": {
                "type": "string",
                "minLength": 1,
            },
            "minItems": 1,
        },
        "overrideHides": {
            "type": "array",
            "items": WearableCategory.schema(),
        },
        "overrideReplaces": {
            "type": "array",
            "items": WearableCategory.schema(),
        },
    },
    "additionalProperties": False,
    "required": ["bodyShapes", "mainFile", "contents", "overrideHides", "overrideReplaces"],
}

validate_representation: ValidateFunction = generate_validator(WEARABLE_REPRESENTATION_SCHEMA)


class WearableRepresentation(BaseModel):
    """Model files and slot overrides for a set of body shapes."""

    body_shapes: list[BodyShape] = Field(
        ...,
        alias="bodyShapes",
        min_length=1,
        description="Body shapes this representation applies to",
    )
    main_file: str = Field(
        ...,
        alias="mainFile",
        min_length=1,
        description="Entry point model file",
    )
    contents: list[str] = Field(
        ...,
        min_length=1,
        description="Every content file the representation uses",
    )
    override_hides: list[WearableCategory] = Field(
        ...,
        alias="overrideHides",
        description="Categories hidden when worn with these body shapes",
    )
    override_replaces: list[WearableCategory] = Field(
        ...,
        alias="overrideReplaces",
        description="Categories replaced when worn with these body shapes",
    )

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
    )
