"""Rendering cost metrics reported for an asset."""

from pydantic import BaseModel, ConfigDict, Field

from asset_schemas.core.validation import JSONSchema, ValidateFunction, generate_validator

_METRIC_NAMES = ("triangles", "materials", "textures", "meshes", "bodies", "entities")

METRICS_SCHEMA: JSONSchema = {
    "type": "object",
    "properties": {
        name: {"type": "number", "minimum": 0} for name in _METRIC_NAMES
    },
    "additionalProperties": False,
    "required": list(_METRIC_NAMES),
}

validate_metrics: ValidateFunction = generate_validator(METRICS_SCHEMA)


class Metrics(BaseModel):
    triangles: float = Field(..., ge=0)
    materials: float = Field(..., ge=0)
    textures: float = Field(..., ge=0)
    meshes: float = Field(..., ge=0)
    bodies: float = Field(..., ge=0)
    entities: float = Field(..., ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)
