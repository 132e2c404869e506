"""
Wearable metadata schema and typed models.

A wearable is either a standard wearable (backed by an on-chain collection,
carrying rarity and collectionAddress) or a third-party wearable (carrying a
Merkle proof). The JSON schema below describes the union of both shapes with
the distinguishing fields optional; the semantic checks that pick exactly one
shape live in asset_schemas.services.wearable_validator.

Component fragments are copied in, so later changes to them do not leak into
this schema. Models read wire (camelCase) names only; snake_case keys in the
input stay unvalidated extras, as the schema allows.
"""

import copy
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from asset_schemas.core.validation import JSONSchema, ValidateFunction, generate_validator, nullable
from asset_schemas.models.rarity import Rarity
from asset_schemas.models.wearable_category import WearableCategory
from asset_schemas.schemas.displayable import DISPLAYABLE_PROPERTIES, DisplayableDeployment
from asset_schemas.schemas.i18n import I18N, I18N_SCHEMA
from asset_schemas.schemas.merkle_proof import MERKLE_PROOF_SCHEMA, MerkleProof
from asset_schemas.schemas.metrics import METRICS_SCHEMA, Metrics
from asset_schemas.schemas.representation import (
    WEARABLE_REPRESENTATION_SCHEMA,
    WearableRepresentation,
)


# ===================
# JSON Schema
# ===================

WEARABLE_DATA_SCHEMA: JSONSchema = {
    "type": "object",
    "properties": {
        "replaces": {
            "type": "array",
            "items": WearableCategory.schema(),
        },
        "hides": {
            "type": "array",
            "items": WearableCategory.schema(),
        },
        "tags": {
            "type": "array",
            "items": {
                "type": "string",
                "minLength": 1,
            },
        },
        "representations": {
            "type": "array",
            "items": copy.deepcopy(WEARABLE_REPRESENTATION_SCHEMA),
            "minItems": 1,
        },
        "category": WearableCategory.schema(),
    },
    "additionalProperties": False,
    "required": ["replaces", "hides", "tags", "representations", "category"],
}

WEARABLE_SCHEMA: JSONSchema = {
    "type": "object",
    "properties": {
        **copy.deepcopy(DISPLAYABLE_PROPERTIES),
        "id": {"type": "string"},
        "description": {"type": "string"},
        "collectionAddress": nullable({"type": "string"}),
        "rarity": nullable(Rarity.schema()),
        "name": {"type": "string"},
        "i18n": {
            "type": "array",
            "items": copy.deepcopy(I18N_SCHEMA),
            "minItems": 1,
        },
        "data": copy.deepcopy(WEARABLE_DATA_SCHEMA),
        "thumbnail": {"type": "string"},
        "image": {"type": "string"},
        "metrics": nullable(METRICS_SCHEMA),
        "merkleProof": nullable(MERKLE_PROOF_SCHEMA),
        "content": nullable({
            "type": "object",
            "additionalProperties": {"type": "string"},
        }),
    },
    "additionalProperties": True,
    "required": ["id", "description", "name", "data", "thumbnail", "image", "i18n"],
}

validate_wearable_shape: ValidateFunction = generate_validator(WEARABLE_SCHEMA)


# ===================
# Typed Models
# ===================

class WearableData(BaseModel):
    """Slot behaviour and representations of a wearable."""

    replaces: list[WearableCategory] = Field(
        ...,
        description="Categories this wearable replaces when worn",
    )
    hides: list[WearableCategory] = Field(
        ...,
        description="Categories this wearable hides when worn",
    )
    tags: list[str] = Field(
        ...,
        description="Free-form discovery tags",
    )
    representations: list[WearableRepresentation] = Field(
        ...,
        min_length=1,
    )
    category: WearableCategory

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        """Tags must not be empty strings."""
        for tag in v:
            if not tag:
                raise ValueError("Tags must be non-empty strings")
        return v


class WearableBase(DisplayableDeployment):
    """Properties shared by standard and third-party wearables."""

    id: str = Field(..., description="Wearable URN")
    name: str
    description: str
    data: WearableData
    i18n: list[I18N] = Field(..., min_length=1)
    thumbnail: str
    image: str
    metrics: Metrics | None = None

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("i18n")
    @classmethod
    def validate_unique_locales(cls, v: list[I18N]) -> list[I18N]:
        """Each locale may appear only once."""
        codes = [entry.code for entry in v]
        if len(codes) != len(set(codes)):
            raise ValueError("i18n entries must have unique locale codes")
        return v


class StandardWearable(WearableBase):
    """Wearable minted in an on-chain collection."""

    rarity: Rarity
    collection_address: str = Field(
        ...,
        alias="collectionAddress",
        min_length=1,
        description="Address of the collection contract",
    )


class ThirdPartyWearable(WearableBase):
    """Wearable whose authenticity is asserted by a Merkle proof."""

    merkle_proof: MerkleProof = Field(..., alias="merkleProof")
    content: dict[str, str] | None = Field(
        default=None,
        description="Mapping of content file names to their hashes",
    )


Wearable = Union[StandardWearable, ThirdPartyWearable]
