"""
Merkle proof attached to third-party wearables.

Only the shape is checked here; verifying the proof against a root hash is
the job of whoever holds the committed tree.
"""

from pydantic import BaseModel, ConfigDict, Field

from asset_schemas.core.validation import JSONSchema, ValidateFunction, generate_validator

MERKLE_PROOF_SCHEMA: JSONSchema = {
    "type": "object",
    "properties": {
        "proof": {
            "type": "array",
            "items": {"type": "string"},
        },
        "index": {
            "type": "number",
        },
        "hashingKeys": {
            "type": "array",
            "items": {"type": "string"},
        },
        "entityHash": {
            "type": "string",
        },
    },
    "additionalProperties": False,
    "required": ["proof", "index", "hashingKeys", "entityHash"],
}

validate_merkle_proof: ValidateFunction = generate_validator(MERKLE_PROOF_SCHEMA)


class MerkleProof(BaseModel):
    """Inclusion proof for the hashed fields of an entity."""

    proof: list[str] = Field(..., description="Sibling hashes from leaf to root")
    index: float = Field(..., description="Leaf position in the tree")
    hashing_keys: list[str] = Field(
        ...,
        alias="hashingKeys",
        description="Entity properties included in the leaf hash",
    )
    entity_hash: str = Field(..., alias="entityHash")

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
    )
