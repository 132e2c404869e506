"""
JSON-schema fragments and typed pydantic models for asset metadata.
Fragments are plain dictionaries so they can be composed into larger schemas.
"""

from asset_schemas.schemas.displayable import DISPLAYABLE_PROPERTIES, DisplayableDeployment
from asset_schemas.schemas.i18n import I18N, I18N_SCHEMA, validate_i18n
from asset_schemas.schemas.merkle_proof import MERKLE_PROOF_SCHEMA, MerkleProof, validate_merkle_proof
from asset_schemas.schemas.metrics import METRICS_SCHEMA, Metrics, validate_metrics
from asset_schemas.schemas.representation import (
    WEARABLE_REPRESENTATION_SCHEMA,
    WearableRepresentation,
    validate_representation,
)
from asset_schemas.schemas.wearable import (
    WEARABLE_DATA_SCHEMA,
    WEARABLE_SCHEMA,
    StandardWearable,
    ThirdPartyWearable,
    Wearable,
    WearableBase,
    WearableData,
    validate_wearable_shape,
)

__all__ = [
    # Displayable
    "DISPLAYABLE_PROPERTIES",
    "DisplayableDeployment",
    # Components
    "I18N",
    "I18N_SCHEMA",
    "validate_i18n",
    "MERKLE_PROOF_SCHEMA",
    "MerkleProof",
    "validate_merkle_proof",
    "METRICS_SCHEMA",
    "Metrics",
    "validate_metrics",
    "WEARABLE_REPRESENTATION_SCHEMA",
    "WearableRepresentation",
    "validate_representation",
    # Wearable
    "WEARABLE_DATA_SCHEMA",
    "WEARABLE_SCHEMA",
    "StandardWearable",
    "ThirdPartyWearable",
    "Wearable",
    "WearableBase",
    "WearableData",
    "validate_wearable_shape",
]
