"""
Wearable validation service.

Validation runs in two stages:

1. Structural: the value must satisfy WEARABLE_SCHEMA (required fields,
   types, nested data block, enum membership, minimum lengths).
2. Semantic: i18n locale codes must be unique, and the wearable must be
   exactly one of standard (rarity + collectionAddress) or third-party
   (a usable merkleProof).

Predicates never raise. parse_wearable is the only entry point that raises,
returning the typed variant model on success.
"""

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from asset_schemas.config import Settings, get_settings
from asset_schemas.core.exceptions import WearableValidationException
from asset_schemas.core.validation import build_validator, collect_errors
from asset_schemas.models.rarity import Rarity
from asset_schemas.schemas.merkle_proof import validate_merkle_proof
from asset_schemas.schemas.wearable import (
    WEARABLE_SCHEMA,
    StandardWearable,
    ThirdPartyWearable,
    Wearable,
)

logger = logging.getLogger(__name__)


def is_standard(wearable: Any) -> bool:
    """True if the wearable has a valid rarity and a non-empty collection address."""
    if not isinstance(wearable, Mapping):
        return False
    collection_address = wearable.get("collectionAddress")
    return (
        Rarity.validate(wearable.get("rarity"))
        and isinstance(collection_address, str)
        and len(collection_address) > 0
    )


def is_third_party(wearable: Any) -> bool:
    """
    True if the wearable carries a usable Merkle proof.

    The proof must be well formed, name at least one hashing key, every
    hashing key must be a property of the wearable, and the proof itself
    must not be empty.
    """
    if not isinstance(wearable, Mapping):
        return False
    merkle_proof = wearable.get("merkleProof")
    if not validate_merkle_proof(merkle_proof):
        return False
    hashing_keys = merkle_proof["hashingKeys"]
    if len(hashing_keys) == 0:
        return False
    contains_all_keys = all(key in wearable for key in hashing_keys)
    proof_is_not_empty = len(merkle_proof["proof"]) > 0
    return contains_all_keys and proof_is_not_empty


def duplicated_locales(i18n: list[Mapping[str, Any]]) -> list[str]:
    """Locale codes that appear more than once, in order of first repetition."""
    seen: set[str] = set()
    duplicated: list[str] = []
    for entry in i18n:
        code = entry["code"]
        if code in seen and code not in duplicated:
            duplicated.append(code)
        seen.add(code)
    return duplicated


class WearableValidator:
    """
    Validates wearable metadata against the schema and the semantic rules.

    Stateless apart from the compiled schema and the settings it was built
    with, so a single instance can be shared freely.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._schema_validator = build_validator(WEARABLE_SCHEMA)

    def validate(self, value: Any) -> bool:
        """True iff the value is a well-formed standard or third-party wearable."""
        valid = self._schema_validator.is_valid(value) and not self._semantic_errors(value)
        if not valid and self.settings.LOG_REJECTIONS and logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Rejected wearable {_wearable_id(value)!r}: {self.errors(value)}")
        return valid

    def errors(self, value: Any) -> list[str]:
        """
        Explain why a value is not a valid wearable.

        Structural errors are reported first; semantic rules are only
        checked once the structure is sound.

        Returns:
            Human-readable reasons, empty iff validate(value) is True
        """
        limit = self.settings.MAX_REPORTED_ERRORS
        if not self._schema_validator.is_valid(value):
            return collect_errors(self._schema_validator, value, limit)
        return self._semantic_errors(value)[:limit]

    def parse(self, value: Any) -> Wearable:
        """
        Validate a value and build the matching typed wearable.

        Returns:
            StandardWearable or ThirdPartyWearable

        Raises:
            WearableValidationException: If the value is not a valid wearable
        """
        reasons = self.errors(value)
        if reasons:
            raise WearableValidationException(reasons, wearable_id=_wearable_id(value))

        model = StandardWearable if is_standard(value) else ThirdPartyWearable
        try:
            return model.model_validate(value)
        except ValidationError as exc:
            raise WearableValidationException(
                [f"{'.'.join(str(p) for p in error['loc'])}: {error['msg']}" for error in exc.errors()],
                wearable_id=_wearable_id(value),
            ) from exc

    def _semantic_errors(self, wearable: Mapping[str, Any]) -> list[str]:
        """Cross-field checks; assumes the value already satisfies the schema."""
        reasons = []

        duplicated = duplicated_locales(wearable["i18n"])
        if duplicated:
            reasons.append(f"i18n: duplicated locale code(s) {', '.join(duplicated)}")

        standard = is_standard(wearable)
        third_party = is_third_party(wearable)
        if standard and third_party:
            reasons.append(
                "wearable has both standard fields (rarity, collectionAddress) and a merkleProof"
            )
        elif not standard and not third_party:
            reasons.append(
                "wearable is neither standard (rarity and collectionAddress) "
                "nor third-party (merkleProof with hashing keys present on the wearable)"
            )
        elif (
            standard
            and self.settings.REJECT_STANDARD_CONTENT
            and wearable.get("content") is not None
        ):
            reasons.append("content: standard wearables must not carry content")

        return reasons


def _wearable_id(value: Any) -> str | None:
    if isinstance(value, Mapping) and isinstance(value.get("id"), str):
        return value["id"]
    return None


@lru_cache
def get_wearable_validator() -> WearableValidator:
    """Shared validator built from the cached settings."""
    return WearableValidator(get_settings())


def validate_wearable(value: Any) -> bool:
    """
    Validate that wearable metadata complies with the standard or the
    third-party wearable shape and has no repeated locales.

    Some fields are optional in the schema but exactly one group must be
    present: standard wearables carry collectionAddress and rarity,
    third-party wearables carry merkleProof.
    """
    return get_wearable_validator().validate(value)


def wearable_errors(value: Any) -> list[str]:
    """Reasons a value is rejected by validate_wearable; empty if it is accepted."""
    return get_wearable_validator().errors(value)


def parse_wearable(value: Any) -> Wearable:
    """Validate a value and return it as a StandardWearable or ThirdPartyWearable."""
    return get_wearable_validator().parse(value)
