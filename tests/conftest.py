"""
Pytest configuration and fixtures for asset schema tests.
"""

from typing import Any

import pytest

from asset_schemas.config import Settings, get_settings
from asset_schemas.services.wearable_validator import get_wearable_validator


def _base_wearable() -> dict[str, Any]:
    """Fields every wearable carries, regardless of its kind."""
    return {
        "id": "urn:decentraland:ethereum:collections-v1:halloween_2019:bride_of_frankie_hair",
        "name": "Bride of Frankie Hair",
        "description": "Tall and electric",
        "thumbnail": "thumbnail.png",
        "image": "image.png",
        "i18n": [
            {"code": "en", "text": "Bride of Frankie Hair"},
            {"code": "es", "text": "Pelo de la novia de Frankie"},
        ],
        "data": {
            "replaces": [],
            "hides": ["eyebrows"],
            "tags": ["halloween", "hair"],
            "representations": [
                {
                    "bodyShapes": ["urn:decentraland:off-chain:base-avatars:BaseFemale"],
                    "mainFile": "female/hair.glb",
                    "contents": ["female/hair.glb", "female/hair.png"],
                    "overrideHides": [],
                    "overrideReplaces": [],
                }
            ],
            "category": "hair",
        },
        "metrics": {
            "triangles": 1200,
            "materials": 1,
            "textures": 1,
            "meshes": 1,
            "bodies": 1,
            "entities": 1,
        },
    }


@pytest.fixture
def standard_wearable() -> dict[str, Any]:
    """A valid wearable minted in an on-chain collection."""
    wearable = _base_wearable()
    wearable["rarity"] = "epic"
    wearable["collectionAddress"] = "0x26ea2f6a7273a2f28b410406d1c13ff7d4c9a162"
    return wearable


@pytest.fixture
def third_party_wearable() -> dict[str, Any]:
    """A valid wearable authenticated by a Merkle proof."""
    wearable = _base_wearable()
    wearable["id"] = "urn:decentraland:mumbai:collections-thirdparty:cryptohats:summer:hat"
    wearable["content"] = {
        "female/hair.glb": "bafkreia7hfzmqe4s2wa6khslc2trbfrabmz5kemctzlakp2ktl2tmwx2na",
        "female/hair.png": "bafkreiddojpvdzo6ck6b5mmqw7bdhdpocqkrf3z4lkzbv7r3hgwdswqhui",
    }
    wearable["merkleProof"] = {
        "proof": [
            "0xc8ae2407cffddd38e3bcb6c6f021c9e7ac21fc6a22d1bf4ad1a7a2ec7e8a58e5",
            "0x9ff27d2ed5e3d9bd0b2b2cc1bd4dcb0acb4ee4bfbf9a1d3f5e8fd0bd8e9e8f7e",
        ],
        "index": 61,
        "hashingKeys": ["id", "name", "description", "i18n", "image", "thumbnail", "data", "content"],
        "entityHash": "52c312f5e5524739388af971cddb526c3b49ba31ec77abc07ca01f5b113f1eba",
    }
    return wearable


@pytest.fixture
def strict_settings() -> Settings:
    """Settings that reject content on standard wearables."""
    return Settings(REJECT_STANDARD_CONTENT=True)


@pytest.fixture(autouse=True)
def clear_cached_settings():
    """Make each test see settings built from its own environment."""
    get_settings.cache_clear()
    get_wearable_validator.cache_clear()
    yield
    get_settings.cache_clear()
    get_wearable_validator.cache_clear()
