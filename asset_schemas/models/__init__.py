"""
Closed string enumerations for asset metadata.
Each enumeration exposes schema(), validate() and parse().
"""

from asset_schemas.models.base import SchemaEnum
from asset_schemas.models.body_shape import BodyShape
from asset_schemas.models.locale import Locale
from asset_schemas.models.network import Network
from asset_schemas.models.nft_category import NFTCategory
from asset_schemas.models.props_category import PropsCategory
from asset_schemas.models.rarity import Rarity
from asset_schemas.models.wearable_category import WearableCategory

__all__ = [
    "SchemaEnum",
    "BodyShape",
    "Locale",
    "Network",
    "NFTCategory",
    "PropsCategory",
    "Rarity",
    "WearableCategory",
]
