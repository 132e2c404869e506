"""NFT categories listed by the marketplace."""

from asset_schemas.models.base import SchemaEnum


class NFTCategory(SchemaEnum):
    PARCEL = "parcel"
    ESTATE = "estate"
    WEARABLE = "wearable"
    PROPS = "props"
    ENS = "ens"
    EMOTE = "emote"
