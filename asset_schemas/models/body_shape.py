"""Base avatar body shapes a representation can target."""

from asset_schemas.models.base import SchemaEnum


class BodyShape(SchemaEnum):
    MALE = "urn:decentraland:off-chain:base-avatars:BaseMale"
    FEMALE = "urn:decentraland:off-chain:base-avatars:BaseFemale"
