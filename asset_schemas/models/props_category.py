"""Categories of prop NFTs."""

from asset_schemas.models.base import SchemaEnum


class PropsCategory(SchemaEnum):
    DIAMOND = "diamond"
    BOX = "box"
    FRAGMENTS = "fragments"
    VIBRANIUM = "vibranium"
