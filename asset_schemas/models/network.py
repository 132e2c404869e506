"""Blockchain networks an asset can live on."""

from asset_schemas.models.base import SchemaEnum


class Network(SchemaEnum):
    """Different supported networks."""
    ETHEREUM = "ETHEREUM"
    MATIC = "MATIC"
    BSC = "BSC"
    TEST = "TEST"
