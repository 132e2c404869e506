"""
Wearable rarities.

A rarity fixes how many copies of an item can ever be minted and the colour
used to display it.
"""

from asset_schemas.models.base import SchemaEnum


class Rarity(SchemaEnum):
    """Rarity tiers, from scarcest to most common."""
    UNIQUE = "unique"
    MYTHIC = "mythic"
    LEGENDARY = "legendary"
    EPIC = "epic"
    RARE = "rare"
    UNCOMMON = "uncommon"
    COMMON = "common"

    @property
    def max_supply(self) -> int:
        """Maximum number of items that can be minted with this rarity."""
        return _MAX_SUPPLY[self]

    @property
    def color(self) -> str:
        """Display colour as a hex string."""
        return _COLORS[self]


_MAX_SUPPLY: dict[Rarity, int] = {
    Rarity.UNIQUE: 1,
    Rarity.MYTHIC: 10,
    Rarity.LEGENDARY: 100,
    Rarity.EPIC: 1_000,
    Rarity.RARE: 5_000,
    Rarity.UNCOMMON: 10_000,
    Rarity.COMMON: 100_000,
}

_COLORS: dict[Rarity, str] = {
    Rarity.UNIQUE: "#FFB626",
    Rarity.MYTHIC: "#FF63E1",
    Rarity.LEGENDARY: "#A657ED",
    Rarity.EPIC: "#3D85E6",
    Rarity.RARE: "#36CF75",
    Rarity.UNCOMMON: "#ED6D4F",
    Rarity.COMMON: "#ABC1C1",
}
