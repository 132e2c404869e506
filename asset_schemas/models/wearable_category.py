"""Avatar slots a wearable can occupy, replace or hide."""

from asset_schemas.models.base import SchemaEnum


class WearableCategory(SchemaEnum):
    """Wearable slot categories."""
    EYEBROWS = "eyebrows"
    EYES = "eyes"
    FACIAL_HAIR = "facial_hair"
    HAIR = "hair"
    MOUTH = "mouth"
    UPPER_BODY = "upper_body"
    LOWER_BODY = "lower_body"
    FEET = "feet"
    EARRING = "earring"
    EYEWEAR = "eyewear"
    HAT = "hat"
    HELMET = "helmet"
    MASK = "mask"
    TIARA = "tiara"
    TOP_HEAD = "top_head"
    SKIN = "skin"
    HANDS_WEAR = "hands_wear"
    BODY_SHAPE = "body_shape"
