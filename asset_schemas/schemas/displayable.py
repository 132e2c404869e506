"""
Properties shared by every deployment that can be shown in a menu.
"""

from pydantic import BaseModel, ConfigDict, Field

from asset_schemas.core.validation import JSONSchema, nullable

DISPLAYABLE_PROPERTIES: dict[str, JSONSchema] = {
    "menuBarIcon": nullable({"type": "string"}),
}


class DisplayableDeployment(BaseModel):
    """Base model for deployments with an optional menu bar icon."""

    menu_bar_icon: str | None = Field(
        default=None,
        alias="menuBarIcon",
        description="Content file shown in the menu bar",
    )

    model_config = ConfigDict(frozen=True)
