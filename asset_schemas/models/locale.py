"""Locale codes used to key internationalized text."""

from asset_schemas.models.base import SchemaEnum


class Locale(SchemaEnum):
    EN = "en"
    ES = "es"
    ZH = "zh"
