"""
Base class for closed string enumerations.

Every enumeration defines its accepted values once, as members; the schema
fragment, the predicate and the parser are all derived from that set.
"""

import enum
from typing import Any, TypeVar

from asset_schemas.core.validation import JSONSchema

E = TypeVar("E", bound="SchemaEnum")


class SchemaEnum(str, enum.Enum):
    """String enumeration exposing a JSON-schema fragment and a validator."""

    @classmethod
    def values(cls) -> list[str]:
        """All accepted values, in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def schema(cls) -> JSONSchema:
        """JSON-schema fragment accepting exactly the member values."""
        return {
            "type": "string",
            "enum": cls.values(),
        }

    @classmethod
    def validate(cls, value: Any) -> bool:
        """True only if value is one of the member values."""
        return isinstance(value, str) and value in cls._value2member_map_

    @classmethod
    def parse(cls: type[E], value: Any) -> E | None:
        """Map a raw value to its member, or None if it is not accepted."""
        if not cls.validate(value):
            return None
        return cls(value)

    def __str__(self) -> str:
        return self.value
