"""
JSON-schema validator factory.

Turns a schema fragment (plain dictionary) into a predicate that checks an
arbitrary deserialized value against it. Structural checking is delegated to
jsonschema's Draft 7 implementation; every fragment is checked once when the
predicate is generated so that a broken schema fails loudly at import time
instead of silently rejecting every value.
"""

import copy
import logging
from collections.abc import Callable
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

from asset_schemas.core.exceptions import InvalidSchemaException

logger = logging.getLogger(__name__)

JSONSchema = dict[str, Any]
ValidateFunction = Callable[[Any], bool]


def build_validator(schema: JSONSchema) -> Draft7Validator:
    """
    Check a schema fragment and compile it into a Draft 7 validator.

    The validator works on a private copy; changing the fragment afterwards
    does not change what it accepts.

    Raises:
        InvalidSchemaException: If the fragment is not a valid JSON schema.
    """
    try:
        Draft7Validator.check_schema(schema)
    except SchemaError as exc:
        logger.error(f"Refusing to build validator for invalid schema: {exc.message}")
        raise InvalidSchemaException(
            message=f"Invalid JSON schema: {exc.message}",
            details={"path": [str(p) for p in exc.path]},
        ) from exc
    return Draft7Validator(copy.deepcopy(schema))


def generate_validator(schema: JSONSchema) -> ValidateFunction:
    """
    Generate a predicate for the given schema fragment.

    The returned function never raises; any value that does not satisfy
    the schema (including values of the wrong type) yields False.
    """
    validator = build_validator(schema)

    def validate(value: Any) -> bool:
        return validator.is_valid(value)

    return validate


def collect_errors(
    validator: Draft7Validator,
    value: Any,
    limit: int | None = None,
) -> list[str]:
    """
    Collect readable structural errors for a value.

    Args:
        validator: Compiled validator from build_validator
        value: Value to check
        limit: Optional maximum number of messages to return

    Returns:
        Messages formatted as "path: message", sorted by path. Empty if valid.
    """
    errors = sorted(
        validator.iter_errors(value),
        key=lambda e: ([str(p) for p in e.absolute_path], e.message),
    )
    messages = []
    for error in errors[:limit]:
        path = ".".join(str(p) for p in error.absolute_path) if error.absolute_path else "root"
        messages.append(f"{path}: {error.message}")
    return messages


def nullable(schema: JSONSchema) -> JSONSchema:
    """
    Return a copy of a schema fragment that also accepts null.

    Typed fragments get "null" added to their type (and to their enum, when
    they have one); untyped fragments are wrapped in anyOf.
    """
    result = copy.deepcopy(schema)
    schema_type = result.get("type")

    if schema_type is None:
        return {"anyOf": [result, {"type": "null"}]}

    types = [schema_type] if isinstance(schema_type, str) else list(schema_type)
    if "null" not in types:
        types.append("null")
    result["type"] = types

    if "enum" in result and None not in result["enum"]:
        result["enum"] = [*result["enum"], None]

    return result
