"""Structural validation of entities against a schema document.

The entity is serialized into a plain JSON document first and then checked
with jsonschema. The hypermedia ``links`` section is not a validation keyword
and is ignored by the validator.
"""

from collections.abc import Callable, Mapping
from typing import Any

from jsonschema.exceptions import SchemaError, best_match
from jsonschema.protocols import Validator
from jsonschema.validators import validator_for
from pydantic_core import to_jsonable_python

from schema_hypermedia.errors import MalformedSchemaError, SchemaValidationError
from schema_hypermedia.template.resolver import HasNamedFields, public_field_names

Serializer = Callable[[Any], Any]


def to_document(entity: Any, serializer: Serializer | None = None) -> Any:
    """Serialize ``entity`` into JSON-compatible data.

    A caller-supplied ``serializer`` takes precedence. Otherwise pydantic
    models, dataclasses and mappings are serialized directly, namedtuples
    as objects, entities with ``named_fields()`` through that mapping, and
    any other object through its public fields and properties.
    """
    if serializer is not None:
        source = serializer(entity)
    elif isinstance(entity, HasNamedFields):
        source = dict(entity.named_fields())
    elif isinstance(entity, tuple) and hasattr(entity, "_asdict"):
        source = entity._asdict()
    else:
        source = entity

    try:
        return to_jsonable_python(source, by_alias=True, fallback=_public_fields)
    except ValueError as e:
        # PydanticSerializationError and circular references both land here
        raise SchemaValidationError(f"Entity cannot be serialized: {e}") from e


def validate_entity(
    schema: Mapping[str, Any], entity: Any, serializer: Serializer | None = None
) -> None:
    """Raise SchemaValidationError unless ``entity`` conforms to ``schema``."""
    validator = build_validator(schema)
    doc = to_document(entity, serializer)

    error = best_match(validator.iter_errors(doc))
    if error is not None:
        raise SchemaValidationError(error.message, error.json_path)


def build_validator(schema: Mapping[str, Any]) -> Validator:
    """Pick the validator class from ``$schema`` and check the schema itself."""
    cls = validator_for(schema)
    try:
        cls.check_schema(schema)
    except SchemaError as e:
        raise MalformedSchemaError(f"Schema is not a valid JSON Schema: {e.message}") from e
    return cls(schema, format_checker=cls.FORMAT_CHECKER)


def _public_fields(value: Any) -> dict[str, Any]:
    return {name: getattr(value, name) for name in public_field_names(value)}
