"""Placeholder value resolver.

Resolves a placeholder token such as ``{id}`` against an entity. Values are
memoized by token text in a cache that is shared by every link processed for
the same entity, so a token repeated across links reads the entity once.
"""

import inspect
import logging
import types
from collections.abc import Mapping, MutableMapping
from functools import cached_property
from typing import Any, Protocol, runtime_checkable

from schema_hypermedia.errors import FieldNotFoundError, NullFieldError
from schema_hypermedia.template.scanner import strip_delimiters

logger = logging.getLogger(__name__)


@runtime_checkable
class HasNamedFields(Protocol):
    """An entity that exposes its fields explicitly instead of by introspection."""

    def named_fields(self) -> Mapping[str, Any]: ...


class ValueResolver:
    """Resolves placeholder tokens to strings, caching by token."""

    def __init__(self, cache: MutableMapping[str, str] | None = None):
        self.cache = cache if cache is not None else {}

    def resolve(self, token: str, entity: Any) -> str:
        if token in self.cache:
            logger.debug("Cache hit for %s", token)
            return self.cache[token]

        logger.debug("Cache miss for %s, reading entity", token)
        value = get_field_value(strip_delimiters(token), entity)
        self.cache[token] = value
        return value


def get_field_value(name: str, entity: Any) -> str:
    """Read field ``name`` (case-insensitive) from ``entity`` as a string.

    Raises FieldNotFoundError when the entity has no such field and
    NullFieldError when the field holds None.
    """
    if isinstance(entity, HasNamedFields):
        fields = entity.named_fields()
        key = _match_name(name, [k for k in fields if isinstance(k, str)])
        value = fields[key]
    elif isinstance(entity, Mapping):
        key = _match_name(name, [k for k in entity if isinstance(k, str)])
        value = entity[key]
    else:
        key = _match_name(name, public_field_names(entity))
        value = getattr(entity, key)

    if value is None:
        raise NullFieldError(key)
    return str(value)


def _match_name(name: str, candidates: list[str]) -> str:
    if name in candidates:
        return name

    wanted = name.casefold()
    matches = [c for c in candidates if c.casefold() == wanted]
    if not matches:
        raise FieldNotFoundError(name)
    if len(matches) > 1:
        raise FieldNotFoundError(
            name, f"Field name {name} is ambiguous: {', '.join(sorted(matches))}"
        )
    return matches[0]


def public_field_names(entity: Any) -> list[str]:
    """Public, readable data attributes of an arbitrary object.

    Covers instance attributes, slots, namedtuple fields, properties,
    ``cached_property`` and other data descriptors. Descriptors are listed
    from the class without being evaluated.
    """
    cls = type(entity)
    names: list[str] = list(getattr(entity, "__dict__", {}))
    if isinstance(entity, tuple):
        names.extend(getattr(entity, "_fields", ()))

    descriptors: list[str] = []
    for klass in cls.__mro__:
        if klass.__module__ == "builtins":
            continue
        for attr, member in vars(klass).items():
            if isinstance(member, types.MemberDescriptorType):
                # slot; readable only once assigned
                names.append(attr)
            elif isinstance(member, property):
                if member.fget is not None:
                    descriptors.append(attr)
            elif isinstance(member, cached_property) or inspect.isdatadescriptor(member):
                descriptors.append(attr)

    names = [n for n in names if hasattr(entity, n) and not callable(getattr(entity, n))]
    return [n for n in dict.fromkeys(names + descriptors) if not n.startswith("_")]
