"""Hypermedia generator — validates an entity and resolves its schema links."""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from schema_hypermedia.models import Link
from schema_hypermedia.schema.links import extract_links
from schema_hypermedia.schema.loader import parse_schema
from schema_hypermedia.schema.validator import Serializer, validate_entity
from schema_hypermedia.template.resolver import ValueResolver
from schema_hypermedia.template.scanner import find_placeholders

logger = logging.getLogger(__name__)


class HypermediaGenerator:
    """Generates resolved links for an entity from a hypermedia schema.

    ``additional_data`` maps placeholder tokens (``{baseUrl}``) to values that
    are not fields of the entity. It seeds the value cache of every call.
    """

    def __init__(
        self,
        serializer: Serializer | None = None,
        additional_data: Mapping[str, Any] | None = None,
    ):
        self.serializer = serializer
        self.additional_data = {k: str(v) for k, v in (additional_data or {}).items()}

    def get_links(
        self,
        schema: str | Mapping[str, Any],
        entity: Any,
        cache: MutableMapping[str, str] | None = None,
    ) -> list[Link]:
        """Validate ``entity`` against ``schema`` and return its resolved links.

        Without ``cache`` a fresh one is used per call, so values never leak
        between entities. A caller-supplied cache is read and written as is;
        scoping it to a single entity is then the caller's job.
        """
        doc = parse_schema(schema)
        validate_entity(doc, entity, self.serializer)
        links = extract_links(doc)

        if cache is None:
            cache = self.new_cache()
        self.enrich_links(entity, links, cache)
        return links

    def new_cache(self) -> dict[str, str]:
        return dict(self.additional_data)

    def enrich_links(
        self, entity: Any, links: list[Link], cache: MutableMapping[str, str]
    ) -> None:
        """Replace every placeholder in each link's href, in place."""
        resolver = ValueResolver(cache)
        for link in links:
            for token in find_placeholders(link.href):
                replacement = resolver.resolve(token, entity)
                link.href = link.href.replace(token, replacement)
            logger.debug("Resolved %s link to %s", link.relation, link.href)
