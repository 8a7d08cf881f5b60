"""Link extractor — reads the ``links`` section of a hypermedia schema."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from schema_hypermedia.errors import MalformedSchemaError
from schema_hypermedia.models import HypermediaSchema, Link
from schema_hypermedia.schema.loader import parse_schema

logger = logging.getLogger(__name__)


def extract_links(schema: str | Mapping[str, Any]) -> list[Link]:
    """Return the schema's link templates in declaration order.

    Href templates are not checked here; bad placeholders surface when the
    links are resolved.
    """
    doc = parse_schema(schema)
    try:
        hyper_schema = HypermediaSchema.model_validate(doc)
    except ValidationError as e:
        raise MalformedSchemaError(f"Schema has no valid links section: {e}") from e

    logger.debug("Extracted %d links from schema", len(hyper_schema.links))
    return hyper_schema.links
