"""Data models for hypermedia schema documents.

A hypermedia schema is an ordinary JSON Schema with an extra top-level
``links`` section. The link extractor parses that section into these models;
everything else in the document is left to the validator.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

DEFAULT_METHOD = "GET"


class Link(BaseModel):
    """A single hypermedia link. ``href`` is rewritten in place when resolved."""

    model_config = ConfigDict(extra="ignore")

    relation: str = Field(validation_alias=AliasChoices("relation", "rel"))
    href: str  # /items/{Id}
    method: str = DEFAULT_METHOD  # GET / POST / PUT / DELETE / PATCH


class HypermediaSchema(BaseModel):
    """The link-bearing view of a schema document."""

    model_config = ConfigDict(extra="ignore")

    links: list[Link]
