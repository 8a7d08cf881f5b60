"""Errors raised while generating hypermedia links."""


class HypermediaError(Exception):
    """Base class for all link generation failures."""


class MalformedSchemaError(HypermediaError):
    """The schema text cannot be parsed into the expected structure."""


class SchemaValidationError(HypermediaError):
    """The entity does not conform to the declared schema."""

    def __init__(self, reason: str, path: str = "$"):
        self.reason = reason
        self.path = path
        super().__init__(f"Entity is not valid for the given schema at {path}: {reason}")


class FieldNotFoundError(HypermediaError):
    """A placeholder names a field the entity does not have."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Unable to find field named: {field}")


class NullFieldError(HypermediaError):
    """A placeholder names a field whose value is None."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"The value of field {field} is null")
