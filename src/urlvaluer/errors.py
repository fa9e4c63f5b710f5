from __future__ import annotations


class UrlValuerError(Exception):
    """Base class for every error raised by urlvaluer."""


class EnumerationError(UrlValuerError, TypeError):
    """The marshal target is not a record (dataclass instance)."""


class CastError(UrlValuerError, ValueError):
    """A scalar value has no string form."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"unable to cast {value!r} of type {type(value).__name__} to str")


class MarshalError(UrlValuerError):
    """A field could not be converted; raised instead of returning partial values."""

    def __init__(self, field_name: str, cause: Exception) -> None:
        self.field_name = field_name
        super().__init__(f"urlvaluer: field={field_name} casting error: {cause}")
