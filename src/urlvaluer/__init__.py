from .config import DEFAULT_SETTINGS, TagSettings
from .engine import Marshaler, cast_sequence, convert, marshal, marshal_query, parse_fields
from .errors import CastError, EnumerationError, MarshalError, UrlValuerError
from .fields import Field, enumerate_fields, url_field
from .kinds import Kind
from .stringer import Stringer, by_reference
from .values import Values

__all__ = [
    "DEFAULT_SETTINGS",
    "TagSettings",
    "Marshaler",
    "marshal",
    "marshal_query",
    "convert",
    "cast_sequence",
    "parse_fields",
    "UrlValuerError",
    "EnumerationError",
    "CastError",
    "MarshalError",
    "Field",
    "enumerate_fields",
    "url_field",
    "Kind",
    "Stringer",
    "by_reference",
    "Values",
]
