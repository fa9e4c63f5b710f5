from __future__ import annotations
from dataclasses import dataclass, replace
from collections.abc import Iterable
from typing import Any

from .cast import to_string
from .config import DEFAULT_SETTINGS, TagSettings
from .errors import CastError, MarshalError
from .fields import Field, enumerate_fields
from .kinds import Kind, classify, deref
from .stringer import try_stringable
from .values import Values


def _is_nil(field: Field) -> bool:
    # annotations are not enforced, so None is nil whatever the declared kind
    return field.value is None


def _has_ignore_key(field: Field, settings: TagSettings) -> bool:
    return field.key == settings.ignore


def _deref_field(field: Field) -> Field:
    # one level peeled; the target slot stays addressable like the pointer's referent
    target = deref(field.annotation)
    return replace(
        field,
        annotation=target,
        kind=classify(target, field.value),
        addressable=True,
    )


def _cast_value(field: Field) -> list[str]:
    try:
        return [to_string(field.value)]
    except CastError as e:
        raise MarshalError(field.name, e) from e


def cast_sequence(field: Field) -> list[str]:
    """One plain scalar cast per element, in order; elements skip the Stringer probe."""
    value = field.value
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Iterable):
        raise MarshalError(field.name, CastError(value))
    out: list[str] = []
    for item in value:
        try:
            out.append(to_string(item))
        except CastError as e:
            raise MarshalError(field.name, e) from e
    return out


def convert(field: Field, settings: TagSettings = DEFAULT_SETTINGS) -> list[str]:
    """
    Strings for one field, empty when the field contributes nothing:
    nil pointer/interface, ignore key, non-stringable struct or map.
    """
    if _is_nil(field):
        return []
    if _has_ignore_key(field, settings):
        return []

    s, ok = try_stringable(field)
    if ok:
        return [s]

    if field.kind in (Kind.STRUCT, Kind.MAP):
        return []
    if field.kind is Kind.POINTER:
        return convert(_deref_field(field), settings)
    if not field.kind.is_container:
        return _cast_value(field)
    return cast_sequence(field)


def parse_fields(fields: list[Field], settings: TagSettings = DEFAULT_SETTINGS) -> Values:
    values = Values()
    for field in fields:
        strs = convert(field, settings)
        if not strs:
            continue
        values[field.key] = strs
    return values


@dataclass(frozen=True)
class Marshaler:
    settings: TagSettings = DEFAULT_SETTINGS

    def marshal(self, record: Any) -> Values:
        fields = enumerate_fields(record, self.settings)
        return parse_fields(fields, self.settings)

    def marshal_query(self, record: Any) -> str:
        return self.marshal(record).encode()


_default = Marshaler()


def marshal(record: Any) -> Values:
    """Marshal a tagged dataclass instance into query values."""
    return _default.marshal(record)


def marshal_query(record: Any) -> str:
    return _default.marshal_query(record)
