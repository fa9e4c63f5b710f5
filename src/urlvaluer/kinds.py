from __future__ import annotations

import dataclasses
import datetime
import enum
import types
import typing
import uuid
from collections import abc
from decimal import Decimal
from typing import Any, Union

_SCALAR_TYPES = (
    str, bytes, bytearray, int, float, bool, Decimal, enum.Enum,
    datetime.date, datetime.time, datetime.timedelta, uuid.UUID,
)
_SEQUENCE_ORIGINS = (list, tuple, set, frozenset, abc.Sequence, abc.MutableSequence,
                     abc.Set, abc.MutableSet)
_MAP_ORIGINS = (dict, abc.Mapping, abc.MutableMapping)


class Kind(enum.Enum):
    SCALAR = "scalar"
    POINTER = "pointer"
    INTERFACE = "interface"
    SLICE = "slice"
    ARRAY = "array"
    STRUCT = "struct"
    MAP = "map"

    @property
    def is_container(self) -> bool:
        return self in (Kind.SLICE, Kind.ARRAY)


def _strip_annotated(annotation: Any) -> Any:
    while typing.get_origin(annotation) is typing.Annotated:
        annotation = typing.get_args(annotation)[0]
    return annotation


def _is_union(origin: Any) -> bool:
    return origin is Union or origin is types.UnionType


def _optional_target(annotation: Any) -> Any:
    """T for Optional[T] / T | None, else None."""
    if not _is_union(typing.get_origin(annotation)):
        return None
    args = typing.get_args(annotation)
    members = [a for a in args if a is not type(None)]
    if len(members) == len(args):
        return None
    if len(members) == 1:
        return members[0]
    return Union[tuple(members)]


def deref(annotation: Any) -> Any:
    """Annotation of the value behind a pointer-kind annotation."""
    annotation = _strip_annotated(annotation)
    target = _optional_target(annotation)
    return Any if target is None else target


def _classify_class(cls: type) -> Kind:
    if issubclass(cls, _SCALAR_TYPES):
        return Kind.SCALAR
    if issubclass(cls, abc.Mapping):
        return Kind.MAP
    if dataclasses.is_dataclass(cls):
        return Kind.STRUCT
    if issubclass(cls, tuple) and hasattr(cls, "_fields"):
        return Kind.STRUCT
    if issubclass(cls, (list, tuple, set, frozenset, abc.Sequence, abc.Set)):
        return Kind.SLICE
    if getattr(cls, "_is_protocol", False) or cls is object:
        return Kind.INTERFACE
    return Kind.STRUCT


def _classify_value(value: Any) -> Kind:
    if value is None:
        return Kind.INTERFACE
    return _classify_class(type(value))


def classify(annotation: Any, value: Any) -> Kind:
    """
    Coarse kind of a field, taken from its declared annotation.
    Falls back to the runtime value when the annotation carries no usable type
    (missing, a TypeVar, or a forward reference that could not be resolved).
    """
    annotation = _strip_annotated(annotation)

    if annotation is None or isinstance(annotation, (typing.TypeVar, str, typing.ForwardRef)):
        return _classify_value(value)
    if annotation is Any or annotation is object:
        return Kind.INTERFACE

    origin = typing.get_origin(annotation)
    if _is_union(origin):
        if _optional_target(annotation) is not None:
            return Kind.POINTER
        return Kind.INTERFACE
    if origin is typing.Literal:
        return Kind.SCALAR
    if origin is not None:
        if origin is tuple:
            args = typing.get_args(annotation)
            if len(args) == 2 and args[1] is Ellipsis:
                return Kind.SLICE
            return Kind.ARRAY
        if isinstance(origin, type) and issubclass(origin, _MAP_ORIGINS):
            return Kind.MAP
        if origin in _SEQUENCE_ORIGINS or (isinstance(origin, type) and issubclass(origin, (list, set))):
            return Kind.SLICE
        return _classify_value(value)

    if isinstance(annotation, type):
        if annotation is tuple:
            return Kind.SLICE
        return _classify_class(annotation)
    return _classify_value(value)
