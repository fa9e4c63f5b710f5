"""
Single-string rendering capability.

A value renders itself through ``string()``. When that method is decorated with
``by_reference`` it belongs to the storage slot rather than to the value, much like a
method defined on a reference type: it is only offered when the value sits in an
addressable slot (a field of a mutable record) and never for a detached copy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol, TypeVar, runtime_checkable

from .kinds import Kind

if TYPE_CHECKING:
    from .fields import Field

_BY_REFERENCE_ATTR = "__urlvaluer_by_reference__"

F = TypeVar("F", bound=Callable[..., str])


@runtime_checkable
class Stringer(Protocol):
    def string(self) -> str: ...


def by_reference(method: F) -> F:
    """Mark a ``string`` method as reachable only through an addressable slot."""
    setattr(method, _BY_REFERENCE_ATTR, True)
    return method


def _string_method(value: Any):
    if not isinstance(value, Stringer):
        return None
    return getattr(type(value), "string", None)


def is_direct_stringer(value: Any) -> bool:
    method = _string_method(value)
    return method is not None and not getattr(method, _BY_REFERENCE_ATTR, False)


def is_reference_stringer(value: Any) -> bool:
    method = _string_method(value)
    return method is not None and getattr(method, _BY_REFERENCE_ATTR, False)


def try_stringable(field: "Field") -> tuple[str, bool]:
    """Return (rendering, True) when the field value can render itself, else ("", False)."""
    value = field.value
    if is_direct_stringer(value):
        return value.string(), True
    # a value boxed in an interface slot has no reference form of its own
    if not field.addressable or field.kind is Kind.INTERFACE:
        return "", False
    if is_reference_stringer(value):
        return value.string(), True
    return "", False
