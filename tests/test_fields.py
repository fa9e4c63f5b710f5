from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union

import pytest

from urlvaluer import EnumerationError, TagSettings, enumerate_fields, url_field
from urlvaluer.kinds import Kind, classify, deref


@dataclass
class Point:
    x: int


class Shape(Protocol):
    def area(self) -> float: ...


@pytest.mark.parametrize("annotation, value, kind", [
    (int, 1, Kind.SCALAR),
    (str, "a", Kind.SCALAR),
    (Optional[int], 1, Kind.POINTER),
    (int | None, None, Kind.POINTER),
    (Any, 1, Kind.INTERFACE),
    (object, 1, Kind.INTERFACE),
    (Union[int, str], 1, Kind.INTERFACE),
    (Shape, None, Kind.INTERFACE),
    (list[int], [], Kind.SLICE),
    (Sequence[str], (), Kind.SLICE),
    (tuple[int, ...], (), Kind.SLICE),
    (tuple[int, str], (1, "a"), Kind.ARRAY),
    (dict[str, int], {}, Kind.MAP),
    (Mapping[str, int], {}, Kind.MAP),
    (Point, Point(1), Kind.STRUCT),
    (None, [1], Kind.SLICE),
    ("Unresolved", 1.5, Kind.SCALAR),
])
def test_classify(annotation, value, kind):
    assert classify(annotation, value) is kind


def test_deref():
    assert deref(Optional[int]) is int
    assert deref(Union[int, str, None]) == Union[int, str]


@dataclass
class Query:
    term: str = url_field("q", "omitempty")
    page: Optional[int] = url_field("page", default=None)
    untagged: str = ""
    _secret: str = url_field("secret", default="x")


def test_enumerate_fields_resolves_string_annotations():
    fields = enumerate_fields(Query("shoes", 2))
    assert [f.name for f in fields] == ["term", "page"]
    term, page = fields
    assert (term.key, term.options, term.kind, term.value) == ("q", ("omitempty",), Kind.SCALAR, "shoes")
    assert (page.key, page.kind, page.value) == ("page", Kind.POINTER, 2)
    assert all(f.addressable for f in fields)


@dataclass(frozen=True)
class FrozenQuery:
    term: str = url_field("q")


def test_frozen_fields_are_not_addressable():
    (term,) = enumerate_fields(FrozenQuery("x"))
    assert term.addressable is False


def test_custom_tag():
    @dataclass
    class R:
        a: int = url_field("alpha", tag="form")
        b: int = url_field("beta")

    fields = enumerate_fields(R(1, 2), TagSettings(tag="form"))
    assert [f.key for f in fields] == ["alpha"]


def test_enumerate_rejects_non_records():
    with pytest.raises(EnumerationError):
        enumerate_fields(Query)
    with pytest.raises(EnumerationError):
        enumerate_fields({"q": "x"})
