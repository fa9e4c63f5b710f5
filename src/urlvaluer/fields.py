from __future__ import annotations
from dataclasses import dataclass
import dataclasses
import typing
from typing import Any

from .config import DEFAULT_SETTINGS, TagSettings
from .errors import EnumerationError
from .kinds import Kind, classify
from .log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Field:
    name: str
    key: str
    value: Any
    kind: Kind
    annotation: Any = None
    addressable: bool = False
    options: tuple[str, ...] = ()


def url_field(key: str, *options: str, tag: str = DEFAULT_SETTINGS.tag, **kwargs: Any) -> Any:
    """
    dataclasses.field() with the output key stored under the tag metadata key:

        name: str = url_field("first_name")
        skip: str = url_field("-", default="")
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[tag] = ",".join((key,) + options)
    return dataclasses.field(metadata=metadata, **kwargs)


def _parse_tag(raw: Any) -> tuple[str, tuple[str, ...]]:
    key, *options = str(raw).split(",")
    return key.strip(), tuple(o.strip() for o in options if o.strip())


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as e:
        # unresolved forward references; kinds fall back to runtime values
        logger.debug("type hints of %s unresolved (%s)", cls.__name__, e)
        return {}


def enumerate_fields(record: Any, settings: TagSettings = DEFAULT_SETTINGS) -> list[Field]:
    """
    Tagged, public fields of a dataclass instance in declaration order.
    Fields of a frozen dataclass are read-only and therefore not addressable.
    """
    if not dataclasses.is_dataclass(record) or isinstance(record, type):
        raise EnumerationError(
            f"cannot marshal {type(record).__name__}: expected a dataclass instance"
        )

    cls = type(record)
    hints = _type_hints(cls)
    addressable = not cls.__dataclass_params__.frozen

    out: list[Field] = []
    for f in dataclasses.fields(record):
        if f.name.startswith("_"):
            logger.debug("%s.%s skipped: not public", cls.__name__, f.name)
            continue
        raw = f.metadata.get(settings.tag)
        if raw is None:
            logger.debug("%s.%s skipped: no %r tag", cls.__name__, f.name, settings.tag)
            continue

        key, options = _parse_tag(raw)
        value = getattr(record, f.name)
        annotation = hints.get(f.name, f.type)
        out.append(Field(
            name=f.name,
            key=key,
            value=value,
            kind=classify(annotation, value),
            annotation=annotation,
            addressable=addressable,
            options=options,
        ))
    return out
