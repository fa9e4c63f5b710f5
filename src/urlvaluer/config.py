from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import json
import os

FIELD_TYPES = (
    "str", "int", "float", "bool",
    "list[str]", "list[int]", "list[float]", "list[bool]",
)


@dataclass(frozen=True)
class TagSettings:
    """
    Read-only marshal settings shared by the enumerator and the engine.

    tag    -- field metadata key holding "key[,option...]"
    ignore -- key value that keeps a field out of the output
    """
    tag: str = "url"
    ignore: str = "-"

    @classmethod
    def from_env(cls) -> "TagSettings":
        return cls(
            tag=os.getenv("URLVALUER_TAG", cls.tag),
            ignore=os.getenv("URLVALUER_IGNORE", cls.ignore),
        )


DEFAULT_SETTINGS = TagSettings()


@dataclass
class MappingRule:
    from_field: str
    to_key: str
    type_name: str = "str"
    sep: str = ","  # splits list[...] cells


@dataclass
class MappingConfig:
    fields: list[MappingRule] = field(default_factory=list)
    settings: TagSettings = DEFAULT_SETTINGS

    @classmethod
    def load(cls, path: Path) -> "MappingConfig":
        data = json.loads(Path(path).read_text())
        rules = []
        for r in data["fields"]:
            rule = MappingRule(r["from"], r["to"], r.get("type", "str"), r.get("sep", ","))
            if rule.type_name not in FIELD_TYPES:
                raise ValueError(
                    f"Unsupported type '{rule.type_name}' for key '{rule.to_key}' "
                    f"(expected one of: {', '.join(FIELD_TYPES)})"
                )
            rules.append(rule)
        settings = TagSettings(tag=data.get("tag", "url"), ignore=data.get("ignore", "-"))
        return cls(fields=rules, settings=settings)


def resolve_macros(value: str) -> str:
    if not isinstance(value, str):
        return value

    # {ENV:VAR} or {ENV:VAR:default}
    if value.startswith("{ENV:") and value.endswith("}"):
        parts = value[1:-1].split(":", 2)
        _, var, *rest = parts
        default = rest[0] if rest else ""
        return os.getenv(var, default)

    if value == "{NOW_ISO}":
        from datetime import datetime, timezone
        return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")

    return value
