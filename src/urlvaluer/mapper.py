# mapper.py
from __future__ import annotations
from dataclasses import dataclass, field, make_dataclass
from typing import Any, Callable, Optional

from .config import MappingConfig, MappingRule, resolve_macros
from .csv_reader import CsvRow
from .fields import url_field

_TRUE = {"1", "t", "true", "y", "yes", "on"}
_FALSE = {"0", "f", "false", "n", "no", "off"}


def _parse_bool(text: str) -> bool:
    low = text.lower()
    if low in _TRUE:
        return True
    if low in _FALSE:
        return False
    raise ValueError(f"invalid boolean {text!r}")


_SCALARS: dict[str, tuple[type, Callable[[str], Any]]] = {
    "str": (str, str),
    "int": (int, int),
    "float": (float, float),
    "bool": (bool, _parse_bool),
}


def _split_type(type_name: str) -> tuple[str, bool]:
    if type_name.startswith("list[") and type_name.endswith("]"):
        return type_name[5:-1], True
    return type_name, False


@dataclass
class RecordMapper:
    cfg: MappingConfig
    record_type: type = field(init=False)

    def __post_init__(self) -> None:
        specs = []
        for i, rule in enumerate(self.cfg.fields):
            scalar, is_list = _split_type(rule.type_name)
            py_type = _SCALARS[scalar][0]
            annotation = list[py_type] if is_list else Optional[py_type]
            specs.append((f"f{i}", annotation, url_field(rule.to_key, tag=self.cfg.settings.tag)))
        self.record_type = make_dataclass("CsvRecord", specs)

    def _convert(self, rule: MappingRule, text: str) -> Any:
        scalar, is_list = _split_type(rule.type_name)
        parse = _SCALARS[scalar][1]
        if is_list:
            return [parse(part.strip()) for part in text.split(rule.sep) if part.strip()]
        if text == "":
            return None
        return parse(text)

    def to_record(self, row: CsvRow) -> Any:
        """
        - If MappingRule.from_field is a CSV column, take its cell.
        - Otherwise treat it as a literal/macro and resolve it (ENV/NOW/plain strings).
        """
        values = []
        for rule in self.cfg.fields:
            src = rule.from_field
            text = row.cells[src] if src in row.cells else resolve_macros(src)
            try:
                values.append(self._convert(rule, text))
            except ValueError as e:
                raise ValueError(f"line {row.line}, column '{src}': {e}") from e
        return self.record_type(*values)
