from __future__ import annotations

from typing import Iterable
from urllib.parse import urlencode


class Values(dict[str, list[str]]):
    """
    Query parameters: each key maps to an ordered list of values.

    ``first`` returns the first value (or "") like a single-valued mapping;
    ``get_list`` returns all of them.
    """

    def first(self, key: str, default: str = "") -> str:
        vs = self.get(key)
        if not vs:
            return default
        return vs[0]

    def get_list(self, key: str) -> list[str]:
        return list(self.get(key) or [])

    def set(self, key: str, value: str) -> None:
        self[key] = [value]

    def add(self, key: str, value: str) -> None:
        self.setdefault(key, []).append(value)

    def extend(self, key: str, values: Iterable[str]) -> None:
        self.setdefault(key, []).extend(values)

    def delete(self, key: str) -> None:
        self.pop(key, None)

    def has(self, key: str) -> bool:
        return key in self

    def encode(self) -> str:
        """URL-encoded "k=v1&k=v2" form, sorted by key."""
        if not self:
            return ""
        return urlencode(sorted(self.items()), doseq=True)
