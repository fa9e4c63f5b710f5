from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import csv
from typing import Iterator


@dataclass
class CsvRow:
    line: int  # 1-based, header is line 1
    cells: dict[str, str]


@dataclass
class CsvReader:
    path: Path
    delimiter: str = ","
    encoding: str = "utf-8"

    def rows(self) -> Iterator[CsvRow]:
        with Path(self.path).open(newline="", encoding=self.encoding) as f:
            reader = csv.DictReader(f, delimiter=self.delimiter)
            for row in reader:
                cells = {
                    k.strip(): (v.strip() if isinstance(v, str) else "")
                    for k, v in row.items()
                    if k is not None
                }
                if not any(cells.values()):
                    continue
                yield CsvRow(line=reader.line_num, cells=cells)
