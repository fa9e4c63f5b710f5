from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .config import MappingConfig
from .csv_reader import CsvReader
from .engine import Marshaler
from .log import get_logger
from .mapper import RecordMapper

logger = get_logger(__name__)


@dataclass
class QueryGenerator:
    cfg: MappingConfig
    csv_path: Path
    delimiter: str = ","

    @classmethod
    def from_paths(cls, csv_path: Path, cfg_path: Path, delimiter: str = ",") -> "QueryGenerator":
        cfg = MappingConfig.load(cfg_path)
        return cls(cfg=cfg, csv_path=Path(csv_path), delimiter=delimiter)

    def queries(self) -> Iterator[str]:
        mapper = RecordMapper(self.cfg)
        marshaler = Marshaler(self.cfg.settings)
        for row in CsvReader(self.csv_path, self.delimiter).rows():
            yield marshaler.marshal_query(mapper.to_record(row))

    def generate(self, out_path: Path) -> Path:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        lines = list(self.queries())
        out_path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        logger.info("wrote %d queries to %s", len(lines), out_path)
        return out_path
