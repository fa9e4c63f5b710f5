from __future__ import annotations
import argparse
from pathlib import Path
from typing import Optional, Sequence

from .errors import UrlValuerError
from .generator import QueryGenerator
from .log import configure_logging

def main(argv: Optional[Sequence[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Encode CSV rows as URL query strings")
    p.add_argument("--csv", required=True, type=Path, help="Input rows CSV")
    p.add_argument("--config", required=True, type=Path, help="Mapping JSON")
    p.add_argument("--out", type=Path, help="Output path (one query per line); stdout if omitted")
    p.add_argument("--delimiter", default=",", help="CSV delimiter")
    p.add_argument("--log-level", help="Logging level (default: $URLVALUER_LOG_LEVEL or WARNING)")

    args = p.parse_args(argv)
    configure_logging(args.log_level)

    try:
        gen = QueryGenerator.from_paths(args.csv, args.config, args.delimiter)
        if args.out:
            out = gen.generate(args.out)
            print(f"Generated queries: {out}")
        else:
            for line in gen.queries():
                print(line)
    except UrlValuerError as e:
        # already carries the "urlvaluer: " prefix where it names a field
        raise SystemExit(str(e) if str(e).startswith("urlvaluer: ") else f"urlvaluer: {e}") from e
    except (ValueError, KeyError, OSError) as e:
        raise SystemExit(f"urlvaluer: {e}") from e
