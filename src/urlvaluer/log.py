from __future__ import annotations

import logging
import os
import sys
from typing import Optional

PACKAGE_LOGGER = "urlvaluer"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# library default: silent unless the application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach one stderr handler to the package logger (idempotent) and set its level.
    `level` wins over $URLVALUER_LOG_LEVEL; unknown names fall back to WARNING.
    """
    name = (level or os.environ.get("URLVALUER_LOG_LEVEL") or "WARNING").upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    root = logging.getLogger(PACKAGE_LOGGER)
    if not any(getattr(h, "_urlvaluer_cli", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._urlvaluer_cli = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(resolved)
    return root


def get_logger(name: str) -> logging.Logger:
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
