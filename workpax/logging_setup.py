from __future__ import annotations

import logging
import sys

# third-party loggers only get through at WARNING and above
class _WorkpaxFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "workpax" or record.name.startswith("workpax."):
            return True
        return record.levelno >= logging.WARNING

def setup_logging(level: int | str = logging.INFO) -> None:
    """Install a single stderr handler on the root logger; safe to call again."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_WorkpaxFilter())
    root.addHandler(ch)

    logging.captureWarnings(True)
