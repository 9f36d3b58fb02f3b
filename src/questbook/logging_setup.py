# src/questbook/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "questbook.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console shows questbook records at the configured level. Everything else
    (captured warnings, GUI toolkit and storage libraries) only at ERROR+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "questbook" or name.startswith("questbook."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = "data/logs",
    console_level: int | str = logging.INFO,
    file_level: int | str = logging.DEBUG,
) -> Path:
    """
    Route model/store logs to stderr and to ``<log_dir>/questbook.log``.

    The file keeps DEBUG records (store resets, completed missions, listener
    dispatch). Replaces any handlers already on the root logger, so a second
    call reconfigures instead of duplicating output.

    Returns the path of the log file.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    logfile = logging.FileHandler(str(log_file), encoding="utf-8")
    logfile.setLevel(file_level)
    logfile.setFormatter(fmt)
    root.addHandler(logfile)

    logging.captureWarnings(True)
    return log_file
