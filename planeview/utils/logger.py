# planeview/utils/logger.py
"""Single-source Loguru setup: safe console/file sinks, no external placeholders."""

from __future__ import annotations

import inspect
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from loguru import logger as _root_logger
from loguru._logger import Logger as LoguruLogger

from planeview.config import get_settings

_CONFIGURED = False
_LOG_FILE: Optional[Path] = None
_LOG_HANDLE: Optional[TextIO] = None


# ---------- sinks as callables (no format strings) ----------
def _console_sink(msg) -> None:
    r = msg.record
    module = r["extra"].get("module", r.get("name", "unknown"))
    # one record == one line
    print(f"{r['time']:%H:%M:%S} | {r['level'].name: <3.3} | {module} | {r['message']}")


def _make_file_sink(fh: TextIO):
    def _file_sink(msg) -> None:
        r = msg.record
        module = r["extra"].get("module", r.get("name", "unknown"))
        fh.write(
            f"{r['time'].isoformat()} | {r['level'].name} | {module} | {r['message']}\n"
        )
        fh.flush()

    return _file_sink


def _configure_logger(level: str | None = None, to_file: bool | None = None) -> None:
    global _CONFIGURED, _LOG_FILE, _LOG_HANDLE

    settings = get_settings()
    level = (level or settings.log_level.value).upper()
    to_file = settings.log_to_file if to_file is None else to_file

    # drop every previously installed handler, including loguru's default stderr one
    _root_logger.remove()
    if _LOG_HANDLE is not None:
        _LOG_HANDLE.close()
        _LOG_HANDLE = None
        _LOG_FILE = None

    def _inject_extras(record):
        record["extra"].setdefault("module", record.get("name", "unknown"))
        return record

    logger = _root_logger.patch(_inject_extras)
    logger.add(_console_sink, level=level, catch=True)

    if to_file:
        log_dir = settings.paths.logs_root
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        _LOG_FILE = log_dir / f"planeview_{timestamp}.log"
        _LOG_HANDLE = _LOG_FILE.open("a", encoding="utf-8")
        logger.add(_make_file_sink(_LOG_HANDLE), level=level, catch=True)

    globals()["_LOGGER"] = logger
    _CONFIGURED = True


def get_logger(name: str | None = None) -> LoguruLogger:
    if not _CONFIGURED:
        _configure_logger()

    # resolve the calling module name automatically
    frame = inspect.currentframe()
    module_name = name
    if module_name is None and frame is not None:
        caller_frame = frame.f_back
        if caller_frame is not None:
            module = inspect.getmodule(caller_frame)
            if module is not None and module.__name__ != "__main__":
                module_name = module.__name__

    return globals()["_LOGGER"].bind(module=module_name or "unknown")


def configure(level: str | None = None, to_file: bool | None = None) -> None:
    _configure_logger(level=level, to_file=to_file)


def log_file() -> Optional[Path]:
    """Path of the active log file, if file logging is enabled."""
    return _LOG_FILE


__all__ = ["get_logger", "configure", "log_file"]
