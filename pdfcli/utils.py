"""Utility helpers shared by pdfcli modules."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

from .exceptions import InputNotFoundError, PdfIOError

_LOGGER = logging.getLogger("pdfcli")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach the pdfcli handler to the package logger and set *level*."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger = get_logger("pdfcli")
    logger.setLevel(level)
    return logger


def require_input(path: os.PathLike[str] | str) -> Path:
    """Return *path* as a :class:`Path`, raising if it does not exist."""

    candidate = Path(path)
    if not candidate.exists():
        raise InputNotFoundError(candidate)
    return candidate


def ensure_parent_dir(path: Path) -> None:
    """Create parent directory for *path* if it does not exist."""

    ensure_dir(path.parent)


def ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PdfIOError(exc) from exc


def quote_argument(argument: str) -> str:
    """Double-quote *argument* when it contains a space."""

    if " " not in argument:
        return argument
    escaped = argument.replace('"', '\\"')
    return f'"{escaped}"'


def format_command(command: Sequence[str]) -> str:
    """Render *command* as a single diagnostic line.

    The result is meant for display only and is never handed back to a shell.
    """

    return " ".join(quote_argument(str(part)) for part in command)


_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")


def format_file_size(size_bytes: int) -> str:
    """Render *size_bytes* with a binary unit, e.g. ``"1.5 MB"``."""

    size = float(size_bytes)
    unit = _SIZE_UNITS[0]
    for unit in _SIZE_UNITS:
        if size < 1024 or unit == _SIZE_UNITS[-1]:
            break
        size /= 1024
    return f"{size:.1f} {unit}"
