"""
Public operations of pdfcli.

Each operation checks its inputs, resolves the external tool it needs,
builds the command and runs it synchronously. Errors propagate as
:class:`~pdfcli.exceptions.PdfCliError` subclasses; nothing is retried.

Example:
    >>> from pdfcli import operations
    >>> operations.merge(["a.pdf", "b.pdf"], "merged.pdf")
    >>> operations.info("merged.pdf").pages
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Sequence

from .commands import (
    build_compress_command,
    build_extract_text_command,
    build_merge_command,
    build_rotate_command,
    build_split_command,
    validate_degrees,
    validate_split_pattern,
)
from .exceptions import InvalidArgumentError
from .reader import read_info
from .runner import Runner, run_tool
from .tools import Tool, locate
from .types import CompressPreset, PageSelection, PdfInfo
from .utils import ensure_dir, ensure_parent_dir, require_input

_LOGGER = logging.getLogger("pdfcli.operations")

PathLike = str | os.PathLike[str]


def merge(
    inputs: Sequence[PathLike],
    output: PathLike,
    *,
    runner: Optional[Runner] = None,
) -> Path:
    """Concatenate *inputs* in order into *output* using qpdf."""

    if not inputs:
        raise InvalidArgumentError("merge requires at least one input file")
    sources = [require_input(path) for path in inputs]
    destination = Path(output)

    executable = locate(Tool.QPDF)
    command = build_merge_command(executable, sources, destination)
    ensure_parent_dir(destination)
    (runner or run_tool)(Tool.QPDF, command).raise_for_status()

    _LOGGER.info("Merged %d file(s) into %s", len(sources), destination)
    return destination


def split_pages(
    input: PathLike,
    out_dir: PathLike,
    pattern: Optional[str] = None,
    *,
    runner: Optional[Runner] = None,
) -> Path:
    """Write every page of *input* to its own file.

    *pattern* names the output files and must contain ``%d``, which qpdf
    replaces with the page number. It defaults to ``<out_dir>/page-%d.pdf``.
    """

    source = require_input(input)
    if pattern is not None:
        validate_split_pattern(pattern)
    directory = Path(out_dir)

    executable = locate(Tool.QPDF)
    command = build_split_command(executable, source, directory, pattern)
    if pattern is None:
        ensure_dir(directory)
    else:
        ensure_parent_dir(Path(pattern))
    (runner or run_tool)(Tool.QPDF, command).raise_for_status()

    _LOGGER.info("Split %s into %s", source, command[-1])
    return directory


def extract_text(
    input: PathLike,
    output: Optional[PathLike] = None,
    *,
    runner: Optional[Runner] = None,
) -> str:
    """Extract text with pdftotext.

    Without *output* the text is captured from stdout and returned; with it
    pdftotext writes the file directly and an empty string is returned.
    """

    source = require_input(input)
    destination = Path(output) if output is not None else None

    executable = locate(Tool.PDFTOTEXT)
    command = build_extract_text_command(executable, source, destination)
    if destination is not None:
        ensure_parent_dir(destination)
    result = (runner or run_tool)(Tool.PDFTOTEXT, command).raise_for_status()

    if destination is None:
        return result.stdout
    _LOGGER.info("Extracted text from %s into %s", source, destination)
    return ""


def rotate(
    input: PathLike,
    output: PathLike,
    degrees: int,
    pages: PageSelection = PageSelection(),
    *,
    runner: Optional[Runner] = None,
) -> Path:
    """Rotate *pages* of *input* clockwise by *degrees*, writing *output*.

    ``degrees`` of ``0`` is accepted and leaves the pages as they are.
    """

    source = require_input(input)
    validate_degrees(degrees)
    destination = Path(output)

    executable = locate(Tool.QPDF)
    command = build_rotate_command(executable, source, destination, degrees, pages)
    ensure_parent_dir(destination)
    (runner or run_tool)(Tool.QPDF, command).raise_for_status()

    _LOGGER.info("Rotated %s pages of %s by %d degrees", pages, source, degrees)
    return destination


def compress(
    input: PathLike,
    output: PathLike,
    preset: CompressPreset = CompressPreset.EBOOK,
    *,
    runner: Optional[Runner] = None,
) -> Path:
    """Rewrite *input* through Ghostscript with the given *preset*."""

    source = require_input(input)
    try:
        preset = CompressPreset(preset)
    except ValueError as exc:
        raise InvalidArgumentError(f"unknown compression preset: {preset}") from exc
    destination = Path(output)

    executable = locate(Tool.GHOSTSCRIPT)
    command = build_compress_command(executable, source, destination, preset)
    ensure_parent_dir(destination)
    (runner or run_tool)(Tool.GHOSTSCRIPT, command).raise_for_status()

    _LOGGER.info("Compressed %s into %s using the %s preset", source, destination, preset.value)
    return destination


def info(path: PathLike) -> PdfInfo:
    """Return the page count and metadata of *path* without external tools."""

    return read_info(path)


def validate_input(path: PathLike) -> Path:
    """Confirm *path* exists and return it as an absolute path."""

    resolved = require_input(path).resolve()
    _LOGGER.debug("Validated input %s", resolved)
    return resolved


__all__ = [
    "merge",
    "split_pages",
    "extract_text",
    "rotate",
    "compress",
    "info",
    "validate_input",
]
