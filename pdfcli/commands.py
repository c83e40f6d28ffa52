"""Argument construction for the external tools.

Builders are pure: they never touch the filesystem or spawn processes, and
each returns ``[executable, *arguments]``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from .exceptions import InvalidArgumentError
from .types import CompressPreset, PageSelection

PathArg = str | Path

ROTATION_DEGREES = (0, 90, 180, 270)
SPLIT_PLACEHOLDER = "%d"
DEFAULT_SPLIT_NAME = "page-%d.pdf"


def build_merge_command(executable: PathArg, inputs: Sequence[PathArg], output: PathArg) -> list[str]:
    """Construct the qpdf command concatenating *inputs* into *output*."""

    if not inputs:
        raise InvalidArgumentError("merge requires at least one input file")
    return [
        str(executable),
        "--empty",
        "--pages",
        *(str(path) for path in inputs),
        "--",
        str(output),
    ]


def default_split_pattern(out_dir: PathArg) -> str:
    return str(Path(out_dir) / DEFAULT_SPLIT_NAME)


def validate_split_pattern(pattern: str) -> str:
    if SPLIT_PLACEHOLDER not in pattern:
        raise InvalidArgumentError(
            f"split pattern '{pattern}' must contain the page number placeholder '{SPLIT_PLACEHOLDER}'"
        )
    return pattern


def build_split_command(
    executable: PathArg,
    source: PathArg,
    out_dir: PathArg,
    pattern: Optional[str] = None,
) -> list[str]:
    """Construct the qpdf command writing one file per page."""

    if pattern is None:
        pattern = default_split_pattern(out_dir)
    else:
        validate_split_pattern(pattern)
    return [str(executable), "--split-pages", str(source), pattern]


def build_extract_text_command(
    executable: PathArg,
    source: PathArg,
    output: Optional[PathArg] = None,
) -> list[str]:
    """Construct the pdftotext command; ``-`` sends the text to stdout."""

    target = "-" if output is None else str(output)
    return [str(executable), str(source), target]


def validate_degrees(degrees: int) -> int:
    if degrees not in ROTATION_DEGREES:
        allowed = ", ".join(str(value) for value in ROTATION_DEGREES)
        raise InvalidArgumentError(f"rotation must be one of {allowed} degrees, got {degrees}")
    return degrees


def build_rotate_command(
    executable: PathArg,
    source: PathArg,
    output: PathArg,
    degrees: int,
    pages: PageSelection = PageSelection(),
) -> list[str]:
    """Construct the qpdf command rotating *pages* clockwise by *degrees*."""

    validate_degrees(degrees)
    rotation = f"+{degrees}"
    page_range = pages.tool_argument
    if page_range is not None:
        rotation = f"{rotation}:{page_range}"
    return [str(executable), "--rotate", rotation, str(source), str(output)]


def build_compress_command(
    executable: PathArg,
    source: PathArg,
    output: PathArg,
    preset: CompressPreset = CompressPreset.EBOOK,
) -> list[str]:
    """Construct the Ghostscript command rewriting *source* with *preset*."""

    preset = CompressPreset(preset)
    return [
        str(executable),
        "-sDEVICE=pdfwrite",
        "-dCompatibilityLevel=1.4",
        f"-dPDFSETTINGS={preset.token}",
        "-dNOPAUSE",
        "-dBATCH",
        "-dSAFER",
        f"-sOutputFile={output}",
        str(source),
    ]

