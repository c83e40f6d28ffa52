"""
Type definitions and dataclasses for pdfcli.

This module defines the value types passed between the facade, the
command builders and the structural reader.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .exceptions import InvalidArgumentError

_RANGE_PATTERN = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")


@dataclass(frozen=True)
class PdfInfo:
    """
    Structural information about a PDF document.

    Attributes:
        pages: Number of leaf pages in the page tree
        metadata: Info dictionary entries with primitive values, sorted by key (read-only)
    """
    pages: int
    metadata: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))


@dataclass(frozen=True)
class PageSelection:
    """Either every page (``start`` and ``end`` unset) or one inclusive range."""

    start: Optional[int] = None
    end: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.start is None) != (self.end is None):
            raise InvalidArgumentError("page range needs both a start and an end page")
        if self.start is None:
            return
        if self.start < 1 or self.end < 1:
            raise InvalidArgumentError(
                f"page numbers are 1-based, got {self.start}-{self.end}"
            )
        if self.start > self.end:
            raise InvalidArgumentError(
                f"page range start {self.start} is after end {self.end}"
            )

    @classmethod
    def all(cls) -> "PageSelection":
        return cls()

    @classmethod
    def range(cls, start: int, end: int) -> "PageSelection":
        return cls(start=start, end=end)

    @classmethod
    def parse(cls, text: str) -> "PageSelection":
        """Parse ``"all"`` or ``"<start>-<end>"``."""

        if text.strip().lower() == "all":
            return cls.all()
        match = _RANGE_PATTERN.match(text)
        if match is None:
            raise InvalidArgumentError(
                f"invalid page selection '{text}', expected 'all' or '<start>-<end>'"
            )
        return cls.range(int(match.group(1)), int(match.group(2)))

    @property
    def is_all(self) -> bool:
        return self.start is None

    @property
    def tool_argument(self) -> Optional[str]:
        """Rendering passed to external tools, ``None`` for every page."""

        if self.is_all:
            return None
        return f"{self.start}-{self.end}"

    def __str__(self) -> str:
        return self.tool_argument or "all"


class CompressPreset(str, Enum):
    """Ghostscript ``-dPDFSETTINGS`` presets."""

    SCREEN = "screen"
    EBOOK = "ebook"
    PRINTER = "printer"
    PREPRESS = "prepress"
    DEFAULT = "default"

    @property
    def token(self) -> str:
        return _PRESET_TOKENS[self]


_PRESET_TOKENS: Dict[CompressPreset, str] = {
    CompressPreset.SCREEN: "/screen",
    CompressPreset.EBOOK: "/ebook",
    CompressPreset.PRINTER: "/printer",
    CompressPreset.PREPRESS: "/prepress",
    CompressPreset.DEFAULT: "/default",
}
