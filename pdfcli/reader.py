"""Direct structural inspection of PDF files using :mod:`pypdf`."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from pypdf import PdfReader
from pypdf.generic import (
    BooleanObject,
    ByteStringObject,
    DictionaryObject,
    FloatObject,
    NameObject,
    NumberObject,
    TextStringObject,
)

from .exceptions import PdfParseError
from .types import PdfInfo
from .utils import require_input

_LOGGER = logging.getLogger("pdfcli.reader")


def _strip_name(name: str) -> str:
    return name[1:] if name.startswith("/") else name


def _format_real(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def coerce_value(value: Any) -> Optional[str]:
    """Convert a primitive PDF object to text, ``None`` for anything else."""

    if hasattr(value, "get_object"):
        value = value.get_object()
    if isinstance(value, NameObject):
        return _strip_name(str(value))
    if isinstance(value, TextStringObject):
        return str(value)
    if isinstance(value, ByteStringObject):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, BooleanObject):
        return "true" if value.value else "false"
    if isinstance(value, NumberObject):
        return str(int(value))
    if isinstance(value, FloatObject):
        return _format_real(value)
    return None


def extract_metadata(reader: PdfReader) -> Dict[str, str]:
    """Flatten the trailer's Info dictionary into sorted string pairs."""

    info_ref = reader.trailer.get("/Info")
    if info_ref is None:
        return {}
    info = info_ref.get_object() if hasattr(info_ref, "get_object") else info_ref
    if not isinstance(info, DictionaryObject):
        return {}

    metadata: Dict[str, str] = {}
    for key, raw_value in info.items():
        value = coerce_value(raw_value)
        if value is None:
            _LOGGER.debug("Skipping non-primitive metadata entry %s", key)
            continue
        metadata[_strip_name(str(key))] = value
    return dict(sorted(metadata.items()))


def read_info(path: str | os.PathLike[str]) -> PdfInfo:
    """Return page count and metadata for the PDF at *path*."""

    pdf_path = require_input(path)
    try:
        reader = PdfReader(str(pdf_path))
        pages = len(reader.pages)
        metadata = extract_metadata(reader)
    except Exception as exc:
        raise PdfParseError(pdf_path, exc) from exc

    info = PdfInfo(pages=pages, metadata=metadata)
    _LOGGER.debug("PDF info for %s: %s", pdf_path, info)
    return info
