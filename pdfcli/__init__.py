"""
pdfcli - inspect and manipulate PDF files.

Structural inspection (page count, document metadata) is done in-process
with pypdf. Merging, splitting, rotating, text extraction and compression
are delegated to qpdf, pdftotext and Ghostscript.

Quick Start:
    >>> from pdfcli import info, rotate, PageSelection
    >>> info('input.pdf').pages
    >>> rotate('input.pdf', 'rotated.pdf', 90, PageSelection.range(1, 3))

External tools are found on PATH or through the PDFCLI_QPDF,
PDFCLI_PDFTOTEXT and PDFCLI_GHOSTSCRIPT environment variables.

For CLI usage, use the 'pdfcli' command after installation.
"""

# Operations
from pdfcli.operations import (
    compress,
    extract_text,
    info,
    merge,
    rotate,
    split_pages,
    validate_input,
)

# Data types
from pdfcli.types import CompressPreset, PageSelection, PdfInfo
from pdfcli.runner import ToolInvocationResult, run_tool
from pdfcli.tools import Tool, locate, tool_status

# Exceptions
from pdfcli.exceptions import (
    PdfCliError,
    InputNotFoundError,
    PdfParseError,
    MissingToolError,
    ToolFailedError,
    InvalidArgumentError,
    PdfIOError,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    # Operations
    "compress",
    "extract_text",
    "info",
    "merge",
    "rotate",
    "split_pages",
    "validate_input",
    # Data types
    "CompressPreset",
    "PageSelection",
    "PdfInfo",
    "ToolInvocationResult",
    "Tool",
    # Tool resolution and execution
    "locate",
    "tool_status",
    "run_tool",
    # Exceptions
    "PdfCliError",
    "InputNotFoundError",
    "PdfParseError",
    "MissingToolError",
    "ToolFailedError",
    "InvalidArgumentError",
    "PdfIOError",
    # Version info
    "__version__",
]
