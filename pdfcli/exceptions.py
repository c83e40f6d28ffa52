"""
Custom exceptions for pdfcli.

Every failure the library reports is one of the classes below. The CLI
presents them; the library never exits the process itself.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class PdfCliError(Exception):
    """Base exception for all pdfcli errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown pdfcli error occurred."


class InputNotFoundError(PdfCliError):
    """Raised when a required input file does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"input file does not exist: {self.path}")

    @property
    def default_message(self) -> str:
        return "Input file does not exist."


class PdfParseError(PdfCliError):
    """Raised when the structural reader cannot parse a PDF."""

    def __init__(self, path: Path | str, cause: Optional[BaseException] = None) -> None:
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"failed to parse PDF {self.path}{detail}")

    @property
    def default_message(self) -> str:
        return "Failed to parse PDF."


class MissingToolError(PdfCliError):
    """Raised when an external executable cannot be resolved."""

    def __init__(self, tool: str, hint: str) -> None:
        self.tool = tool
        self.hint = hint
        super().__init__(f"required tool '{tool}' was not found\n{hint}")

    @property
    def default_message(self) -> str:
        return "Required external tool was not found."


class ToolFailedError(PdfCliError):
    """Raised when an external tool ran but exited with a non-zero status."""

    def __init__(self, tool: str, command: str, status: int, stdout: str, stderr: str) -> None:
        self.tool = tool
        self.command = command
        self.status = status
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(f"{tool} failed with exit status {status}: {command}")

    @property
    def default_message(self) -> str:
        return "External tool failed."


class InvalidArgumentError(PdfCliError, ValueError):
    """Raised when caller supplied parameters fail a precondition."""

    @property
    def default_message(self) -> str:
        return "Invalid argument."


class PdfIOError(PdfCliError):
    """Raised for filesystem or process-spawn failures not otherwise classified."""

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"I/O error: {cause}")

    @property
    def default_message(self) -> str:
        return "I/O error."
