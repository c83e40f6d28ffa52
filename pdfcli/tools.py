"""External tool definitions and executable resolution."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Sequence

from .exceptions import MissingToolError

_LOGGER = logging.getLogger("pdfcli.tools")


class Tool(str, Enum):
    """Enumeration of the external executables pdfcli delegates to."""

    QPDF = "qpdf"
    PDFTOTEXT = "pdftotext"
    GHOSTSCRIPT = "ghostscript"

    @property
    def spec(self) -> "ToolSpec":
        return TOOL_SPECS[self]


@dataclass(frozen=True)
class ToolSpec:
    """Static description of an external tool."""

    name: str
    env_key: str
    executables: Sequence[str]
    install_hint: Callable[[], str]


def _qpdf_hint() -> str:
    return _format_hint(
        "qpdf",
        {
            "Debian/Ubuntu": "sudo apt-get install qpdf",
            "Fedora": "sudo dnf install qpdf",
            "macOS": "brew install qpdf",
            "Windows": "winget install QPDF.QPDF  (or: choco install qpdf)",
        },
    )


def _pdftotext_hint() -> str:
    return _format_hint(
        "pdftotext (poppler)",
        {
            "Debian/Ubuntu": "sudo apt-get install poppler-utils",
            "Fedora": "sudo dnf install poppler-utils",
            "macOS": "brew install poppler",
            "Windows": "choco install poppler",
        },
    )


def _ghostscript_hint() -> str:
    return _format_hint(
        "Ghostscript",
        {
            "Debian/Ubuntu": "sudo apt-get install ghostscript",
            "Fedora": "sudo dnf install ghostscript",
            "macOS": "brew install ghostscript",
            "Windows": "winget install ArtifexSoftware.GhostScript  (or: choco install ghostscript)",
        },
    )


def _format_hint(label: str, commands: Mapping[str, str]) -> str:
    lines = [f"Install {label}:"]
    lines.extend(f"  {platform}: {command}" for platform, command in commands.items())
    return "\n".join(lines)


TOOL_SPECS: Dict[Tool, ToolSpec] = {
    Tool.QPDF: ToolSpec("qpdf", "PDFCLI_QPDF", ("qpdf",), _qpdf_hint),
    Tool.PDFTOTEXT: ToolSpec("pdftotext", "PDFCLI_PDFTOTEXT", ("pdftotext",), _pdftotext_hint),
    Tool.GHOSTSCRIPT: ToolSpec(
        "ghostscript",
        "PDFCLI_GHOSTSCRIPT",
        ("gs", "gswin64c", "gswin32c"),
        _ghostscript_hint,
    ),
}


def _search_path(spec: ToolSpec) -> Optional[Path]:
    """Probe the default executable names of *spec* on ``PATH`` in order."""

    for name in spec.executables:
        found = shutil.which(name)
        if found is not None:
            _LOGGER.debug("Found %s for %s on PATH: %s", name, spec.name, found)
            return Path(found)
    _LOGGER.debug("No executable for %s on PATH", spec.name)
    return None


def locate(tool: Tool) -> Path:
    """Resolve the executable for *tool*.

    An override set through the tool's environment variable is used verbatim
    and is never followed by a ``PATH`` search, even when it is invalid.
    """

    spec = tool.spec
    override = os.environ.get(spec.env_key)
    if override is not None:
        path = Path(override)
        # An empty value would otherwise resolve to the working directory.
        if not override or not path.exists():
            hint = (
                f"{spec.env_key} is set to '{override}', but that path does not exist.\n"
                f"Point {spec.env_key} at a valid executable or unset it.\n"
                f"{spec.install_hint()}"
            )
            raise MissingToolError(spec.name, hint)
        _LOGGER.debug("Using %s override for %s: %s", spec.env_key, spec.name, path)
        return path

    found = _search_path(spec)
    if found is None:
        hint = (
            f"None of {', '.join(spec.executables)} was found on PATH "
            f"(set {spec.env_key} to override).\n"
            f"{spec.install_hint()}"
        )
        raise MissingToolError(spec.name, hint)
    return found


def tool_status() -> Dict[Tool, Path | MissingToolError]:
    """Return the resolved path, or the resolution error, for every tool."""

    status: Dict[Tool, Path | MissingToolError] = {}
    for tool in Tool:
        try:
            status[tool] = locate(tool)
        except MissingToolError as exc:
            status[tool] = exc
    return status
