from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional, Sequence
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdfcli.runner import ToolInvocationResult  # noqa: E402
from pdfcli.tools import TOOL_SPECS, Tool  # noqa: E402

_CATALOG = b"<< /Type /Catalog /Pages 2 0 R >>"
_PAGES = b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>"
_PAGE = b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] >>"


def build_minimal_pdf(info: Optional[bytes] = None) -> bytes:
    """Assemble a one-page PDF by hand, with an optional Info dictionary body."""

    bodies = [_CATALOG, _PAGES, _PAGE]
    if info is not None:
        bodies.append(info)

    output = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(bodies, start=1):
        offsets.append(len(output))
        output += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(output)
    output += b"xref\n0 %d\n" % (len(bodies) + 1)
    output += b"0000000000 65535 f \n"
    for offset in offsets:
        output += b"%010d 00000 n \n" % offset

    trailer = b"<< /Size %d /Root 1 0 R" % (len(bodies) + 1)
    if info is not None:
        trailer += b" /Info 4 0 R"
    output += b"trailer\n" + trailer + b" >>\n"
    output += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(output)


class RecordingRunner:
    """Stand-in for :func:`pdfcli.runner.run_tool` that never spawns processes."""

    def __init__(self, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls: list[tuple[Tool, list[str]]] = []

    def __call__(self, tool: Tool, command: Sequence[str]) -> ToolInvocationResult:
        self.calls.append((tool, list(command)))
        return ToolInvocationResult(
            tool=tool,
            command=tuple(str(part) for part in command),
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=self.stderr,
        )


@pytest.fixture(autouse=True)
def clean_tool_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for spec in TOOL_SPECS.values():
        monkeypatch.delenv(spec.env_key, raising=False)


@pytest.fixture()
def tool_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Dict[Tool, Path]:
    """Point every tool override at a placeholder executable."""

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    executables: Dict[Tool, Path] = {}
    for tool, spec in TOOL_SPECS.items():
        path = bin_dir / spec.executables[0]
        path.write_text("#!/bin/sh\n")
        monkeypatch.setenv(spec.env_key, str(path))
        executables[tool] = path
    return executables


@pytest.fixture()
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def sample_pdf(tmp_path: Path) -> Path:
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    writer.add_metadata({
        "/Title": "Sample Document",
        "/Author": "pdfcli",
    })
    path = tmp_path / "sample.pdf"
    with path.open("wb") as fh:
        writer.write(fh)
    return path


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, pages: int = 1, title: str | None = None) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=72, height=72)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def bare_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "bare.pdf"
    path.write_bytes(build_minimal_pdf())
    return path
