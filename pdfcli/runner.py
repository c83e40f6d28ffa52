"""Process execution for external tools."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, Sequence

from .exceptions import PdfIOError, ToolFailedError
from .tools import Tool
from .utils import format_command

_LOGGER = logging.getLogger("pdfcli.runner")

SIGNAL_STATUS = -1


@dataclass(frozen=True)
class ToolInvocationResult:
    """Captured outcome of one external tool run."""

    tool: Tool
    command: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def status(self) -> int:
        """Exit status, or ``-1`` when the process was killed by a signal."""

        if self.returncode < 0:
            return SIGNAL_STATUS
        return self.returncode

    def raise_for_status(self) -> "ToolInvocationResult":
        if self.ok:
            return self
        raise ToolFailedError(
            self.tool.spec.name,
            format_command(self.command),
            self.status,
            self.stdout,
            self.stderr,
        )


Runner = Callable[[Tool, Sequence[str]], ToolInvocationResult]


def _decode(output: bytes | None) -> str:
    # Bytes are decoded as-is so line endings survive unchanged.
    return (output or b"").decode("utf-8", errors="replace")


def run_tool(tool: Tool, command: Sequence[str]) -> ToolInvocationResult:
    """Run *command* to completion capturing its output.

    Parameters
    ----------
    tool:
        The tool being executed, used for diagnostics.
    command:
        Executable and arguments.
    """

    _LOGGER.debug("Executing command: %s", format_command(command))
    try:
        completed = subprocess.run(
            list(command),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        _LOGGER.error("Failed to execute %s: %s", tool.spec.name, exc)
        raise PdfIOError(exc) from exc

    stdout = _decode(completed.stdout)
    stderr = _decode(completed.stderr)
    _LOGGER.debug(
        "Command finished with exit code %s\nstdout: %s\nstderr: %s",
        completed.returncode,
        stdout,
        stderr,
    )
    return ToolInvocationResult(
        tool=tool,
        command=tuple(str(part) for part in command),
        returncode=completed.returncode,
        stdout=stdout,
        stderr=stderr,
    )
