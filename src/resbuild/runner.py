# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Spawning of external tools with live output."""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console

from .logging import echo

log = logging.getLogger(__name__)

SPAWN_FAILED = 127

__all__ = ["ProcessResult", "ProcessRunner", "SPAWN_FAILED"]


@dataclass(slots=True)
class ProcessResult:
    args: List[str]
    returncode: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ProcessRunner:
    """Run a tool to completion, streaming its output to the console.

    Failures are reported but never raised: a tool that exits non-zero, or
    cannot be started at all, yields a :class:`ProcessResult` with the exit
    code and the build carries on.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console

    def run(self, argv: Sequence[str | Path]) -> ProcessResult:
        args = [str(a) for a in argv]
        log.debug("exec: %s", " ".join(shlex.quote(a) for a in args))
        try:
            process = subprocess.Popen(
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
                text=True,
                errors="replace",
            )
        except OSError as exc:
            log.error("Unable to start %s: %s", args[0], exc)
            return ProcessResult(args, SPAWN_FAILED, str(exc))

        lines: List[str] = []
        assert process.stdout is not None
        with process.stdout:
            # read to EOF before waiting so a full pipe never blocks the child
            for line in process.stdout:
                text = line.rstrip("\r\n")
                lines.append(text)
                echo(self._console, text)
        returncode = process.wait()

        if returncode != 0:
            log.warning(
                "%s exited with code %d", Path(args[0]).name, returncode
            )
        return ProcessResult(args, returncode, "\n".join(lines))
