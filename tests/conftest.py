# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence, Set

import pytest

from resbuild.builders import BuildContext
from resbuild.runner import ProcessResult
from resbuild.tools import ToolPaths


def _embedded_names(args: Sequence[str]) -> List[str]:
    names = []
    for arg in args:
        if arg.startswith("/res:"):
            names.append(Path(arg[len("/res:"):]).name)
        elif arg.startswith("/embed:"):
            names.append(Path(arg[len("/embed:"):].rsplit(",", 1)[0]).name)
    return names


class FakeToolRunner:
    """Stand-in for ResGen/csc/al that writes the files the real tools would.

    Every call is recorded, and each link step also records the names of
    the blobs it embeds.
    """

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.blobs_at_link: List[List[str]] = []
        self.fail: Set[str] = set()

    def run(self, argv: Sequence[str | Path]) -> ProcessResult:
        args = [str(a) for a in argv]
        self.calls.append(args)
        tool = Path(args[0]).name.lower()
        if tool in self.fail:
            return ProcessResult(args, 1, f"{tool}: simulated failure")
        if tool == "resgen.exe":
            Path(args[2]).write_bytes(b"RESOURCES")
            for arg in args[3:]:
                if arg.startswith("/str:"):
                    _, _, _, source = arg[len("/str:"):].split(",", 3)
                    Path(source).write_text("// generated\n", encoding="utf-8")
        else:
            out = next(Path(a[len("/out:"):]) for a in args if a.startswith("/out:"))
            self.blobs_at_link.append(sorted(_embedded_names(args)))
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_bytes(b"MZ")
        return ProcessResult(args, 0)

    def calls_for(self, exe: str) -> List[List[str]]:
        return [c for c in self.calls if Path(c[0]).name.lower() == exe.lower()]


@pytest.fixture
def tool_paths(tmp_path: Path) -> ToolPaths:
    sdk = tmp_path / "sdk"
    return ToolPaths(
        sdk_root=sdk,
        resgen=sdk / "ResGen.exe",
        csc=tmp_path / "framework" / "csc.exe",
        al=sdk / "al.exe",
    )


@pytest.fixture
def fake_runner() -> FakeToolRunner:
    return FakeToolRunner()


@pytest.fixture
def context(tool_paths: ToolPaths, fake_runner: FakeToolRunner) -> BuildContext:
    return BuildContext(
        tools=tool_paths,
        runner=fake_runner,
        logger=logging.getLogger("resbuild"),
    )
