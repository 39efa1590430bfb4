# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Location and validation of the external .NET tools."""

from __future__ import annotations

import logging
import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .errors import tool_missing

log = logging.getLogger(__name__)

SDK_DOWNLOAD_URL = "https://www.microsoft.com/en-us/download/details.aspx?id=8279"
SDK_RELATIVE = Path("Microsoft SDKs", "Windows", "v8.0A", "bin", "NETFX 4.0 Tools")
FRAMEWORK_VERSION = "v4.0.30319"

RESGEN_EXE = "ResGen.exe"
AL_EXE = "al.exe"
CSC_EXE = "csc.exe"

__all__ = [
    "ToolPaths",
    "default_sdk_path",
    "default_csc_path",
    "resolve_tools",
]


@dataclass(frozen=True, slots=True)
class ToolPaths:
    sdk_root: Path
    resgen: Path
    csc: Path
    al: Path


def _is_64bit_os() -> bool:
    return platform.machine().endswith("64")


def default_sdk_path(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    program_files = None
    if _is_64bit_os():
        program_files = env.get("ProgramFiles(x86)")
    if not program_files:
        program_files = env.get("ProgramFiles", "")
    return Path(program_files) / SDK_RELATIVE


def default_csc_path(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    windir = env.get("WINDIR") or env.get("SystemRoot") or r"C:\Windows"
    framework = "Framework64" if _is_64bit_os() else "Framework"
    return Path(windir) / "Microsoft.NET" / framework / FRAMEWORK_VERSION / CSC_EXE


def resolve_tools(
    sdk_root: Optional[Path] = None, csc_path: Optional[Path] = None
) -> ToolPaths:
    """Locate ResGen, csc and al, failing on the first one that is missing.

    Raises:
        ToolingError: naming the missing dependency and how to fix it.
    """
    sdk = Path(sdk_root) if sdk_root is not None else default_sdk_path()
    csc = Path(csc_path) if csc_path is not None else default_csc_path()
    resgen = sdk / RESGEN_EXE
    al = sdk / AL_EXE

    log.debug("Checking SDK directory: %s", sdk)
    if not sdk.is_dir():
        raise tool_missing(
            "Windows SDK for .NET Framework 4",
            str(sdk),
            f"Download from:\n{SDK_DOWNLOAD_URL}\nor set SdkPath in the configuration.",
        )
    if not resgen.is_file():
        raise tool_missing(RESGEN_EXE, str(resgen))
    if not csc.is_file():
        raise tool_missing(
            CSC_EXE, str(csc), "Set CscPath in the configuration to the C# compiler."
        )
    if not al.is_file():
        raise tool_missing(AL_EXE, str(al))
    return ToolPaths(sdk_root=sdk, resgen=resgen, csc=csc, al=al)
