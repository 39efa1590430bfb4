# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Error definitions for resbuild.

Only conditions that abort a run are modelled as exceptions. Everything else
(bad culture directories, empty targets, failing tools) is reported and the
build keeps going.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

E_TOOL_MISSING = "E_TOOL_MISSING"
E_EMPTY_DEFAULT = "E_EMPTY_DEFAULT"


@dataclass
class ResBuildError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class ToolingError(ResBuildError):
    pass


class EmptyDefaultError(ResBuildError):
    pass


def tool_missing(
    tool: str, location: str, hint: str | None = None
) -> ToolingError:
    message = f"{tool} was not found in: {location}"
    if hint:
        message = f"{message}\n{hint}"
    return ToolingError(
        code=E_TOOL_MISSING,
        message=message,
        context={"tool": tool, "location": location},
    )


def empty_default(source_dir: str) -> EmptyDefaultError:
    return EmptyDefaultError(
        code=E_EMPTY_DEFAULT,
        message="No default resource sources found!",
        context={"source": source_dir},
    )


__all__ = [
    "ResBuildError",
    "ToolingError",
    "EmptyDefaultError",
    "tool_missing",
    "empty_default",
    "E_TOOL_MISSING",
    "E_EMPTY_DEFAULT",
]
