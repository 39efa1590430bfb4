# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Typed argument vectors for ResGen, csc and al.

Each builder holds explicit fields and renders a flat ``argv`` list. Nothing
is quoted or joined here; the list is handed as-is to the process runner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

__all__ = [
    "AccessorClass",
    "ResGenArguments",
    "CscArguments",
    "AlArguments",
    "logical_resource_name",
]


def logical_resource_name(blob: Path) -> str:
    """Manifest resource name used when embedding ``blob`` in a satellite."""
    return blob.name.replace(" ", "_")


@dataclass(slots=True)
class AccessorClass:
    namespace: str
    class_name: str
    output: Path
    language: str = "cs"
    public: bool = True


@dataclass(slots=True)
class ResGenArguments:
    source: Path
    output: Path
    accessor: Optional[AccessorClass] = None

    def to_argv(self) -> List[str]:
        args = [str(self.source), str(self.output)]
        if self.accessor is not None:
            acc = self.accessor
            args.append(
                f"/str:{acc.language},{acc.namespace},{acc.class_name},{acc.output}"
            )
            if acc.public:
                args.append("/publicClass")
        return args


@dataclass(slots=True)
class CscArguments:
    output: Path
    target: str = "library"
    resources: List[Path] = field(default_factory=list)
    sources: List[Path] = field(default_factory=list)

    def to_argv(self) -> List[str]:
        args = [f"/target:{self.target}", f"/out:{self.output}"]
        args.extend(f"/res:{res}" for res in self.resources)
        args.extend(str(src) for src in self.sources)
        return args


@dataclass(slots=True)
class AlArguments:
    culture: str
    output: Path
    target: str = "lib"
    embeds: List[Tuple[Path, str]] = field(default_factory=list)

    def embed(self, blob: Path, logical_name: Optional[str] = None) -> None:
        self.embeds.append((blob, logical_name or logical_resource_name(blob)))

    def to_argv(self) -> List[str]:
        args = [
            f"/target:{self.target}",
            f"/culture:{self.culture}",
            f"/out:{self.output}",
        ]
        args.extend(f"/embed:{blob},{name}" for blob, name in self.embeds)
        return args
