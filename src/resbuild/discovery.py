# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Discovery of raw resource sources and naming of their outputs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

log = logging.getLogger(__name__)

RAW_RESOURCE_EXTENSIONS = frozenset({".txt", ".restext", ".resx"})

__all__ = [
    "RAW_RESOURCE_EXTENSIONS",
    "RawResourceFile",
    "is_raw_resource",
    "discover_resources",
    "derive_names",
]


@dataclass(frozen=True, slots=True)
class RawResourceFile:
    path: Path
    namespace: str
    symbol_name: str

    @property
    def blob_stem(self) -> str:
        return f"{self.namespace}.{self.symbol_name}"


def is_raw_resource(path: Path) -> bool:
    return path.suffix.lower() in RAW_RESOURCE_EXTENSIONS


def _iter_files(directory: Path, recursive: bool) -> Iterator[Path]:
    try:
        entries = list(directory.iterdir())
    except (FileNotFoundError, NotADirectoryError):
        return
    except PermissionError:
        log.warning("Skipping directory due to permission error: %s", directory)
        return
    for entry in entries:
        if entry.is_dir():
            if recursive:
                yield from _iter_files(entry, recursive)
            continue
        yield entry


def discover_resources(directory: Path, recursive: bool = False) -> List[Path]:
    """Return the raw resource files found in ``directory``.

    Matching is on the extension only (``.txt``, ``.restext``, ``.resx``, any
    case). Order follows directory enumeration. A missing directory or one
    without matches gives an empty list.
    """
    found = [p for p in _iter_files(Path(directory), recursive) if is_raw_resource(p)]
    log.debug("Found %d raw resource file(s) in %s", len(found), directory)
    return found


def derive_names(path: Path | str, base_namespace: str) -> RawResourceFile:
    """Split a resource file name into its namespace and symbol name.

    ``Strings.Errors.Common.resx`` under ``R`` gives namespace
    ``R.Strings.Errors`` and symbol ``Common``; an undotted name keeps the
    base namespace.
    """
    p = Path(path)
    stem = p.stem if p.suffix.lower() in RAW_RESOURCE_EXTENSIONS else p.name
    parts = stem.split(".")
    if len(parts) > 1:
        namespace = ".".join([base_namespace, *parts[:-1]])
        symbol = parts[-1]
    else:
        namespace = base_namespace
        symbol = stem
    return RawResourceFile(path=p, namespace=namespace, symbol_name=symbol)
