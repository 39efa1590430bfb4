# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Walk culture directories and build their satellite libraries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .builders import BuildContext, build_culture_lib
from .culture import CultureDescriptor, InvalidCultureName, resolve_culture

__all__ = ["CultureReport", "list_subdirectories", "walk_cultures"]


@dataclass(frozen=True, slots=True)
class CultureReport:
    directory: Path
    culture: Optional[CultureDescriptor] = None
    produced: bool = False
    error: Optional[str] = None


def list_subdirectories(directory: Path) -> List[Path]:
    try:
        return sorted(p for p in directory.iterdir() if p.is_dir())
    except (FileNotFoundError, NotADirectoryError):
        return []


def walk_cultures(
    source_root: Path,
    out_root: Path,
    root_namespace: str,
    *,
    context: BuildContext,
) -> List[CultureReport]:
    """Build satellite libraries for every culture directory of ``source_root``.

    Each immediate subdirectory named after a culture yields
    ``out_root/<culture>/<root_namespace>.resources.dll``. Its own
    subdirectories are built into the same culture folder, each under its
    directory name as logical namespace. Directories that are not cultures, or
    that name a culture already built from another directory, are reported
    and skipped.
    """
    reports: List[CultureReport] = []
    built: Dict[str, Path] = {}
    for directory in list_subdirectories(Path(source_root)):
        resolved = resolve_culture(directory.name)
        if isinstance(resolved, InvalidCultureName):
            context.logger.error("Error: %s", resolved)
            reports.append(CultureReport(directory, error=resolved.reason))
            continue

        culture = resolved
        first = built.get(culture.name)
        if first is not None:
            reason = f'culture "{culture.name}" already built from "{first.name}"'
            context.logger.error('Error: "%s" skipped, %s', directory.name, reason)
            reports.append(CultureReport(directory, culture, error=reason))
            continue
        built[culture.name] = directory

        out_path = Path(out_root) / culture.name
        out_path.mkdir(parents=True, exist_ok=True)

        produced = build_culture_lib(
            directory, out_path, root_namespace, culture, context=context
        )
        # other assemblies sharing this culture, one level deep only
        for nested in list_subdirectories(directory):
            if build_culture_lib(nested, out_path, nested.name, culture, context=context):
                produced = True

        if not produced:
            context.logger.info('Culture "%s" had no resources!', culture.name)
        reports.append(CultureReport(directory, culture, produced))
    return reports
