# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Best-effort removal of intermediate build artifacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

log = logging.getLogger(__name__)

__all__ = ["CleanupOutcome", "cleanup", "cleanup_pattern"]


@dataclass(frozen=True, slots=True)
class CleanupOutcome:
    path: Path
    removed: bool
    error: Optional[str] = None


def cleanup(paths: Iterable[Path]) -> List[CleanupOutcome]:
    """Delete every path, collecting per-file outcomes instead of raising."""
    outcomes: List[CleanupOutcome] = []
    for path in paths:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            log.warning("Unable to delete temp file %s: %s", path, exc)
            outcomes.append(CleanupOutcome(path, False, str(exc)))
            continue
        outcomes.append(CleanupOutcome(path, True))
    return outcomes


def cleanup_pattern(directory: Path, pattern: str) -> List[CleanupOutcome]:
    return cleanup(sorted(p for p in directory.glob(pattern) if p.is_file()))
