# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Default and satellite resource library builders.

Both builders follow the same shape: discover raw sources, compile each one
to a ``.resources`` blob with ResGen, link every blob present in the output
directory into one library, then remove the intermediates. Tool failures are
surfaced through the runner's output and logging only; the intermediates are
removed whatever happens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol, Sequence

from rich.console import Console

from .arguments import AccessorClass, AlArguments, CscArguments, ResGenArguments
from .cleanup import cleanup_pattern
from .culture import CultureDescriptor
from .discovery import derive_names, discover_resources
from .runner import ProcessResult
from .tools import ToolPaths

BLOB_PATTERN = "*.resources"
ACCESSOR_SUFFIX = ".cs"

__all__ = [
    "Runner",
    "BuildContext",
    "BuildTarget",
    "default_library_path",
    "build_default",
    "build_culture_lib",
]


class Runner(Protocol):
    def run(self, argv: Sequence[str | Path]) -> ProcessResult: ...


@dataclass(slots=True)
class BuildContext:
    tools: ToolPaths
    runner: Runner
    console: Optional[Console] = None
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("resbuild"))


@dataclass(frozen=True, slots=True)
class BuildTarget:
    namespace: str
    output_dir: Path
    culture: Optional[CultureDescriptor] = None

    def blob_path(self, stem: str) -> Path:
        if self.culture is None:
            return self.output_dir / f"{stem}.resources"
        return self.output_dir / f"{stem}.{self.culture.name}.resources"

    def satellite_path(self) -> Path:
        return self.output_dir / f"{self.namespace}.resources.dll"


def default_library_path(out_dir: Path, root_namespace: str, main_at_root: bool) -> Path:
    """Where the default library is written.

    At the output root's parent when ``main_at_root``, inside ``out_dir``
    otherwise.
    """
    name = f"{root_namespace}.dll"
    if main_at_root:
        return out_dir.parent / name
    return out_dir / name


def build_default(
    source_dir: Path,
    out_dir: Path,
    root_namespace: str,
    main_at_root: bool,
    *,
    context: BuildContext,
) -> bool:
    """Build the invariant-culture library with its accessor classes.

    Returns ``False`` when ``source_dir`` holds no raw resources, in which
    case nothing is written.
    """
    files = discover_resources(source_dir)
    if not files:
        return False

    target = BuildTarget(namespace=root_namespace, output_dir=Path(out_dir))
    try:
        for file in files:
            raw = derive_names(file, root_namespace)
            args = ResGenArguments(
                source=file,
                output=target.blob_path(raw.blob_stem),
                accessor=AccessorClass(
                    namespace=raw.namespace,
                    class_name=raw.symbol_name,
                    output=target.output_dir / f"{raw.symbol_name}{ACCESSOR_SUFFIX}",
                ),
            )
            context.runner.run([context.tools.resgen, *args.to_argv()])

        blobs = sorted(target.output_dir.glob(BLOB_PATTERN))
        if not blobs:
            context.logger.error(
                "No compiled resources in %s, unable to compile %s.dll",
                target.output_dir,
                root_namespace,
            )
            return True

        context.logger.info("Compiling default resources...")
        csc = CscArguments(
            output=default_library_path(target.output_dir, root_namespace, main_at_root),
            resources=blobs,
            sources=sorted(target.output_dir.glob(f"*{ACCESSOR_SUFFIX}")),
        )
        context.runner.run([context.tools.csc, *csc.to_argv()])
    finally:
        context.logger.debug("Deleting temp files in %s", target.output_dir)
        cleanup_pattern(target.output_dir, BLOB_PATTERN)
        cleanup_pattern(target.output_dir, f"*{ACCESSOR_SUFFIX}")
    return True


def build_culture_lib(
    source_dir: Path,
    out_dir: Path,
    logical_namespace: str,
    culture: CultureDescriptor,
    *,
    context: BuildContext,
) -> bool:
    """Build one satellite library for ``culture`` from ``source_dir``.

    Every ``.resources`` blob in ``out_dir`` is linked, not only the ones
    compiled by this call.
    """
    files = discover_resources(source_dir)
    if not files:
        return False

    context.logger.info(
        'Generating resources for culture "%s" (%s)...', culture.name, logical_namespace
    )
    target = BuildTarget(namespace=logical_namespace, output_dir=Path(out_dir), culture=culture)
    try:
        for file in files:
            args = ResGenArguments(
                source=file,
                output=target.blob_path(f"{logical_namespace}.{file.stem}"),
            )
            context.runner.run([context.tools.resgen, *args.to_argv()])

        blobs = sorted(target.output_dir.glob(BLOB_PATTERN))
        if not blobs:
            return False

        al = AlArguments(culture=culture.name, output=target.satellite_path())
        for blob in blobs:
            al.embed(blob)
        context.runner.run([context.tools.al, *al.to_argv()])
    finally:
        context.logger.debug("Deleting temp resource files in %s", target.output_dir)
        cleanup_pattern(target.output_dir, BLOB_PATTERN)
    return True
