# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""High-level build pipeline for resbuild."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console

from .builders import BuildContext, Runner, build_default
from .config import BuildConfig
from .errors import empty_default
from .logging import get_logger, section
from .runner import ProcessRunner
from .tools import ToolPaths, resolve_tools
from .walker import CultureReport, walk_cultures

__all__ = ["BuildResult", "check_tools", "run_build"]


@dataclass(slots=True)
class BuildResult:
    default_built: bool
    cultures: List[CultureReport] = field(default_factory=list)

    @property
    def invalid_directories(self) -> List[CultureReport]:
        return [c for c in self.cultures if c.error is not None]


def check_tools(config: BuildConfig) -> ToolPaths:
    return resolve_tools(config.sdk_path, config.csc_path)


def run_build(
    config: BuildConfig,
    *,
    console: Optional[Console] = None,
    runner: Optional[Runner] = None,
    tools: Optional[ToolPaths] = None,
) -> BuildResult:
    """Run the default phase, then the culture phase.

    Raises:
        ToolingError: a required tool is missing; nothing has been written.
        EmptyDefaultError: no default sources and ``ignore_empty_default`` is
            not set.
    """
    logger = get_logger()
    if tools is None:
        tools = check_tools(config)
    context = BuildContext(
        tools=tools,
        runner=runner or ProcessRunner(console),
        console=console,
        logger=logger,
    )

    out_root = config.resource_path
    out_root.mkdir(parents=True, exist_ok=True)

    section(console, "Generating default resources...")
    default_built = build_default(
        config.source_path,
        out_root,
        config.resource_namespace,
        config.main_at_root,
        context=context,
    )
    if not default_built:
        if not config.ignore_empty_default:
            raise empty_default(str(config.source_path))
        logger.info("No default resource sources found!")

    section(console, "Generating culture resources...")
    cultures = walk_cultures(
        config.source_path, out_root, config.resource_namespace, context=context
    )

    logger.info("Finished.")
    return BuildResult(default_built=default_built, cultures=cultures)
