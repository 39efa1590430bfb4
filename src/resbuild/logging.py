# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Logging and console helpers for resbuild.

Stdlib logging routed through a rich handler, plus small helpers used by the
build phases to print section headers and raw tool output.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

_LOGGER_NAME = "resbuild"

__all__ = [
    "get_logger",
    "configure_console",
    "configure_logging",
    "echo",
    "section",
]


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def configure_console(color_flag: Optional[bool]) -> Console:
    if color_flag is True:
        return Console()
    if color_flag is False:
        return Console(no_color=True)
    return Console(no_color=not sys.stdout.isatty())


def configure_logging(console: Console, debug: bool) -> logging.Logger:
    level = logging.DEBUG if debug else logging.INFO
    handler = RichHandler(console=console, show_time=False, show_path=False)
    logging.basicConfig(level=level, handlers=[handler], force=True)
    return get_logger()


def echo(console: Optional[Console], text: str) -> None:
    """Write one line of tool output verbatim."""
    if console:
        console.out(text, highlight=False)
    else:
        print(text)


def section(console: Optional[Console], title: str) -> None:
    if console:
        console.print()
        console.print(f"[bold cyan]{escape(title)}[/]")
    else:
        print(f"\n{title}")
