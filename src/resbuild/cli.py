# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Command-line entry point for resbuild."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from rich.markup import escape

from .api import check_tools, run_build
from .config import DEFAULT_CONFIG_FILE, load_config
from .errors import EmptyDefaultError, ToolingError
from .logging import configure_console, configure_logging

EXIT_OK = 0
EXIT_TOOLING = 1
EXIT_EMPTY_DEFAULT = 2


def build_parser() -> argparse.ArgumentParser:
    description = (
        "Compile raw resources into a default library and per-culture satellite assemblies.\n\n"
        "Examples:\n"
        "  resbuild\n"
        "  resbuild --config build/resbuild.yaml --namespace Acme.Strings\n"
        "  resbuild check-tools"
    )
    parser = argparse.ArgumentParser(
        prog="resbuild",
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["build", "check-tools"],
        default="build",
        help="Action to perform (default: build)",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Configuration file (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument("--namespace", dest="resource_namespace", help="Root resource namespace")
    parser.add_argument("--output", dest="resource_path", help="Resource output directory")
    parser.add_argument("--source", dest="resource_source_path", help="Raw resource source directory")
    parser.add_argument(
        "--main-at-root",
        dest="main_at_root",
        action="store_true",
        default=None,
        help="Write the default library next to the output directory",
    )
    parser.add_argument(
        "--no-main-at-root",
        dest="main_at_root",
        action="store_false",
        help="Write the default library inside the output directory",
    )
    parser.add_argument(
        "--ignore-empty-default",
        dest="ignore_empty_default",
        action="store_true",
        default=None,
        help="Continue with cultures when no default resources exist",
    )
    parser.add_argument("--color", dest="color", action="store_true", default=None, help="Force rich-colored output")
    parser.add_argument("--no-color", dest="color", action="store_false", help="Disable colored output")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console = configure_console(args.color)
    logger = configure_logging(console, args.debug)

    config = load_config(args.config).with_overrides(
        resource_namespace=args.resource_namespace,
        resource_path=args.resource_path,
        resource_source_path=args.resource_source_path,
        main_at_root=args.main_at_root,
        ignore_empty_default=args.ignore_empty_default,
    )

    try:
        if args.command == "check-tools":
            tools = check_tools(config)
            for label, path in (("ResGen", tools.resgen), ("csc", tools.csc), ("al", tools.al)):
                console.print(f"[bold]{label.ljust(8)}[/] {escape(str(path))}", soft_wrap=True)
            return EXIT_OK
        run_build(config, console=console)
    except ToolingError as exc:
        logger.error("%s", exc)
        return EXIT_TOOLING
    except EmptyDefaultError as exc:
        logger.error("%s", exc)
        return EXIT_EMPTY_DEFAULT
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
