# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""resbuild: localization resource build orchestrator.

Compiles raw resource sources with ResGen into a default library (with
generated accessor classes, via csc) and culture satellite assemblies (via
al). The programmatic entry point is :func:`resbuild.api.run_build`; the
command line lives in :mod:`resbuild.cli`.
"""

from .api import BuildResult, run_build
from .config import BuildConfig, load_config
from .errors import EmptyDefaultError, ResBuildError, ToolingError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BuildConfig",
    "BuildResult",
    "EmptyDefaultError",
    "ResBuildError",
    "ToolingError",
    "load_config",
    "run_build",
]
