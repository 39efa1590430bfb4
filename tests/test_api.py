# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""End-to-end tests of the build pipeline with simulated tools."""

from pathlib import Path

import pytest

from resbuild.api import run_build
from resbuild.config import BuildConfig
from resbuild.errors import EmptyDefaultError, ToolingError

from resource_helper import file_names, write_sources


def _config(tmp_path: Path, **kw) -> BuildConfig:
    return BuildConfig(resource_path=tmp_path / "app" / "Resources", **kw)


# culture folders double as their own source folders unless a source root is set
def _libraries(directory: Path) -> list:
    return sorted(p.name for p in directory.glob("*.dll"))


def test_full_build(tmp_path: Path, fake_runner, tool_paths):
    cfg = _config(tmp_path, resource_namespace="Acme")
    res = cfg.resource_path
    write_sources(res, "Strings.txt")
    write_sources(res / "fr-FR", "Strings.txt")
    write_sources(res / "fr-FR" / "Plugin", "Labels.resx")
    (res / "bogus-dir").mkdir()

    result = run_build(cfg, runner=fake_runner, tools=tool_paths)

    assert result.default_built is True
    assert (tmp_path / "app" / "Acme.dll").is_file()
    assert _libraries(res / "fr-FR") == ["Acme.resources.dll", "Plugin.resources.dll"]
    assert [r.directory.name for r in result.invalid_directories] == ["bogus-dir"]
    assert not list(res.rglob("*.resources"))
    assert not list(res.rglob("*.cs"))
    tools_in_order = [Path(c[0]).name for c in fake_runner.calls]
    assert tools_in_order.index("csc.exe") < tools_in_order.index("al.exe")


def test_separate_source_tree(tmp_path: Path, fake_runner, tool_paths):
    src = tmp_path / "raw"
    write_sources(src, "Strings.txt")
    write_sources(src / "de", "Strings.txt")
    cfg = _config(tmp_path, resource_source_path=src, main_at_root=False)

    run_build(cfg, runner=fake_runner, tools=tool_paths)

    assert file_names(cfg.resource_path) == ["MyResources.dll", "de"]
    assert file_names(cfg.resource_path / "de") == ["MyResources.resources.dll"]
    assert file_names(src) == ["Strings.txt", "de"]


def test_empty_default_is_fatal_by_default(tmp_path: Path, fake_runner, tool_paths):
    cfg = _config(tmp_path)
    write_sources(cfg.resource_path / "fr-FR", "Strings.txt")

    with pytest.raises(EmptyDefaultError):
        run_build(cfg, runner=fake_runner, tools=tool_paths)
    assert fake_runner.calls == []
    assert not (cfg.resource_path / "fr-FR" / "MyResources.resources.dll").exists()


def test_empty_default_can_be_ignored(tmp_path: Path, fake_runner, tool_paths):
    cfg = _config(tmp_path, ignore_empty_default=True)
    write_sources(cfg.resource_path / "fr-FR", "Strings.txt")

    result = run_build(cfg, runner=fake_runner, tools=tool_paths)

    assert result.default_built is False
    assert (cfg.resource_path / "fr-FR" / "MyResources.resources.dll").is_file()


def test_missing_tools_abort_before_writing(tmp_path: Path, fake_runner):
    cfg = _config(
        tmp_path, sdk_path=tmp_path / "no-sdk", csc_path=tmp_path / "no-csc.exe"
    )

    with pytest.raises(ToolingError):
        run_build(cfg, runner=fake_runner)
    assert not (tmp_path / "app").exists()
    assert fake_runner.calls == []


def test_tool_failures_do_not_stop_the_build(tmp_path: Path, fake_runner, tool_paths):
    fake_runner.fail = {"csc.exe"}
    cfg = _config(tmp_path)
    write_sources(cfg.resource_path, "Strings.txt")
    write_sources(cfg.resource_path / "it-IT", "Strings.txt")

    result = run_build(cfg, runner=fake_runner, tools=tool_paths)

    assert result.default_built is True
    assert _libraries(cfg.resource_path / "it-IT") == ["MyResources.resources.dll"]
