# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Tests for culture name resolution."""

import pytest

from resbuild.culture import CultureDescriptor, InvalidCultureName, resolve_culture


@pytest.mark.parametrize(
    "name, canonical",
    [
        ("en-US", "en-US"),
        ("fr-FR", "fr-FR"),
        ("de", "de"),
        ("DE-de", "de-DE"),
        ("pt_BR", "pt-BR"),
        ("zh-Hans-CN", "zh-Hans-CN"),
    ],
)
def test_valid_cultures(name: str, canonical: str):
    resolved = resolve_culture(name)
    assert isinstance(resolved, CultureDescriptor)
    assert resolved.name == canonical
    assert str(resolved) == canonical


@pytest.mark.parametrize(
    "name",
    [
        "not-a-culture",
        "Plugin",
        "xx-YY",
        "",
        "en US",
        "root",
        "fr-FR.old",
        "fr-FR.bak",
        "fr-FR.UTF-8",
        "de@euro",
    ],
)
def test_invalid_cultures_are_values(name: str):
    resolved = resolve_culture(name)
    assert isinstance(resolved, InvalidCultureName)
    assert resolved.name == name
    assert "is not a valid culture name" in str(resolved)


def test_descriptor_parts():
    resolved = resolve_culture("sr-Latn-RS")
    assert isinstance(resolved, CultureDescriptor)
    assert resolved.language == "sr"
    assert resolved.script == "Latn"
    assert resolved.territory == "RS"
