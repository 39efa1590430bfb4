# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Build configuration loading.

The configuration is a flat YAML mapping keyed like .NET application settings
(``ResourceNamespace``, ``ResourcePath``, ...). It is read once at startup and
turned into an immutable :class:`BuildConfig` which is then passed explicitly
to every build phase.

Malformed values never abort a run: they are reported and the default is
kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

log = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "resbuild.yaml"
DEFAULT_NAMESPACE = "MyResources"
DEFAULT_RESOURCE_PATH = "Resources"

_TRUE_WORDS = {"true", "yes", "on", "1"}
_FALSE_WORDS = {"false", "no", "off", "0"}

_STRING_KEYS = {
    "ResourceNamespace": "resource_namespace",
    "ResourcePath": "resource_path",
    "ResourceSourcePath": "resource_source_path",
    "SdkPath": "sdk_path",
    "CscPath": "csc_path",
}
_FLAG_KEYS = {
    "ResourceMainAtRoot": "main_at_root",
    "IgnoreEmptyDefault": "ignore_empty_default",
}

__all__ = [
    "BuildConfig",
    "DEFAULT_CONFIG_FILE",
    "load_config",
    "config_from_mapping",
]


@dataclass(frozen=True, slots=True)
class BuildConfig:
    resource_namespace: str = DEFAULT_NAMESPACE
    resource_path: Path = Path(DEFAULT_RESOURCE_PATH)
    resource_source_path: Optional[Path] = None
    main_at_root: bool = True
    ignore_empty_default: bool = False
    sdk_path: Optional[Path] = None
    csc_path: Optional[Path] = None

    @property
    def source_path(self) -> Path:
        """Raw resource source root; falls back to the output root."""
        return self.resource_source_path or self.resource_path

    def with_overrides(self, **overrides: Any) -> "BuildConfig":
        values = {k: v for k, v in overrides.items() if v is not None}
        for key in ("resource_path", "resource_source_path", "sdk_path", "csc_path"):
            if key in values:
                values[key] = Path(values[key])
        return replace(self, **values)


def _coerce_flag(key: str, value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    log.warning("Ignoring malformed value for %s: %r", key, value)
    return None


def _coerce_string(key: str, value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        log.warning("Ignoring malformed value for %s: %r", key, value)
        return None
    text = str(value).strip()
    # empty values keep the default
    return text or None


def config_from_mapping(data: Mapping[str, Any]) -> BuildConfig:
    """Build a :class:`BuildConfig` from raw key/value settings."""
    values: Dict[str, Any] = {}
    for key, raw in data.items():
        if key in _STRING_KEYS:
            text = _coerce_string(key, raw)
            if text is None:
                continue
            field_name = _STRING_KEYS[key]
            values[field_name] = text if field_name == "resource_namespace" else Path(text)
        elif key in _FLAG_KEYS:
            flag = _coerce_flag(key, raw)
            if flag is not None:
                values[_FLAG_KEYS[key]] = flag
        else:
            log.debug("Ignoring unknown configuration key '%s'", key)
    return BuildConfig(**values)


def load_config(path: str | Path | None = None) -> BuildConfig:
    """Load the configuration file, falling back to defaults on any problem."""
    p = Path(path) if path is not None else Path(DEFAULT_CONFIG_FILE)
    if not p.exists():
        log.debug("Configuration file not found, using defaults: %s", p)
        return BuildConfig()
    try:
        data: Any = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        log.warning("Unable to read configuration %s, using defaults: %s", p, exc)
        return BuildConfig()
    if data is None:
        return BuildConfig()
    if not isinstance(data, dict):
        log.warning("Configuration root must be a mapping, using defaults: %s", p)
        return BuildConfig()
    log.debug("Loaded configuration from %s", p)
    return config_from_mapping(data)
