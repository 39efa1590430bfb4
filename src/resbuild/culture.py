# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Culture name resolution against the CLDR catalog.

Directory names under the resource source root are culture candidates. They
are checked with Babel, which ships the CLDR locale data, and turned into the
canonical hyphenated form used by .NET (``fr-FR``, ``zh-Hans-CN``).

:func:`resolve_culture` returns either a :class:`CultureDescriptor` or an
:class:`InvalidCultureName`; it does not raise for unknown names.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Union

from babel import Locale, UnknownLocaleError

# POSIX charset and modifier markers; Locale.parse drops them silently
_FORBIDDEN_CHARS = (".", "@")
_RESERVED_NAMES = {"root"}

__all__ = [
    "CultureDescriptor",
    "InvalidCultureName",
    "CultureResolution",
    "resolve_culture",
]


@dataclass(frozen=True, slots=True)
class CultureDescriptor:
    name: str
    language: str
    territory: str | None = None
    script: str | None = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class InvalidCultureName:
    name: str
    reason: str

    def __str__(self) -> str:
        return f'"{self.name}" is not a valid culture name!'


CultureResolution = Union[CultureDescriptor, InvalidCultureName]


def _canonical_name(locale: Locale) -> str:
    parts = [locale.language]
    if locale.script:
        parts.append(locale.script)
    if locale.territory:
        parts.append(locale.territory)
    if locale.variant:
        parts.append(locale.variant)
    return "-".join(parts)


@functools.lru_cache(maxsize=128)
def resolve_culture(name: str) -> CultureResolution:
    """Resolve a directory name to a culture known to the CLDR catalog."""
    candidate = name.strip().replace("_", "-")
    if not candidate:
        return InvalidCultureName(name, "empty culture name")
    if any(ch in candidate for ch in _FORBIDDEN_CHARS):
        return InvalidCultureName(name, "charset or modifier suffix")
    if candidate.lower() in _RESERVED_NAMES:
        return InvalidCultureName(name, "reserved locale name")
    try:
        locale = Locale.parse(candidate, sep="-", resolve_likely_subtags=False)
    except (ValueError, TypeError, UnknownLocaleError) as exc:
        return InvalidCultureName(name, str(exc))
    canonical = _canonical_name(locale)
    # aliases and dropped subtags would silently map to another culture
    if canonical.lower() != candidate.lower():
        return InvalidCultureName(name, f"resolves to a different culture ({canonical})")
    return CultureDescriptor(
        name=canonical,
        language=locale.language,
        territory=locale.territory,
        script=locale.script,
    )
