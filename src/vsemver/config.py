# SPDX-License-Identifier: MIT
"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass

# Largest value a signed 64-bit version field can hold
MAX_COMPONENT = 2**63 - 1


@dataclass(frozen=True)
class ParseOptions:
    """Options controlling how version text is matched and validated.

    Attributes:
        allow_prefix: Accept a single leading ``v`` (``v1.2.3``).
        strict: Reject leading zeros in major/minor/patch and in numeric
            prerelease identifiers, as SemVer 2.0.0 requires.
        max_component: Largest accepted major, minor or patch value.
    """

    allow_prefix: bool = True
    strict: bool = False
    max_component: int = MAX_COMPONENT


DEFAULT_OPTIONS = ParseOptions()
STRICT_OPTIONS = ParseOptions(strict=True)


def resolve_options(options: ParseOptions | None) -> ParseOptions:
    """Return ``options``, or the defaults when none were given."""
    return DEFAULT_OPTIONS if options is None else options
