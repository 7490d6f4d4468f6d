# SPDX-License-Identifier: MIT
"""Version comparison following semantic versioning precedence.

Pre-release versions sort before the release they precede, identifiers are
compared left to right, and build metadata is ignored.
"""

from __future__ import annotations

from typing import Iterable, Union

from .semver import Version, parse_version, validate_version


def _as_version(version: Union[str, Version]) -> Version:
    if isinstance(version, str):
        return parse_version(version)
    validate_version(version)
    return version


def _is_numeric(identifier: str) -> bool:
    return identifier.isascii() and identifier.isdigit()


def _compare_identifiers(id1: str, id2: str) -> int:
    """Compare a single pair of pre-release identifiers."""
    is_num1 = _is_numeric(id1)
    is_num2 = _is_numeric(id2)

    if is_num1 and is_num2:
        n1, n2 = int(id1), int(id2)
        if n1 != n2:
            return -1 if n1 < n2 else 1
        return 0
    if is_num1:
        # Numeric < alphanumeric per SemVer
        return -1
    if is_num2:
        return 1
    if id1 != id2:
        return -1 if id1 < id2 else 1
    return 0


def _compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    A version without pre-release has higher precedence than one with
    pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        result = _compare_identifiers(p1, p2)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    if len(parts1) != len(parts2):
        return -1 if len(parts1) < len(parts2) else 1

    return 0


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        MalformedVersionError: If either version string does not parse
        InvalidVersionError: If either version string has invalid fields
        ValidationError: If either Version object breaks an invariant

    Note:
        Build metadata is ignored, so two versions differing only in build
        compare as 0 while still being unequal under ``==``.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha")
        1
        >>> compare_versions("1.0.0-alpha", "1.0.0-1")
        1
        >>> compare_versions("1.0.0+build.1", "v1.0.0")
        0
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _as_version(version)

    # No pre-release sorts after every pre-release: (1,) > (0, ...)
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease.split("."):
            if _is_numeric(part):
                parts.append((0, int(part), ""))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)


def sort_versions(versions: Iterable[Union[str, Version]], reverse: bool = False) -> list[Version]:
    """Parse and sort versions by precedence.

    The sort is stable, so versions that differ only in build metadata keep
    their input order.
    """
    return sorted((_as_version(v) for v in versions), key=version_key, reverse=reverse)


def max_version(versions: Iterable[Union[str, Version]]) -> Version:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If ``versions`` is empty
    """
    parsed = [_as_version(v) for v in versions]
    if not parsed:
        raise ValueError("max_version() arg is an empty sequence")
    return max(parsed, key=version_key)
