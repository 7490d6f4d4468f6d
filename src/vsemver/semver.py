# SPDX-License-Identifier: MIT
"""Semantic version parsing, validation and rendering.

Accepts MAJOR.MINOR.PATCH with optional pre-release and build metadata,
optionally prefixed with ``v``:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .config import ParseOptions, resolve_options
from .errors import InvalidVersionError, MalformedVersionError, ValidationError, VersionError

# Anchored with fullmatch; re.ASCII keeps \d from matching non-ASCII digits
SEMVER_PATTERN = re.compile(
    r"^v?(\d+)\.(\d+)\.(\d+)"
    r"(?:-([0-9A-Za-z.-]+))?"
    r"(?:\+([0-9A-Za-z.-]+))?$",
    re.ASCII,
)

IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+", re.ASCII)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a semantic version.

    Equality and hashing cover all five fields, build metadata included.
    Use compare_versions for precedence, which ignores build metadata.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Dot-separated pre-release identifiers, "" when absent
        build: Dot-separated build metadata, "" when absent
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        """Return the pre-release identifiers, or an empty tuple."""
        return tuple(self.prerelease.split(".")) if self.prerelease else ()

    def validate(self, options: ParseOptions | None = None) -> None:
        """Raise ValidationError if this version breaks an invariant."""
        validate_version(self, options)


def _has_leading_zero(digits: str) -> bool:
    return len(digits) > 1 and digits.startswith("0")


def match_version(
    version_string: str, options: ParseOptions | None = None
) -> tuple[str, str, str, str, str]:
    """Match text against the semantic version grammar.

    Returns:
        (major, minor, patch, prerelease, build) as raw text; absent
        optional parts are empty strings.

    Raises:
        MalformedVersionError: If the text does not match the grammar
    """
    options = resolve_options(options)

    if not isinstance(version_string, str):
        raise MalformedVersionError(
            version_string, f"Version must be a string, got {type(version_string).__name__}"
        )
    if not version_string:
        raise MalformedVersionError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        raise MalformedVersionError(version_string)
    if not options.allow_prefix and version_string.startswith("v"):
        raise MalformedVersionError(version_string, f"Version prefix not allowed: {version_string!r}")

    major, minor, patch, prerelease, build = match.groups(default="")

    if options.strict and any(_has_leading_zero(part) for part in (major, minor, patch)):
        raise MalformedVersionError(
            version_string, f"Leading zeros are not allowed: {version_string!r}"
        )

    return major, minor, patch, prerelease, build


def _to_component(digits: str, name: str, version_string: str, options: ParseOptions) -> int:
    # int() refuses very long digit runs, so check the length first
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(options.max_component)):
        raise InvalidVersionError(
            version_string, f"{name} version overflows: {digits} > {options.max_component}"
        )
    return int(significant)


def parse_version(version_string: str, options: ParseOptions | None = None) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            ([v]MAJOR.MINOR.PATCH[-prerelease][+build])
        options: Parser options, DEFAULT_OPTIONS when omitted

    Returns:
        A validated Version object

    Raises:
        MalformedVersionError: If the string does not match the grammar
        InvalidVersionError: If a field is out of range or malformed

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("v2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    options = resolve_options(options)
    major, minor, patch, prerelease, build = match_version(version_string, options)

    version = Version(
        major=_to_component(major, "Major", version_string, options),
        minor=_to_component(minor, "Minor", version_string, options),
        patch=_to_component(patch, "Patch", version_string, options),
        prerelease=prerelease,
        build=build,
    )
    try:
        validate_version(version, options)
    except ValidationError as exc:
        raise ValidationError(version_string, exc.message) from exc
    return version


def _validate_identifiers(version: Version, field: str, strict: bool) -> None:
    value = getattr(version, field)
    if not isinstance(value, str):
        raise ValidationError(version, f"{field} must be a string, got {type(value).__name__}")
    if not value:
        return

    for identifier in value.split("."):
        if not IDENTIFIER_PATTERN.fullmatch(identifier):
            raise ValidationError(version, f"Invalid {field} identifier {identifier!r} in {value!r}")
        if strict and field == "prerelease" and identifier.isdigit() and _has_leading_zero(identifier):
            raise ValidationError(
                version, f"Numeric prerelease identifier has a leading zero: {identifier!r}"
            )


def validate_version(version: Version, options: ParseOptions | None = None) -> None:
    """Check that a Version satisfies every invariant.

    Pure and idempotent. Values decoded from documents never pass through
    the grammar, so identifier shapes are checked here as well.

    Raises:
        ValidationError: If a numeric field is negative, too large or not an
            integer, or a pre-release/build identifier is malformed
    """
    options = resolve_options(options)

    for field in ("major", "minor", "patch"):
        value = getattr(version, field)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(version, f"{field} must be an integer, got {type(value).__name__}")
        if value < 0:
            raise ValidationError(
                version, "Major, minor and patch version numbers must be non-negative"
            )
        if value > options.max_component:
            raise ValidationError(
                version, f"{field} version overflows: {value} > {options.max_component}"
            )

    _validate_identifiers(version, "prerelease", options.strict)
    _validate_identifiers(version, "build", options.strict)


def render_version(version: Version) -> str:
    """Return the canonical text of a validated Version.

    The optional ``v`` prefix is never emitted.

    Raises:
        ValidationError: If the version breaks an invariant
    """
    validate_version(version)
    return str(version)


def is_valid_semver(version_string: str, options: ParseOptions | None = None) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("v1.0.0-alpha")
        True
    """
    try:
        parse_version(version_string, options)
    except VersionError:
        return False
    return True


def must_parse(version_string: str) -> Version:
    """Parse a version literal that is known to be valid.

    Intended for constants in source code. A failure here is a programming
    error, so it is raised as RuntimeError rather than a VersionError that
    input-handling code would catch.

    Examples:
        >>> MINIMUM = must_parse("1.4.0")
    """
    try:
        return parse_version(version_string)
    except VersionError as exc:
        raise RuntimeError(f"must_parse({version_string!r}): {exc.message}") from exc
