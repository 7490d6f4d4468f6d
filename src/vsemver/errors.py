# SPDX-License-Identifier: MIT
"""Exception types raised while parsing, validating and decoding versions.

- MalformedVersionError: the input has no recognisable version shape.
- InvalidVersionError: the shape matched but a field breaks a semantic rule.
- ValidationError: raised by validate_version on a constructed Version.
"""

from __future__ import annotations

from typing import Any


class VersionError(ValueError):
    """Base class for every error raised by vsemver."""

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class MalformedVersionError(VersionError):
    """Raised when the input does not match the semantic version grammar."""

    def __init__(self, version: Any, message: str = ""):
        super().__init__(version, message or f"Malformed semantic version: {version!r}")


class InvalidVersionError(VersionError):
    """Raised when a version matched the grammar but its fields are not valid."""


class ValidationError(InvalidVersionError):
    """Raised by validate_version for a Version that breaks an invariant."""
