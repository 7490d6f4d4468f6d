# SPDX-License-Identifier: MIT
"""Semantic version parsing, validation and comparison.

This package parses, validates, renders and orders versions following the
SemVer 2.0.0 specification, accepting an optional leading ``v``.

Example:
    >>> from vsemver import parse_version, compare_versions, encode_document
    >>>
    >>> version = parse_version("v1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> compare_versions("1.0.0-alpha", "1.0.0")
    -1
    >>> encode_document(parse_version("1.0.0"))
    {'semver': '1.0.0', 'major': 1, 'minor': 0, 'patch': 0}
"""

__version__ = "0.1.0"

from .config import (
    DEFAULT_OPTIONS,
    MAX_COMPONENT,
    STRICT_OPTIONS,
    ParseOptions,
)
from .errors import (
    InvalidVersionError,
    MalformedVersionError,
    ValidationError,
    VersionError,
)
from .semver import (
    SEMVER_PATTERN,
    Version,
    is_valid_semver,
    match_version,
    must_parse,
    parse_version,
    render_version,
    validate_version,
)
from .compare import (
    compare_versions,
    max_version,
    sort_versions,
    version_key,
)
from .document import (
    VersionDocument,
    decode_document,
    decode_json,
    decode_text,
    encode_document,
    encode_json,
    encode_text,
    version_document_schema,
)

__all__ = [
    # Configuration
    "ParseOptions",
    "DEFAULT_OPTIONS",
    "STRICT_OPTIONS",
    "MAX_COMPONENT",
    # Errors
    "VersionError",
    "MalformedVersionError",
    "InvalidVersionError",
    "ValidationError",
    # Version parsing
    "Version",
    "SEMVER_PATTERN",
    "match_version",
    "parse_version",
    "validate_version",
    "render_version",
    "is_valid_semver",
    "must_parse",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
    # Structured encoding
    "VersionDocument",
    "encode_text",
    "decode_text",
    "encode_document",
    "decode_document",
    "encode_json",
    "decode_json",
    "version_document_schema",
]
