# SPDX-License-Identifier: MIT
"""Conversion between Version and structured or text encodings.

Documents mirror the Version fields plus the canonical text::

    {"semver": "1.2.3-rc.1", "major": 1, "minor": 2, "patch": 3, "prerelease": "rc.1"}

``prerelease`` and ``build`` are omitted when empty.

Decoding goes through VersionDocument, a raw record of the known fields,
and only then builds and validates a Version. Two legacy shapes are
accepted for numeric fields: native integers and decimal text.

Legacy lazy defaulting: when a document carries ``semver`` and its numeric
fields are absent or all zero, the text is authoritative and is parsed to
fill in the fields. A ``prerelease`` or ``build`` key may only fill a part
the text leaves empty. When numeric fields are set they must agree with the
text. This reconciliation happens only here, never in validate_version.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import InvalidVersionError, MalformedVersionError
from .semver import Version, parse_version, render_version, validate_version

logger = logging.getLogger(__name__)

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+", re.ASCII)

NUMERIC_FIELDS = ("major", "minor", "patch")


class VersionDocument(BaseModel):
    """Raw, unvalidated version fields read from a document."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    semver: Optional[StrictStr] = Field(default=None, description="Canonical version text")
    major: Optional[int] = Field(default=None, description="Major version number")
    minor: Optional[int] = Field(default=None, description="Minor version number")
    patch: Optional[int] = Field(default=None, description="Patch version number")
    prerelease: Optional[StrictStr] = Field(default=None, description="Pre-release identifiers")
    build: Optional[StrictStr] = Field(default=None, description="Build metadata")

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def coerce_number(cls, value: Any) -> Optional[int]:
        """Accept integers or decimal text; reject floats, booleans and the rest."""
        if value is None:
            return None
        if isinstance(value, bool):
            raise ValueError("must be an integer, got bool")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if not _INTEGER_TEXT.fullmatch(value):
                raise ValueError(f"{value!r} is not a number")
            return int(value)
        raise ValueError(f"must be an integer, got {type(value).__name__}")

    @property
    def has_numbers(self) -> bool:
        return any(getattr(self, name) is not None for name in NUMERIC_FIELDS)

    @property
    def numbers_are_default(self) -> bool:
        return all(not getattr(self, name) for name in NUMERIC_FIELDS)


def encode_text(version: Version) -> str:
    """Encode a Version as its canonical text (same as render_version)."""
    return render_version(version)


def decode_text(text: str) -> Version:
    """Decode canonical or ``v``-prefixed text (same as parse_version)."""
    return parse_version(text)


def encode_document(version: Version) -> dict[str, Any]:
    """Encode a Version as a plain document.

    Raises:
        ValidationError: If the version breaks an invariant
    """
    document: dict[str, Any] = {
        "semver": render_version(version),
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
    }
    if version.prerelease:
        document["prerelease"] = version.prerelease
    if version.build:
        document["build"] = version.build
    return document


def _read_document(document: Any) -> VersionDocument:
    if not isinstance(document, Mapping):
        raise MalformedVersionError(
            document, f"Version document must be a mapping, got {type(document).__name__}"
        )
    try:
        return VersionDocument.model_validate(dict(document))
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "document"
        raise InvalidVersionError(document, f"Invalid {field}: {error['msg']}") from exc


def _from_fields(raw: VersionDocument, fallback: Optional[Version] = None) -> Version:
    prerelease = raw.prerelease
    build = raw.build
    if fallback is not None:
        prerelease = fallback.prerelease if prerelease is None else prerelease
        build = fallback.build if build is None else build
    return Version(
        major=raw.major or 0,
        minor=raw.minor or 0,
        patch=raw.patch or 0,
        prerelease=prerelease or "",
        build=build or "",
    )


def _reconcile_optional(
    document: Any, field: str, parsed: Version, supplied: Optional[str]
) -> str:
    # The text's value wins; a supplied key may only fill an empty one
    from_text = getattr(parsed, field)
    if supplied is None or supplied == from_text:
        return from_text
    if not from_text:
        return supplied
    raise InvalidVersionError(
        document, f"{field} {supplied!r} does not match semver {str(parsed)!r}"
    )


def decode_document(document: Mapping[str, Any]) -> Version:
    """Decode a document into a validated Version.

    Only ``semver``, ``major``, ``minor``, ``patch``, ``prerelease`` and
    ``build`` are read; other keys are ignored.

    Raises:
        MalformedVersionError: If the document is not a mapping, carries no
            version field at all, or its ``semver`` text does not parse
        InvalidVersionError: If a field has the wrong type, the fields are
            invalid, or the fields disagree with ``semver``
    """
    raw = _read_document(document)

    if not raw.semver and not raw.has_numbers:
        raise MalformedVersionError(document, "Version document has no version field")

    if not raw.semver:
        version = _from_fields(raw)
    else:
        parsed = parse_version(raw.semver)
        if raw.numbers_are_default:
            logger.debug("Populating version fields from semver text %r", raw.semver)
            version = Version(
                major=parsed.major,
                minor=parsed.minor,
                patch=parsed.patch,
                prerelease=_reconcile_optional(document, "prerelease", parsed, raw.prerelease),
                build=_reconcile_optional(document, "build", parsed, raw.build),
            )
        else:
            version = _from_fields(raw, fallback=parsed)
            if version != parsed:
                raise InvalidVersionError(
                    document,
                    f"semver {raw.semver!r} does not match version fields {version}",
                )

    try:
        validate_version(version)
    except InvalidVersionError as exc:
        raise InvalidVersionError(document, exc.message) from exc
    return version


def encode_json(version: Version) -> str:
    """Encode a Version as a JSON document."""
    return json.dumps(encode_document(version))


def decode_json(text: str) -> Version:
    """Decode a JSON document into a validated Version.

    Raises:
        MalformedVersionError: If the text is not JSON or not an object
        InvalidVersionError: As for decode_document
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedVersionError(text, f"Invalid JSON version document: {exc}") from exc
    return decode_document(document)


def version_document_schema() -> dict[str, Any]:
    """Return the JSON Schema describing a version document."""
    return VersionDocument.model_json_schema()
