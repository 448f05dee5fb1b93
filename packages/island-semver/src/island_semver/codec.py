# SPDX-License-Identifier: MIT
"""Structured encode/decode for semantic versions.

A SemanticVersion is always encoded as its canonical string. Decoding parses
that string and raises VersionDecodeError, carrying the raw input, when it
is not a valid version.

SemanticVersion can be used directly as a pydantic field type:

    >>> from pydantic import BaseModel
    >>> class Release(BaseModel):
    ...     version: SemanticVersion
    >>> Release(version="1.2.3-rc.1").model_dump()
    {'version': '1.2.3-rc.1'}
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import core_schema

from .semver import SemanticVersion, parse_version

logger = logging.getLogger(__name__)


class VersionDecodeError(ValueError):
    """Raised when encoded data does not hold a valid semantic version."""

    def __init__(self, raw: Any, message: str = ""):
        self.raw = raw
        self.message = message or f"Invalid semantic version: {raw!r}"
        super().__init__(self.message)


def encode_version(version: SemanticVersion) -> str:
    """Encode a version as its canonical string."""
    return str(version)


def decode_version(raw: Any) -> SemanticVersion:
    """Decode a canonical version string.

    Args:
        raw: The encoded value; must be a str

    Returns:
        The decoded SemanticVersion

    Raises:
        VersionDecodeError: If ``raw`` is not a string or not a valid version
    """
    if not isinstance(raw, str):
        logger.debug("Cannot decode semantic version from %s", type(raw).__name__)
        raise VersionDecodeError(
            raw, f"Semantic version must be encoded as a string, got {type(raw).__name__}"
        )

    version = parse_version(raw)
    if version is None:
        logger.debug("Cannot decode semantic version from %r", raw)
        raise VersionDecodeError(raw)
    return version


def _validate(value: Any) -> SemanticVersion:
    if isinstance(value, SemanticVersion):
        return value
    return decode_version(value)


def version_core_schema() -> core_schema.CoreSchema:
    """Build the pydantic core schema used for SemanticVersion fields."""
    return core_schema.no_info_plain_validator_function(
        _validate,
        serialization=core_schema.to_string_ser_schema(when_used="always"),
    )


_ADAPTER: TypeAdapter[SemanticVersion] = TypeAdapter(SemanticVersion)


def dump_json(version: SemanticVersion) -> bytes:
    """Serialize a version to JSON (a single JSON string)."""
    return _ADAPTER.dump_json(version)


def load_json(data: str | bytes) -> SemanticVersion:
    """Deserialize a version from JSON.

    Raises:
        VersionDecodeError: If the JSON is malformed or does not hold a
            valid version string
    """
    try:
        return _ADAPTER.validate_json(data)
    except ValidationError as exc:
        error = exc.errors()[0]
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, VersionDecodeError):
            raise cause from exc
        raise VersionDecodeError(data, f"Invalid semantic version JSON: {error['msg']}") from exc
