# SPDX-License-Identifier: MIT
"""Semantic version value type and parser.

Versions follow SemVer 2.0.0: ``MAJOR.MINOR.PATCH`` with optional
dot-separated prerelease identifiers after ``-`` and build metadata
identifiers after ``+``:

- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, --dev
- Build metadata: +build, +build.123, +001, +exp.sha.5114f85

Equality and hashing are structural over every component, build metadata
included. Ordering operators implement SemVer precedence, which ignores
build metadata, so two versions may be ``<=`` and ``>=`` each other while
not being ``==``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from .compare import compare_precedence
from .identifiers import (
    DIGITS,
    IDENTIFIER_CHARACTERS,
    is_valid_build_metadata_identifier,
    is_valid_prerelease_identifier,
)

logger = logging.getLogger(__name__)

_CORE_FIELDS = ("major", "minor", "patch")


class InvalidVersionError(ValueError):
    """Raised when a SemanticVersion is constructed from invalid components.

    This signals a bug at the call site, not bad external input; untrusted
    strings go through ``parse_version`` or ``decode_version`` instead.
    """

    def __init__(self, field: str, value: Any, message: str = ""):
        self.field = field
        self.value = value
        self.message = message or f"Invalid value for {field}: {value!r}"
        super().__init__(self.message)


def _validated_identifiers(
    field: str,
    identifiers: Iterable[str],
    is_valid: Callable[[str], bool],
    rule: str,
) -> tuple[str, ...]:
    if isinstance(identifiers, str):
        raise InvalidVersionError(
            field, identifiers, f"{field} must be a sequence of strings, not a single string"
        )
    result = tuple(identifiers)
    for identifier in result:
        if not isinstance(identifier, str):
            raise InvalidVersionError(
                field, identifier, f"{field} entries must be strings, got {type(identifier).__name__}"
            )
        if not is_valid(identifier):
            raise InvalidVersionError(
                field, identifier, f"Invalid identifier {identifier!r} in {field}: {rule}"
            )
    return result


@dataclass(frozen=True, slots=True)
class SemanticVersion:
    """An immutable semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease_identifiers: Pre-release identifiers, e.g. ("alpha", "1")
        build_metadata_identifiers: Build metadata identifiers, e.g. ("exp", "sha", "5114f85")

    Components are validated on construction; invalid components raise
    InvalidVersionError. Use ``dataclasses.replace`` to derive a new version.
    """

    major: int
    minor: int
    patch: int
    prerelease_identifiers: tuple[str, ...] = ()
    build_metadata_identifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for field in _CORE_FIELDS:
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidVersionError(
                    field, value, f"{field} must be an int, got {type(value).__name__}"
                )
            if value < 0:
                raise InvalidVersionError(field, value, f"{field} must be non-negative, got {value}")

        # Frozen dataclass: normalise sequences to tuples in place.
        object.__setattr__(
            self,
            "prerelease_identifiers",
            _validated_identifiers(
                "prerelease_identifiers",
                self.prerelease_identifiers,
                is_valid_prerelease_identifier,
                "must match [A-Za-z0-9-]+ and numeric identifiers may not have leading zeros",
            ),
        )
        object.__setattr__(
            self,
            "build_metadata_identifiers",
            _validated_identifiers(
                "build_metadata_identifiers",
                self.build_metadata_identifiers,
                is_valid_build_metadata_identifier,
                "must match [A-Za-z0-9-]+",
            ),
        )

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease_identifiers:
            version += "-" + ".".join(self.prerelease_identifiers)
        if self.build_metadata_identifiers:
            version += "+" + ".".join(self.build_metadata_identifiers)
        return version

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare_precedence(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare_precedence(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare_precedence(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare_precedence(self, other) >= 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease_identifiers)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def parse(cls, text: str) -> Optional[SemanticVersion]:
        """Parse ``text``, returning None if it is not a semantic version."""
        return parse_version(text)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from .codec import version_core_schema

        return version_core_schema()

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict[str, Any]:
        return {"type": "string", "format": "semver"}


def _scan(text: str, start: int, allowed: frozenset[str]) -> int:
    """Return the index just past the run of ``allowed`` characters at ``start``."""
    end = start
    while end < len(text) and text[end] in allowed:
        end += 1
    return end


def _reject(text: str, reason: str) -> None:
    logger.debug("Rejected version string %r: %s", text, reason)
    return None


def parse_version(text: str) -> Optional[SemanticVersion]:
    """Parse a semantic version string.

    The whole string must match; surrounding whitespace is not trimmed.
    Leading zeros are accepted (and dropped) in the major, minor and patch
    numbers but not in numeric prerelease identifiers.

    Args:
        text: A string in MAJOR.MINOR.PATCH[-prerelease][+build] format

    Returns:
        The parsed SemanticVersion, or None if ``text`` is not a valid
        semantic version. Malformed input never raises.

    Examples:
        >>> parse_version("1.0.0-alpha.1+build.456")
        SemanticVersion(major=1, minor=0, patch=0, prerelease_identifiers=('alpha', '1'), build_metadata_identifiers=('build', '456'))

        >>> parse_version("01.02.03")
        SemanticVersion(major=1, minor=2, patch=3, prerelease_identifiers=(), build_metadata_identifiers=())

        >>> parse_version("1.2") is None
        True
    """
    if not isinstance(text, str):
        return _reject(text, f"expected str, got {type(text).__name__}")
    if not text.isascii():
        return _reject(text, "contains non-ASCII characters")

    position = 0
    core: list[int] = []
    for field in _CORE_FIELDS:
        if core:
            if position >= len(text) or text[position] != ".":
                return _reject(text, f"expected '.' before {field}")
            position += 1
        end = _scan(text, position, DIGITS)
        if end == position:
            return _reject(text, f"{field} is not a number")
        try:
            core.append(int(text[position:end]))
        except ValueError:
            # Digit strings past the interpreter's int conversion limit.
            return _reject(text, f"{field} is too large")
        position = end

    prerelease: list[str] = []
    build: list[str] = []
    in_build = False
    identifiers_start = position
    while position < len(text):
        separator = text[position]
        if separator == "+" and not in_build:
            in_build = True
        elif separator == "-" and position == identifiers_start:
            pass
        elif separator == "." and position > identifiers_start:
            pass
        else:
            return _reject(text, f"unexpected {separator!r} at offset {position}")
        position += 1

        end = _scan(text, position, IDENTIFIER_CHARACTERS)
        if end == position:
            return _reject(text, f"empty identifier at offset {position}")
        identifier = text[position:end]
        position = end

        if in_build:
            build.append(identifier)
        elif is_valid_prerelease_identifier(identifier):
            prerelease.append(identifier)
        else:
            return _reject(text, f"numeric prerelease identifier {identifier!r} has a leading zero")

    return SemanticVersion(core[0], core[1], core[2], tuple(prerelease), tuple(build))


def is_valid_semver(text: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver(" 1.0.0")
        False
    """
    return parse_version(text) is not None
