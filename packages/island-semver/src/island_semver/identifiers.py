# SPDX-License-Identifier: MIT
"""Prerelease and build metadata identifier rules.

Identifiers are the dot-separated pieces after ``-`` (prerelease) and ``+``
(build metadata) in a semantic version. Both kinds must match
``[A-Za-z0-9-]+``. Prerelease identifiers made only of digits must also be
exactly ``0`` or start with a non-zero digit.

All checks are ASCII-only; ``str.isdigit`` and ``str.isalpha`` are avoided
because they accept non-ASCII code points.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Union

DIGITS = frozenset(string.digits)
IDENTIFIER_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-")


def is_identifier_character(char: str) -> bool:
    """Return True if ``char`` may appear in a semver identifier."""
    return char in IDENTIFIER_CHARACTERS


def is_numeric_identifier(text: str) -> bool:
    """Return True if ``text`` is a non-empty run of ASCII digits."""
    return bool(text) and all(char in DIGITS for char in text)


def is_valid_build_metadata_identifier(text: str) -> bool:
    """Check a build metadata identifier.

    Build metadata only needs to be non-empty and made of ``[A-Za-z0-9-]``;
    leading zeros are allowed (``"01"`` is valid).

    Examples:
        >>> is_valid_build_metadata_identifier("001")
        True
        >>> is_valid_build_metadata_identifier("exp.sha")
        False
    """
    return bool(text) and all(char in IDENTIFIER_CHARACTERS for char in text)


def is_valid_prerelease_identifier(text: str) -> bool:
    """Check a prerelease identifier.

    A valid prerelease identifier is a valid build metadata identifier that,
    when purely numeric, is either exactly ``"0"`` or does not start with
    ``"0"``.

    Examples:
        >>> is_valid_prerelease_identifier("0")
        True
        >>> is_valid_prerelease_identifier("01")
        False
        >>> is_valid_prerelease_identifier("0a")
        True
    """
    if not is_valid_build_metadata_identifier(text):
        return False
    if is_numeric_identifier(text):
        return text == "0" or not text.startswith("0")
    return True


@dataclass(frozen=True, slots=True)
class NumericIdentifier:
    """A prerelease identifier made only of digits.

    The digits are kept as a string so arbitrarily long identifiers compare
    without integer conversion.
    """

    digits: str


@dataclass(frozen=True, slots=True)
class AlphanumericIdentifier:
    """A prerelease identifier containing at least one non-digit."""

    text: str


Identifier = Union[NumericIdentifier, AlphanumericIdentifier]


def classify_identifier(text: str) -> Identifier:
    """Tag a prerelease identifier as numeric or alphanumeric."""
    if is_numeric_identifier(text):
        return NumericIdentifier(text)
    return AlphanumericIdentifier(text)


def _sign(left: str, right: str) -> int:
    if left == right:
        return 0
    return -1 if left < right else 1


def compare_identifiers(left: Identifier, right: Identifier) -> int:
    """Compare two classified prerelease identifiers by precedence.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right

    Numeric identifiers compare by value. Without leading zeros a shorter
    digit string is always the smaller number, and equal-length digit
    strings order the same way as their values. A numeric identifier is
    always lower than an alphanumeric one. Alphanumeric identifiers compare
    by ASCII code point.
    """
    match (left, right):
        case (NumericIdentifier(digits=a), NumericIdentifier(digits=b)):
            if len(a) != len(b):
                return -1 if len(a) < len(b) else 1
            return _sign(a, b)
        case (NumericIdentifier(), AlphanumericIdentifier()):
            return -1
        case (AlphanumericIdentifier(), NumericIdentifier()):
            return 1
        case (AlphanumericIdentifier(text=a), AlphanumericIdentifier(text=b)):
            return _sign(a, b)
        case _:
            raise TypeError(f"Cannot compare identifiers {left!r} and {right!r}")
