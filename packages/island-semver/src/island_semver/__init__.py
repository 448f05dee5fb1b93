# SPDX-License-Identifier: MIT
"""Semantic version values for Island packages.

This package provides an immutable SemanticVersion type following the
SemVer 2.0.0 grammar, with strict structural equality and SemVer precedence
ordering.

Example:
    >>> from island_semver import SemanticVersion, parse_version
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease_identifiers
    ('alpha', '1')
    >>>
    >>> parse_version("1.2") is None
    True
    >>>
    >>> parse_version("1.0.0-rc.2") < parse_version("1.0.0-rc.10")
    True
    >>> str(SemanticVersion(1, 0, 0, ["a", "b"], ["c", "d"]))
    '1.0.0-a.b+c.d'
"""

__version__ = "0.1.0"

from .identifiers import (
    AlphanumericIdentifier,
    Identifier,
    NumericIdentifier,
    classify_identifier,
    compare_identifiers,
    is_valid_build_metadata_identifier,
    is_valid_prerelease_identifier,
)
from .semver import (
    SemanticVersion,
    parse_version,
    is_valid_semver,
    InvalidVersionError,
)
from .compare import (
    compare_precedence,
    compare_versions,
    precedence_key,
)
from .codec import (
    VersionDecodeError,
    encode_version,
    decode_version,
    dump_json,
    load_json,
)

__all__ = [
    # Identifiers
    "AlphanumericIdentifier",
    "Identifier",
    "NumericIdentifier",
    "classify_identifier",
    "compare_identifiers",
    "is_valid_build_metadata_identifier",
    "is_valid_prerelease_identifier",
    # Version parsing
    "SemanticVersion",
    "parse_version",
    "is_valid_semver",
    "InvalidVersionError",
    # Version comparison
    "compare_precedence",
    "compare_versions",
    "precedence_key",
    # Encoding
    "VersionDecodeError",
    "encode_version",
    "decode_version",
    "dump_json",
    "load_json",
]
