"""
Canonical encoding and error taxonomy for hashtree.
"""

from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    canonicalize_value,
    dumps_canonical,
    ensure_utc,
    format_datetime_canonical,
)
from .errors import (
    CanonicalizationException,
    ConfigurationException,
    ErrorCodes,
    HashTreeError,
    HashTreeException,
    UnsupportedAlgorithmException,
)

__all__ = [
    # Canonical JSON
    "CANONICAL_JSON_SEPARATORS",
    "canonicalize_value",
    "dumps_canonical",
    "ensure_utc",
    "format_datetime_canonical",
    # Errors
    "ErrorCodes",
    "HashTreeError",
    "HashTreeException",
    "CanonicalizationException",
    "ConfigurationException",
    "UnsupportedAlgorithmException",
]
