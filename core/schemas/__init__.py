"""
Module 02 - Schemas & Encoding
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Error models and exceptions
from .errors import (
    EmptyInputError,
    ErrorCodes,
    InvalidIdentifierError,
    MalformedProofError,
    NotFoundError,
    SchemaValidationError,
    SourceUnavailableError,
    WhitelistError,
    WhitelistException,
)

# Identifier encoding
from .encoding import (
    DEFAULT_ENCODER,
    NORMALIZATION_MODES,
    LeafEncoder,
    Normalization,
    normalize_identifier,
)

# Whitelist records
from .whitelist import (
    WhitelistEntry,
    parse_whitelist,
)

__all__ = [
    # Errors
    "EmptyInputError",
    "ErrorCodes",
    "InvalidIdentifierError",
    "MalformedProofError",
    "NotFoundError",
    "SchemaValidationError",
    "SourceUnavailableError",
    "WhitelistError",
    "WhitelistException",
    # Encoding
    "DEFAULT_ENCODER",
    "NORMALIZATION_MODES",
    "LeafEncoder",
    "Normalization",
    "normalize_identifier",
    # Whitelist
    "WhitelistEntry",
    "parse_whitelist",
]
