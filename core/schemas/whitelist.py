"""
Module 02 - Schemas & Encoding
File: whitelist.py

Purpose: Strict schema for whitelist source records.

A whitelist document is a JSON array of {"name": str, "address": str}
objects. Validation runs before any tree is built; the Merkle core only
ever sees the already-validated address strings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .errors import SchemaValidationError


class WhitelistEntry(BaseModel):
    """A single whitelisted member."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(..., description="Display name of the member")
    address: StrictStr = Field(..., description="Account address, hashed as given")


_ENTRIES_ADAPTER: TypeAdapter[list[WhitelistEntry]] = TypeAdapter(list[WhitelistEntry])


def parse_whitelist(data: Any) -> list[WhitelistEntry]:
    """
    Validate a decoded whitelist document.

    Args:
        data: Decoded JSON (expected: list of objects)

    Returns:
        Validated entries in document order

    Raises:
        SchemaValidationError: If the document does not match the schema
    """
    try:
        return _ENTRIES_ADAPTER.validate_python(data)
    except PydanticValidationError as e:
        errors = [
            {
                "loc": ".".join(str(part) for part in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Whitelist failed schema validation ({len(errors)} error(s))",
            errors=errors,
        ) from e


__all__ = [
    "WhitelistEntry",
    "parse_whitelist",
]
