"""
Module 06 - API Request Models

Pydantic models for API request validation.
"""

from pydantic import BaseModel, Field


class VerifyRequest(BaseModel):
    """Request body for POST /verify."""

    address: str = Field(..., min_length=1, description="Identifier to verify")
    proof: list[str] = Field(
        default_factory=list,
        description="Sibling hashes from leaf to root, 0x-prefixed hex",
    )
    root: str | None = Field(
        default=None,
        description="Root to verify against (defaults to the current whitelist root)",
    )
