"""
Module 06 - API Response Models

Pydantic models for API response serialization.

Whitelist endpoints share one envelope: {data, status, error}.
"""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "merkle-whitelist-api"
    version: str = "v1"


class RootResponse(BaseModel):
    """Response for GET /root."""

    data: str | None = Field(default=None, description="Merkle root, 0x-prefixed 32-byte hex")
    status: int = Field(default=200, description="HTTP status code")
    error: str | None = Field(default=None)


class ProofResponse(BaseModel):
    """Response for GET /proof."""

    data: list[str] | None = Field(
        default=None,
        description="Sibling hashes from leaf to root, 0x-prefixed hex",
    )
    status: int = Field(default=200)
    error: str | None = Field(default=None)


class VerifyResult(BaseModel):
    """Outcome of a proof verification."""

    valid: bool = Field(..., description="Whether the proof recomputes the root")
    root: str = Field(..., description="Root the proof was checked against")


class VerifyResponse(BaseModel):
    """Response for POST /verify."""

    data: VerifyResult | None = Field(default=None)
    status: int = Field(default=200)
    error: str | None = Field(default=None)


class SyncInfo(BaseModel):
    """Whitelist root compared with the published on-chain root."""

    whitelist_root: str = Field(..., description="Root computed from the whitelist")
    onchain_root: str | None = Field(default=None, description="Last known on-chain root")
    synced: bool = Field(..., description="Whether both roots match")


class SyncResponse(BaseModel):
    """Response for GET /sync."""

    data: SyncInfo | None = Field(default=None)
    status: int = Field(default=200)
    error: str | None = Field(default=None)


class ErrorResponse(BaseModel):
    """Standard error response."""

    data: None = None
    status: int = Field(..., description="HTTP status code")
    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Error code")
    details: dict[str, Any] = Field(default_factory=dict)
