"""API request and response models."""

from api.models.requests import VerifyRequest
from api.models.responses import (
    HealthResponse,
    RootResponse,
    ProofResponse,
    VerifyResult,
    VerifyResponse,
    SyncInfo,
    SyncResponse,
    ErrorResponse,
)

__all__ = [
    "VerifyRequest",
    "HealthResponse",
    "RootResponse",
    "ProofResponse",
    "VerifyResult",
    "VerifyResponse",
    "SyncInfo",
    "SyncResponse",
    "ErrorResponse",
]
