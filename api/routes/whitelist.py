"""
Module 06 - Whitelist Routes

- GET /root - Merkle root of the current whitelist
- GET /proof?address= - Membership proof for one address
- POST /verify - Check a proof against a root
- GET /sync - Whitelist root vs. published on-chain root
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_root_store, get_whitelist_service
from api.errors import InvalidRequestError, NotWhitelistedError
from api.models.requests import VerifyRequest
from api.models.responses import (
    ProofResponse,
    RootResponse,
    SyncInfo,
    SyncResponse,
    VerifyResponse,
    VerifyResult,
)
from core.crypto.hashing import from_hex, to_hex
from core.schemas.errors import NotFoundError
from core.whitelist.root_store import RootStore
from core.whitelist.service import WhitelistService


logger = logging.getLogger(__name__)

router = APIRouter(tags=["whitelist"])


def _decode_hex(value: str, field: str) -> bytes:
    try:
        return from_hex(value)
    except ValueError as e:
        raise InvalidRequestError(f"Invalid hex in {field}: {e}", details={"field": field}) from e


@router.get("/root", response_model=RootResponse)
def get_root(service: WhitelistService = Depends(get_whitelist_service)) -> RootResponse:
    """Merkle root of the whitelist as 0x-prefixed hex."""
    return RootResponse(data=service.get_root_hex(), status=200)


@router.get("/proof", response_model=ProofResponse)
def get_proof(
    address: Optional[str] = Query(default=None, description="Identifier to prove"),
    service: WhitelistService = Depends(get_whitelist_service),
) -> ProofResponse:
    """
    Membership proof for ``address``.

    Returns 400 when the address parameter is missing or blank and 404
    when the address is not whitelisted.
    """
    if not address or not address.strip():
        raise InvalidRequestError("no address in query")

    try:
        proof = service.get_proof(address)
    except NotFoundError:
        logger.info(f"Proof requested for non-member {address}")
        raise NotWhitelistedError()

    return ProofResponse(data=proof.hex_siblings(), status=200)


@router.post("/verify", response_model=VerifyResponse)
def verify_proof(
    request: VerifyRequest,
    service: WhitelistService = Depends(get_whitelist_service),
) -> VerifyResponse:
    """
    Verify a proof for an address.

    The proof is checked against ``root`` when given, otherwise against
    the root of the current whitelist.
    """
    siblings = [_decode_hex(s, f"proof[{i}]") for i, s in enumerate(request.proof)]
    root = _decode_hex(request.root, "root") if request.root is not None else service.get_root()

    valid = service.verify(request.address, siblings, root)
    return VerifyResponse(data=VerifyResult(valid=valid, root=to_hex(root)), status=200)


@router.get("/sync", response_model=SyncResponse)
def get_sync(
    service: WhitelistService = Depends(get_whitelist_service),
    store: Optional[RootStore] = Depends(get_root_store),
) -> SyncResponse:
    """Compare the whitelist root with the configured on-chain root."""
    status = service.sync_status(store)
    return SyncResponse(data=SyncInfo(**status.to_dict()), status=200)
