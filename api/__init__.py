"""
Module 06 - Whitelist API (FastAPI)

HTTP API over the Merkle whitelist:
- GET /root - Merkle root
- GET /proof?address= - Membership proof
- POST /verify - Verify a proof
- GET /sync - Compare with the on-chain root
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
