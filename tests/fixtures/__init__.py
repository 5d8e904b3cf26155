"""
Test fixtures package for the Merkle whitelist tests.

This package provides factory functions for creating test objects:
- common.py: Sample addresses, whitelist documents, sources and services

Usage:
    from fixtures import make_whitelist_records, make_service

    def test_something():
        service = make_service(["0xa", "0xb"])
"""

from .common import (
    SAMPLE_ADDRESSES,
    NON_MEMBER_ADDRESS,
    make_whitelist_records,
    write_whitelist_file,
    make_static_source,
    make_service,
)

__all__ = [
    "SAMPLE_ADDRESSES",
    "NON_MEMBER_ADDRESS",
    "make_whitelist_records",
    "write_whitelist_file",
    "make_static_source",
    "make_service",
]
