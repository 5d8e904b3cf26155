"""
Module 02 - Leaf Encoding Unit Tests
Tests for core/schemas/encoding.py and core/schemas/whitelist.py
"""
import pytest

from core.crypto.hashing import keccak256, sha256
from core.schemas.encoding import DEFAULT_ENCODER, LeafEncoder, normalize_identifier
from core.schemas.errors import InvalidIdentifierError, SchemaValidationError
from core.schemas.whitelist import WhitelistEntry, parse_whitelist


ADDRESS = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


class TestLeafHash:
    """leaf = keccak256(utf8(identifier))"""

    def test_default_leaf_is_keccak_of_utf8(self):
        assert DEFAULT_ENCODER.leaf_hash(ADDRESS) == keccak256(ADDRESS.encode("utf-8"))

    def test_leaf_hash_width(self):
        assert len(DEFAULT_ENCODER.leaf_hash("anything")) == 32

    def test_case_sensitive_by_default(self):
        """Two casings of one address are two distinct leaves."""
        assert DEFAULT_ENCODER.leaf_hash(ADDRESS) != DEFAULT_ENCODER.leaf_hash(ADDRESS.lower())

    def test_encode_is_raw_utf8(self):
        assert DEFAULT_ENCODER.encode("0xAbC") == b"0xAbC"

    def test_non_ascii_identifier(self):
        assert DEFAULT_ENCODER.encode("ünïcode") == "ünïcode".encode("utf-8")

    def test_sha256_encoder(self):
        encoder = LeafEncoder(hash_algorithm="sha256")

        assert encoder.leaf_hash(ADDRESS) == sha256(ADDRESS.encode("utf-8"))


class TestNormalization:
    """Tests for normalize_identifier() and encoder modes."""

    def test_none_keeps_identifier(self):
        assert normalize_identifier(ADDRESS, "none") == ADDRESS

    def test_lowercase_folds(self):
        encoder = LeafEncoder(normalization="lowercase")

        assert encoder.leaf_hash(ADDRESS) == encoder.leaf_hash(ADDRESS.lower())
        assert encoder.leaf_hash(ADDRESS) == keccak256(ADDRESS.lower().encode("utf-8"))

    def test_checksum_restores_eip55(self):
        assert normalize_identifier(ADDRESS.lower(), "checksum") == ADDRESS

    def test_checksum_rejects_non_address(self):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            normalize_identifier("alice", "checksum")

        assert exc_info.value.details["identifier"] == "alice"

    def test_unknown_mode_rejected_by_encoder(self):
        with pytest.raises(ValueError, match="normalization"):
            LeafEncoder(normalization="upper")

    def test_unknown_hash_rejected_by_encoder(self):
        with pytest.raises(ValueError, match="Unsupported hash algorithm"):
            LeafEncoder(hash_algorithm="md5")


class TestWhitelistSchema:
    """Tests for parse_whitelist()."""

    def test_valid_document(self):
        entries = parse_whitelist([
            {"name": "alice", "address": "0xa"},
            {"name": "bob", "address": "0xb"},
        ])

        assert entries == [
            WhitelistEntry(name="alice", address="0xa"),
            WhitelistEntry(name="bob", address="0xb"),
        ]

    def test_empty_document_is_valid(self):
        assert parse_whitelist([]) == []

    def test_not_a_list(self):
        with pytest.raises(SchemaValidationError):
            parse_whitelist({"name": "alice", "address": "0xa"})

    def test_missing_address(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_whitelist([{"name": "alice"}])

        errors = exc_info.value.details["errors"]
        assert errors[0]["loc"] == "0.address"

    def test_non_string_address(self):
        with pytest.raises(SchemaValidationError):
            parse_whitelist([{"name": "alice", "address": 42}])
