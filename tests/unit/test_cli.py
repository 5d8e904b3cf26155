"""
Module 07 - CLI Tests
Tests for whitelist_cli/main.py and its commands.

Exit codes: 0 success, 1 runtime error, 2 verification or membership failure.
"""
import json

import pytest

from core.merkle.merkle_tree import build_tree
from whitelist_cli.main import create_parser, main

from fixtures import NON_MEMBER_ADDRESS


@pytest.fixture(autouse=True)
def _in_tmp_dir(tmp_path, monkeypatch):
    """Run every CLI test from an empty directory (no stray config files)."""
    monkeypatch.chdir(tmp_path)


class TestParser:
    """Argument parsing."""

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "0.1.0" in capsys.readouterr().out

    def test_repeated_proof_flags(self):
        args = create_parser().parse_args(["verify", "0xa", "--proof", "0x01", "--proof", "0x02"])

        assert args.proof == ["0x01", "0x02"]


class TestRootCommand:
    """merkle-whitelist root"""

    def test_root(self, whitelist_file, sample_addresses, capsys):
        code = main(["root", "--whitelist", str(whitelist_file)])

        assert code == 0
        assert capsys.readouterr().out.strip() == build_tree(sample_addresses).hex_root

    def test_root_json(self, whitelist_file, sample_addresses, capsys):
        assert main(["root", "--whitelist", str(whitelist_file), "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["root"] == build_tree(sample_addresses).hex_root
        assert data["leaf_count"] == len(sample_addresses)

    def test_env_source(self, whitelist_file, sample_addresses, monkeypatch, capsys):
        monkeypatch.setenv("WHITELIST_PATH", str(whitelist_file))

        assert main(["root"]) == 0
        assert capsys.readouterr().out.strip() == build_tree(sample_addresses).hex_root

    def test_missing_file(self, tmp_path, capsys):
        assert main(["root", "--whitelist", str(tmp_path / "nope.json")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_empty_whitelist(self, tmp_path, capsys):
        path = tmp_path / "empty.json"
        path.write_text("[]", encoding="utf-8")

        assert main(["root", "--whitelist", str(path)]) == 1
        assert "Error" in capsys.readouterr().err


class TestProofAndVerifyCommands:
    """merkle-whitelist proof / verify"""

    def test_proof_then_verify(self, whitelist_file, sample_addresses, capsys):
        address = sample_addresses[2]
        assert main(["proof", address, "--whitelist", str(whitelist_file)]) == 0
        siblings = capsys.readouterr().out.split()

        argv = ["verify", address, "--whitelist", str(whitelist_file)]
        for sibling in siblings:
            argv += ["--proof", sibling]

        assert main(argv) == 0
        assert "valid: true" in capsys.readouterr().out

    def test_proof_json(self, whitelist_file, sample_addresses, capsys):
        assert main(["proof", sample_addresses[0], "--whitelist", str(whitelist_file), "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["root"] == build_tree(sample_addresses).hex_root
        assert len(data["proof"]) == len(data["positions"])

    def test_proof_non_member(self, whitelist_file, capsys):
        assert main(["proof", NON_MEMBER_ADDRESS, "--whitelist", str(whitelist_file)]) == 2
        assert "not in whitelist" in capsys.readouterr().err

    def test_proof_empty_whitelist(self, tmp_path, capsys):
        path = tmp_path / "empty.json"
        path.write_text("[]", encoding="utf-8")

        assert main(["proof", NON_MEMBER_ADDRESS, "--whitelist", str(path)]) == 1
        assert "Error" in capsys.readouterr().err

    def test_verify_invalid(self, whitelist_file, sample_addresses, capsys):
        argv = [
            "verify", sample_addresses[0],
            "--whitelist", str(whitelist_file),
            "--root", "0x" + "22" * 32,
            "--json",
        ]

        assert main(argv) == 2
        assert json.loads(capsys.readouterr().out)["valid"] is False

    def test_verify_bad_hex(self, whitelist_file, sample_addresses):
        argv = ["verify", sample_addresses[0], "--whitelist", str(whitelist_file), "--proof", "nothex"]

        assert main(argv) == 1

    def test_verify_wrong_width(self, whitelist_file, sample_addresses):
        argv = ["verify", sample_addresses[0], "--whitelist", str(whitelist_file), "--proof", "0xabcd"]

        assert main(argv) == 1


class TestSyncCommand:
    """merkle-whitelist sync"""

    def test_synced(self, whitelist_file, sample_addresses, capsys):
        root = build_tree(sample_addresses).hex_root

        code = main(["sync", "--whitelist", str(whitelist_file), "--onchain-root", root, "--json"])

        assert code == 0
        assert json.loads(capsys.readouterr().out)["synced"] is True

    def test_out_of_sync(self, whitelist_file, capsys):
        code = main(["sync", "--whitelist", str(whitelist_file), "--onchain-root", "0x" + "33" * 32])

        assert code == 2
        assert "synced: false" in capsys.readouterr().out

    def test_no_onchain_root(self, whitelist_file):
        assert main(["sync", "--whitelist", str(whitelist_file)]) == 2


class TestConfigCommand:
    """merkle-whitelist config"""

    def test_init_and_show(self, tmp_path, capsys):
        path = tmp_path / "merkle-whitelist.json"

        assert main(["config", "--init", "--path", str(path)]) == 0
        assert json.loads(path.read_text())["merkle"]["hash_algorithm"] == "keccak256"

        assert main(["config", "--init", "--path", str(path)]) == 1

        capsys.readouterr()
        assert main(["config", "--show"]) == 0
        assert json.loads(capsys.readouterr().out)["source"]["path"] == "./public/whitelist.json"
