#!/usr/bin/env python3
"""Tests for the command line entry point."""

import json
import logging
import sys

import pytest

import main


@pytest.fixture
def run_cli(monkeypatch):
    """Run main() with the given command line arguments."""
    async def run(*argv: str) -> None:
        monkeypatch.setattr(sys, "argv", ["main.py", *argv])
        await main.main()
    return run


class TestCli:
    """Test suite for the CLI commands and exit codes."""

    @pytest.mark.asyncio
    async def test_pad256_prints_encoding(self, run_cli, capsys):
        """pad256 prints the canonical 256-bit hex string."""
        await run_cli("pad256", "0x10")
        assert capsys.readouterr().out.strip() == "0x" + "0" * 62 + "10"

    @pytest.mark.asyncio
    async def test_encode_proof_prints_call(self, run_cli, capsys, tmp_path):
        """encode-proof prints the verifier call as JSON."""
        proof = tmp_path / "proof.json"
        proof.write_text(json.dumps({
            "proofA": ["1", "2"],
            "proofB": [["3", "4"], ["5", "6"]],
            "proofC": ["7", "8"],
        }))

        await run_cli("encode-proof", str(proof))

        call = json.loads(capsys.readouterr().out)
        assert call["proofB"][0] == ["0x" + "0" * 63 + "4", "0x" + "0" * 63 + "3"]

    @pytest.mark.asyncio
    async def test_malformed_proof_is_an_input_error(self, run_cli, caplog, tmp_path):
        """A malformed proof file exits 1 without blaming the configuration."""
        proof = tmp_path / "proof.json"
        proof.write_text(json.dumps({"proofA": ["1", "2"]}))

        with caplog.at_level(logging.ERROR):
            with pytest.raises(SystemExit) as exc:
                await run_cli("encode-proof", str(proof))

        assert exc.value.code == 1
        assert "Invalid Input: Malformed proof" in caplog.text
        assert "Configuration" not in caplog.text

    @pytest.mark.asyncio
    async def test_bad_value_is_a_conversion_error(self, run_cli, caplog):
        """A value that is not an integer exits 1 with a conversion error."""
        with caplog.at_level(logging.ERROR):
            with pytest.raises(SystemExit) as exc:
                await run_cli("pad256", "1_000")

        assert exc.value.code == 1
        assert "Conversion Error" in caplog.text

    @pytest.mark.asyncio
    async def test_missing_file_is_a_file_error(self, run_cli, caplog, tmp_path):
        """A missing proof file exits 1 with a file error."""
        with caplog.at_level(logging.ERROR):
            with pytest.raises(SystemExit) as exc:
                await run_cli("encode-proof", str(tmp_path / "missing.json"))

        assert exc.value.code == 1
        assert "File Error" in caplog.text
