#!/usr/bin/env python3
"""Unit tests for ContractUtility."""

import pytest
from eth_account import Account
from web3 import HTTPProvider, Web3

from rollup_operator.utils.contract_utility import ContractUtility

PRIVATE_KEY = "0x" + "ab" * 32


class TestContractUtility:
    """Test suite for ContractUtility."""

    def test_rollup_abi(self):
        """The bundled Rollup ABI exposes forgeBatch and OnChainTx."""
        abi = ContractUtility.get_contract_abi("Rollup")
        names = {entry["name"] for entry in abi}
        assert {"forgeBatch", "OnChainTx"} <= names

        forge = next(entry for entry in abi if entry["name"] == "forgeBatch")
        assert [arg["type"] for arg in forge["inputs"]] == [
            "uint256[2]", "uint256[2][2]", "uint256[2]", "uint256[10]"
        ]

    def test_signing_account(self):
        """A private key becomes the default sending account."""
        util = ContractUtility("http://localhost:8545", PRIVATE_KEY)
        assert isinstance(util.w3.provider, HTTPProvider)
        assert util.w3.eth.default_account == Account.from_key(PRIVATE_KEY).address

    def test_unsigned_has_no_default_account(self):
        """Without a key no sender is chosen locally."""
        util = ContractUtility("https://rpc.test")
        assert isinstance(util.w3.provider, HTTPProvider)
        assert not Web3.is_address(util.w3.eth.default_account)

    @pytest.mark.parametrize("rpc_url", ["ws://localhost:8546", "wss://rpc.test", "ipc.sock"])
    def test_non_http_endpoint_rejected(self, rpc_url):
        """Only HTTP(S) endpoints are supported."""
        with pytest.raises(ValueError, match="expected http or https"):
            ContractUtility(rpc_url)
