import json
from pathlib import Path

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import HTTPProvider, Web3
from web3.middleware import SignAndSendRawMiddlewareBuilder


class ContractUtility:
    """
    Utility for contract interaction and ABI loading.

    Can be used in two modes:
    1. Signing mode: Initialize with an RPC URL and a private key, transactions
       are signed locally and sent from that key's address
    2. Unsigned mode: Initialize with an RPC URL only, no default account is
       set and the node must fill in and sign for the sender
    """

    def __init__(self, rpc_url: str, secret: str | None = None):
        """
        Initialize the ContractUtility.

        Args:
            rpc_url: HTTP(S) RPC endpoint of the rollup chain
            secret: Private key for transactions (optional)

        Raises:
            ValueError: If the endpoint is not an HTTP(S) URL
        """
        if not rpc_url.startswith(("http://", "https://")):
            raise ValueError(f"Unsupported RPC endpoint {rpc_url!r}, expected http or https")
        self.network = rpc_url
        self.w3 = self.setup_web3_middleware(secret)

    def setup_web3_middleware(self, secret: str | None) -> Web3:
        w3 = Web3(HTTPProvider(self.network))
        if secret:
            account: LocalAccount = Account.from_key(secret)
            w3.middleware_onion.add(SignAndSendRawMiddlewareBuilder.build(account))
            w3.eth.default_account = account.address
        return w3

    @staticmethod
    def get_contract_abi(contract_name: str) -> list:
        """Fetches ABI of the given contract from the bundled contracts folder"""
        contract_path = (
            Path(__file__).parent.parent / "contracts" / f"{contract_name}.json"
        ).resolve()

        with contract_path.open() as file:
            contract_data = json.load(file)

        return contract_data["abi"]
