"""
Proof call building and batch forging for the rollup operator.

This module reshapes zkSNARK proofs into the calldata layout expected by the
Rollup verifier and submits ``forgeBatch`` transactions.
"""

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from web3 import Web3
from web3.types import HexBytes, TxReceipt

from .models import ProofCall, RawProof
from .public_inputs import PUBLIC_INPUT_ACCESSORS, BatchBuilder, build_public_inputs
from .utils.hex_codec import pad256
from .utils.timing import timeout

if TYPE_CHECKING:
    from .config import SubmissionConfig
    from .utils.contract_utility import ContractUtility

logger = logging.getLogger(__name__)


class SubmissionError(Exception):
    """Raised when a forge transaction is mined but reverted."""


def build_proof_call(raw_proof: RawProof | Mapping[str, Any]) -> ProofCall:
    """
    Prepare a proof for the verifier contract.

    ``proofA`` and ``proofC`` keep their order. Each ``proofB`` row is
    written as ``(x1, x0)``, the order the pairing precompile expects for
    G2 coordinates; the prover emits ``(x0, x1)``.

    Args:
        raw_proof: Proof from the prover, as RawProof or its JSON mapping

    Returns:
        ProofCall with every scalar encoded as canonical 256-bit hex

    Raises:
        ConversionError: If a proof scalar is not a non-negative integer
    """
    if not isinstance(raw_proof, RawProof):
        raw_proof = RawProof.from_dict(raw_proof)

    (b00, b01), (b10, b11) = raw_proof.proof_b
    public_inputs = None
    if raw_proof.public_inputs is not None:
        public_inputs = tuple(pad256(elem) for elem in raw_proof.public_inputs)

    return ProofCall(
        proof_a=(pad256(raw_proof.proof_a[0]), pad256(raw_proof.proof_a[1])),
        proof_b=(
            (pad256(b01), pad256(b00)),
            (pad256(b11), pad256(b10)),
        ),
        proof_c=(pad256(raw_proof.proof_c[0]), pad256(raw_proof.proof_c[1])),
        public_inputs=public_inputs,
    )


class ProofManager:
    """Handles proof call building and batch submission to the Rollup contract."""

    def __init__(
        self,
        contract_util: "ContractUtility",
        rollup_address: str,
        submission: "SubmissionConfig",
    ) -> None:
        """
        Initialize the ProofManager.

        Args:
            contract_util: Utility for contract interactions
            rollup_address: Address of the Rollup contract
            submission: Retry and gas settings
        """
        self.contract_util = contract_util
        self.rollup_address = Web3.to_checksum_address(rollup_address)
        self.submission = submission

        self.contract = self.contract_util.w3.eth.contract(
            address=self.rollup_address,
            abi=self.contract_util.get_contract_abi("Rollup")
        )

    @staticmethod
    def build_call(raw_proof: RawProof | Mapping[str, Any]) -> ProofCall:
        """Shape a raw proof for the verifier contract."""
        return build_proof_call(raw_proof)

    async def forge_batch(
        self,
        call: ProofCall,
        batch_builder: BatchBuilder | None = None,
    ) -> str:
        """
        Submit a ``forgeBatch`` transaction and wait for it to be mined.

        Failures before broadcast are retried by sending again. Once a
        transaction hash exists, retries only wait again on that hash, so
        a slow receipt never leads to a second forge.

        Public inputs are taken from the call, or assembled from the batch
        builder when the call has none.

        Args:
            call: Contract-ready proof
            batch_builder: Batch builder to read public inputs from

        Returns:
            Transaction hash of the mined forge transaction

        Raises:
            ValueError: If public inputs are missing or of the wrong length
            SubmissionError: If the transaction reverts
        """
        if call.public_inputs is None:
            if batch_builder is None:
                raise ValueError("Proof call has no public inputs and no batch builder was given")
            call = ProofCall(
                proof_a=call.proof_a,
                proof_b=call.proof_b,
                proof_c=call.proof_c,
                public_inputs=tuple(build_public_inputs(batch_builder)),
            )

        if len(call.public_inputs) != len(PUBLIC_INPUT_ACCESSORS):
            raise ValueError(
                f"Expected {len(PUBLIC_INPUT_ACCESSORS)} public inputs, got {len(call.public_inputs)}"
            )

        args = call.to_contract_args()
        tx_hash = await self._with_retries("send forge transaction", lambda: self._transact_forge(args))

        # Once broadcast, only the receipt wait is retried, never the send
        receipt: TxReceipt = await self._with_retries(
            f"wait for receipt of {Web3.to_hex(tx_hash)}",
            lambda: self.contract_util.w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self.submission.receipt_timeout
            ),
        )
        if (status := receipt.get('status', 0)) != 1:
            raise SubmissionError(
                f"Forge transaction {Web3.to_hex(tx_hash)} reverted with status={status}"
            )

        logger.info(f"Batch forged in block {receipt['blockNumber']}")
        return Web3.to_hex(tx_hash)

    async def _with_retries(self, action: str, operation: Callable[[], Any]) -> Any:
        """
        Run a blocking web3 operation, retrying with a delay on failure.

        Args:
            action: Description used in log messages
            operation: Zero-argument callable to run

        Returns:
            The operation's result

        Raises:
            Exception: The last error once all attempts are used
        """
        attempts = self.submission.retry_count + 1
        attempt = 1

        while True:
            try:
                logger.info(f"Attempting to {action} (attempt {attempt}/{attempts})")
                return operation()
            except Exception as e:
                if attempt == attempts:
                    logger.error(f"Failed to {action} after {attempts} attempts: {e}")
                    raise
                logger.warning(f"Attempt {attempt} to {action} failed: {e}")
                await timeout(self.submission.retry_delay_ms)
                attempt += 1

    def _transact_forge(self, args: tuple) -> HexBytes:
        tx_hash: HexBytes = self.contract.functions.forgeBatch(*args).transact({
            'gas': self.submission.gas_limit,
            'gasPrice': self.contract_util.w3.eth.gas_price
        })
        logger.info(f"Forge transaction sent to {self.rollup_address}: {Web3.to_hex(tx_hash)}")
        return tx_hash
