"""
Shared data models for the rollup operator.

This module contains the transaction record produced from chain events, the
closed set of event variants the operator understands, and the raw and
contract-ready forms of a zkSNARK proof.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from web3 import Web3


@dataclass(frozen=True, slots=True)
class RollupTx:
    """Uniform rollup transaction decoded from an on-chain or off-chain event.

    Attributes:
        tx_type: Transaction type tag taken from the decoded tx data
        amount: Amount transferred inside the rollup
        load_amount: Amount deposited from layer 1
        coin: Token identifier
        from_ax: Sender Baby Jubjub x coordinate (hex, no prefix)
        from_ay: Sender Baby Jubjub y coordinate (hex, no prefix)
        from_eth_addr: Sender Ethereum address as a decimal string
        to_ax: Receiver Baby Jubjub x coordinate (hex, no prefix)
        to_ay: Receiver Baby Jubjub y coordinate (hex, no prefix)
        to_eth_addr: Receiver Ethereum address as a decimal string
        on_chain: Whether the transaction was submitted on layer 1
    """
    tx_type: Any
    amount: Any
    load_amount: int
    coin: Any
    from_ax: str
    from_ay: str
    from_eth_addr: str
    to_ax: str
    to_ay: str
    to_eth_addr: str
    on_chain: bool

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"RollupTx(coin={self.coin}, amount={self.amount}, "
            f"load_amount={self.load_amount}, on_chain={self.on_chain})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the key layout used by the batch builder."""
        return {
            "IDEN3_ROLLUP_TX": self.tx_type,
            "amount": self.amount,
            "loadAmount": self.load_amount,
            "coin": self.coin,
            "fromAx": self.from_ax,
            "fromAy": self.from_ay,
            "fromEthAddr": self.from_eth_addr,
            "toAx": self.to_ax,
            "toAy": self.to_ay,
            "toEthAddr": self.to_eth_addr,
            "onChain": self.on_chain,
        }


@dataclass(frozen=True, slots=True)
class OnChainTx:
    """``OnChainTx`` event emitted by the rollup contract.

    Attributes:
        tx_data: Encoded transaction data, decoded by an external decoder
        args: Raw event arguments (loadAmount, coordinates, addresses)
    """
    tx_data: Any
    args: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class OffChainTx:
    """Off-chain transaction already shaped as a rollup record."""
    tx: Any


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """Any event the operator does not handle."""
    name: str | None


ChainEvent: TypeAlias = OnChainTx | OffChainTx | Unrecognized

Scalar: TypeAlias = Any
Pair: TypeAlias = tuple[Scalar, Scalar]


@dataclass(frozen=True, slots=True)
class RawProof:
    """Groth16 proof as produced by the prover.

    Attributes:
        proof_a: G1 point ``(x, y)``
        proof_b: G2 point ``((x0, x1), (y0, y1))`` in prover order
        proof_c: G1 point ``(x, y)``
        public_inputs: Public signals, or None when the prover omitted them
    """
    proof_a: Pair
    proof_b: tuple[Pair, Pair]
    proof_c: Pair
    public_inputs: tuple[Scalar, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawProof":
        """
        Build a RawProof from the prover's JSON layout.

        Args:
            data: Mapping with ``proofA``, ``proofB``, ``proofC`` and an
                optional ``publicInputs`` key

        Returns:
            RawProof instance

        Raises:
            ValueError: If a proof group is missing or has the wrong shape
        """
        try:
            proof_a = _pair(data["proofA"])
            proof_b = (_pair(data["proofB"][0]), _pair(data["proofB"][1]))
            proof_c = _pair(data["proofC"])
        except (KeyError, IndexError, TypeError) as e:
            raise ValueError(f"Malformed proof: {e}") from e

        public_inputs = data.get("publicInputs")
        return cls(
            proof_a=proof_a,
            proof_b=proof_b,
            proof_c=proof_c,
            public_inputs=tuple(public_inputs) if public_inputs is not None else None,
        )


@dataclass(frozen=True, slots=True)
class ProofCall:
    """Proof laid out the way the verifier contract takes it.

    Every scalar is a 66 character canonical hex string and ``proof_b``
    rows are already coordinate swapped.
    """
    proof_a: tuple[str, str]
    proof_b: tuple[tuple[str, str], tuple[str, str]]
    proof_c: tuple[str, str]
    public_inputs: tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON layout of the contract call."""
        call: dict[str, Any] = {
            "proofA": list(self.proof_a),
            "proofB": [list(row) for row in self.proof_b],
            "proofC": list(self.proof_c),
        }
        if self.public_inputs is not None:
            call["publicInputs"] = list(self.public_inputs)
        return call

    def to_contract_args(self) -> tuple[list[int], list[list[int]], list[int], list[int]]:
        """
        Positional ``uint256`` arguments for the verifier function.

        Returns:
            Tuple of (proofA, proofB, proofC, publicInputs) as integers

        Raises:
            ValueError: If the call carries no public inputs
        """
        if self.public_inputs is None:
            raise ValueError("Proof call has no public inputs")
        return (
            [Web3.to_int(hexstr=h) for h in self.proof_a],
            [[Web3.to_int(hexstr=h) for h in row] for row in self.proof_b],
            [Web3.to_int(hexstr=h) for h in self.proof_c],
            [Web3.to_int(hexstr=h) for h in self.public_inputs],
        )


def _pair(values: Sequence[Scalar]) -> Pair:
    if isinstance(values, (str, bytes)) or len(values) < 2:
        raise ValueError(f"Expected a pair of scalars, got {values!r}")
    return (values[0], values[1])
