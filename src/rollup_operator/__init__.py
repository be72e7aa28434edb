"""
Rollup operator package.

Encodes batch public inputs and zkSNARK proofs for the Rollup verifier
contract and decodes rollup transactions from contract events.
"""

from .event_processor import EventProcessor, classify_event
from .models import OffChainTx, OnChainTx, ProofCall, RawProof, RollupTx, Unrecognized
from .proof_manager import ProofManager, SubmissionError, build_proof_call
from .public_inputs import BatchBuilder, build_public_inputs
from .utils.hex_codec import ConversionError, pad256
from .utils.ledger import prune_ledger
from .utils.timing import timeout

__all__ = [
    "BatchBuilder",
    "ConversionError",
    "EventProcessor",
    "OffChainTx",
    "OnChainTx",
    "ProofCall",
    "ProofManager",
    "RawProof",
    "RollupTx",
    "SubmissionError",
    "Unrecognized",
    "build_proof_call",
    "build_public_inputs",
    "classify_event",
    "pad256",
    "prune_ledger",
    "timeout",
]
__version__ = "0.1.0"
