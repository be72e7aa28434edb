"""Unit tests for shared data models."""

import pytest

from rollup_operator.models import ProofCall, RawProof, RollupTx


class TestRawProof:
    """Test suite for RawProof."""

    def test_from_dict(self):
        """Prover JSON maps to named proof groups."""
        proof = RawProof.from_dict({
            "proofA": ["1", "2"],
            "proofB": [["3", "4"], ["5", "6"]],
            "proofC": ["7", "8"],
            "publicInputs": ["9"],
        })
        assert proof.proof_a == ("1", "2")
        assert proof.proof_b == (("3", "4"), ("5", "6"))
        assert proof.proof_c == ("7", "8")
        assert proof.public_inputs == ("9",)

    def test_projective_points_use_affine_coordinates(self):
        """A trailing projective coordinate is dropped."""
        proof = RawProof.from_dict({
            "proofA": ["1", "2", "1"],
            "proofB": [["3", "4"], ["5", "6"], ["1", "0"]],
            "proofC": ["7", "8", "1"],
        })
        assert proof.proof_a == ("1", "2")
        assert proof.public_inputs is None

    @pytest.mark.parametrize("data", [
        {"proofA": ["1"], "proofB": [["3", "4"], ["5", "6"]], "proofC": ["7", "8"]},
        {"proofA": ["1", "2"], "proofB": [["3", "4"]], "proofC": ["7", "8"]},
        {"proofA": "12", "proofB": [["3", "4"], ["5", "6"]], "proofC": ["7", "8"]},
        {"proofA": 12, "proofB": [["3", "4"], ["5", "6"]], "proofC": ["7", "8"]},
    ])
    def test_bad_shapes(self, data):
        """Groups of the wrong shape are rejected."""
        with pytest.raises(ValueError):
            RawProof.from_dict(data)

    def test_frozen(self):
        """Proofs are immutable."""
        proof = RawProof(proof_a=(1, 2), proof_b=((3, 4), (5, 6)), proof_c=(7, 8))
        with pytest.raises(AttributeError):
            proof.proof_a = (0, 0)


class TestProofCall:
    """Test suite for ProofCall serialisation."""

    def test_to_dict_lists(self):
        """Tuples become JSON lists."""
        call = ProofCall(proof_a=("a", "b"), proof_b=(("c", "d"), ("e", "f")), proof_c=("g", "h"))
        assert call.to_dict() == {
            "proofA": ["a", "b"],
            "proofB": [["c", "d"], ["e", "f"]],
            "proofC": ["g", "h"],
        }


class TestRollupTx:
    """Test suite for RollupTx."""

    def test_str(self):
        """String form shows the headline fields."""
        tx = RollupTx(
            tx_type=0, amount=5, load_amount=10, coin=2,
            from_ax="1", from_ay="2", from_eth_addr="3",
            to_ax="4", to_ay="5", to_eth_addr="6", on_chain=True,
        )
        assert str(tx) == "RollupTx(coin=2, amount=5, load_amount=10, on_chain=True)"
