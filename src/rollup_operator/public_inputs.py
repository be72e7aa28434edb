"""
Public inputs of the rollup circuit.

The verifier contract checks the proof against ten public signals read from
the batch builder. Their order is fixed by the circuit.
"""

from typing import Any, Protocol

from .utils.hex_codec import pad256


class BatchBuilder(Protocol):
    """Read-only view of the batch builder used to assemble public inputs."""

    def get_final_idx(self) -> Any: ...
    def get_new_state_root(self) -> Any: ...
    def get_new_exit_root(self) -> Any: ...
    def get_on_chain_hash(self) -> Any: ...
    def get_off_chain_hash(self) -> Any: ...
    def get_counters_out(self) -> Any: ...
    def get_init_idx(self) -> Any: ...
    def get_old_state_root(self) -> Any: ...
    def get_fee_plan_coins(self) -> Any: ...
    def get_fee_plan_fees(self) -> Any: ...


# Circuit order, must not change
PUBLIC_INPUT_ACCESSORS: tuple[str, ...] = (
    "get_final_idx",
    "get_new_state_root",
    "get_new_exit_root",
    "get_on_chain_hash",
    "get_off_chain_hash",
    "get_counters_out",
    "get_init_idx",
    "get_old_state_root",
    "get_fee_plan_coins",
    "get_fee_plan_fees",
)


def build_public_inputs(batch_builder: BatchBuilder) -> list[str]:
    """
    Read the circuit public inputs from a batch builder.

    Each accessor is called exactly once, in circuit order.

    Args:
        batch_builder: Batch builder snapshot to read from

    Returns:
        Ten canonical 256-bit hex strings

    Raises:
        ConversionError: If an accessor returns a non-integer value
    """
    return [pad256(getattr(batch_builder, name)()) for name in PUBLIC_INPUT_ACCESSORS]
