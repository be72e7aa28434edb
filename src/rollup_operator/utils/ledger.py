"""
Retention helpers for sorted index ledgers.

The operator tracks ascending sequences of batch and block indices. Once a
safety boundary moves, every index beyond it is stale and gets dropped.
"""

from bisect import bisect_right


def prune_ledger(ledger: list[int], threshold: int) -> None:
    """
    Drop every element greater than ``threshold`` from an ascending list.

    The list is mutated in place and keeps the longest prefix whose values
    are all ``<= threshold``. The caller owns the list and must not share it
    with concurrent writers while pruning.

    Args:
        ledger: Ascending list of indices (not re-sorted)
        threshold: Highest value to retain
    """
    if not ledger or ledger[-1] <= threshold:
        return
    del ledger[bisect_right(ledger, threshold):]
