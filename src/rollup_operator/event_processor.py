"""
Event processor for rollup contract events.

This module turns raw ``OnChainTx`` and ``OffChainTx`` events into uniform
rollup transaction records. Byte-level decoding of the on-chain transaction
data is delegated to an injected decoder.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .models import ChainEvent, OffChainTx, OnChainTx, RollupTx, Unrecognized
from .utils.hex_codec import to_big_int, to_unprefixed_hex

logger = logging.getLogger(__name__)

TxDataDecoder = Callable[[Any], Mapping[str, Any]]


def _field(event: Any, name: str, default: Any = None) -> Any:
    """Read a field from a web3 AttributeDict, a plain dict or an object."""
    if hasattr(event, 'get'):
        return event.get(name, default)
    return getattr(event, name, default)


def classify_event(event: Any) -> ChainEvent:
    """
    Classify a raw event by its name.

    Args:
        event: Raw event (web3 EventData, dict or attribute object)

    Returns:
        OnChainTx, OffChainTx or Unrecognized
    """
    match _field(event, 'event'):
        case "OnChainTx":
            args: Mapping[str, Any] = _field(event, 'args', {}) or {}
            return OnChainTx(tx_data=args.get('txData'), args=args)
        case "OffChainTx":
            return OffChainTx(tx=_field(event, 'tx'))
        case name:
            return Unrecognized(name=name)


class EventProcessor:
    """Decodes rollup contract events into RollupTx records."""

    def __init__(self, decode_tx_data: TxDataDecoder) -> None:
        """
        Initialize the event processor.

        Args:
            decode_tx_data: Decoder for the encoded ``txData`` of on-chain
                transactions. Must return a mapping with ``IDEN3_ROLLUP_TX``,
                ``amount``, ``tokenId`` and ``onChain``.
        """
        self.decode_tx_data = decode_tx_data

        self.events_decoded = 0
        self.events_ignored = 0

    def manage_event(self, event: Any) -> RollupTx | Any | None:
        """
        Get the rollup transaction carried by an event.

        Args:
            event: Raw event from the rollup contract

        Returns:
            RollupTx for on-chain events, the carried record for off-chain
            events, None for any other event

        Raises:
            ConversionError: If a numeric event argument is not an integer
        """
        match classify_event(event):
            case OnChainTx(tx_data=tx_data, args=args):
                tx = self._decode_on_chain(tx_data, args)
                self.events_decoded += 1
                logger.info(f"OnChainTx decoded: {tx}")
                return tx
            case OffChainTx(tx=tx):
                # Not emitted by the current contract, record passed through as is
                self.events_decoded += 1
                return tx
            case Unrecognized(name=name):
                self.events_ignored += 1
                logger.debug(f"Ignoring event {name!r}")
                return None

    def _decode_on_chain(self, tx_data: Any, args: Mapping[str, Any]) -> RollupTx:
        decoded = self.decode_tx_data(tx_data)
        return RollupTx(
            tx_type=decoded['IDEN3_ROLLUP_TX'],
            amount=decoded['amount'],
            load_amount=to_big_int(args['loadAmount']),
            coin=decoded['tokenId'],
            from_ax=to_unprefixed_hex(args['fromAx']),
            from_ay=to_unprefixed_hex(args['fromAy']),
            from_eth_addr=str(to_big_int(args['fromEthAddress'])),
            to_ax=to_unprefixed_hex(args['toAx']),
            to_ay=to_unprefixed_hex(args['toAy']),
            to_eth_addr=str(to_big_int(args['toEthAddress'])),
            on_chain=decoded['onChain'],
        )

    def get_stats(self) -> dict[str, int]:
        """
        Get current processor statistics.

        Returns:
            Dictionary with event counters
        """
        return {
            'events_decoded': self.events_decoded,
            'events_ignored': self.events_ignored,
        }
