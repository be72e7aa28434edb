#!/usr/bin/env python3
"""Entry point for the rollup operator command line tool.

Encodes values and proofs into verifier calldata and forges batches on the
Rollup contract.
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level: int = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

logger = logging.getLogger(__name__)

from rollup_operator.config import OperatorConfig
from rollup_operator.proof_manager import ProofManager, build_proof_call
from rollup_operator.utils.contract_utility import ContractUtility
from rollup_operator.utils.hex_codec import ConversionError, pad256


def load_proof(path: str) -> dict:
    """Read a prover JSON file."""
    with Path(path).open() as file:
        return json.load(file)


async def forge(proof_path: str) -> None:
    """Submit a forge transaction for the proof in ``proof_path``."""
    config = OperatorConfig.from_env()
    config.log_config()

    contract_util = ContractUtility(config.chain.rpc_url, config.private_key)
    manager = ProofManager(contract_util, config.chain.rollup_address, config.submission)

    call = manager.build_call(load_proof(proof_path))
    tx_hash = await manager.forge_batch(call)
    print(tx_hash)


async def main() -> None:
    """Main entry point for the rollup operator tool."""
    parser = argparse.ArgumentParser(
        description="Rollup operator - verifier calldata tooling",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Environment Variables (forge):
  RPC_URL          - RPC endpoint of the rollup chain
  ROLLUP_ADDRESS   - Rollup contract address
  PRIVATE_KEY      - Key used to sign forge transactions (optional)
  RETRY_COUNT      - Extra forge attempts (default: 3)
  RETRY_DELAY_MS   - Pause between attempts (default: 2000)
  LOG_LEVEL        - Logging level (can be overridden with --log-level)
        """
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: INFO)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    pad_parser = subparsers.add_parser("pad256", help="Encode a value as 256-bit hex")
    pad_parser.add_argument("value", help="Decimal or 0x-prefixed hex value")

    encode_parser = subparsers.add_parser("encode-proof", help="Print the verifier call for a proof")
    encode_parser.add_argument("proof", help="Path to the prover JSON output")

    forge_parser = subparsers.add_parser("forge", help="Submit forgeBatch for a proof")
    forge_parser.add_argument("proof", help="Path to the prover JSON output (with publicInputs)")

    args = parser.parse_args()
    setup_logging(args.log_level)

    try:
        match args.command:
            case "pad256":
                print(pad256(args.value))
            case "encode-proof":
                call = build_proof_call(load_proof(args.proof))
                print(json.dumps(call.to_dict(), indent=2))
            case "forge":
                await forge(args.proof)
    except ConversionError as e:
        logger.error(f"Conversion Error: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid Input: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"File Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Received interrupt signal, shutting down...")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
