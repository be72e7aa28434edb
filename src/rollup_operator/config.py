"""Configuration management for the rollup operator.

This module provides type-safe configuration dataclasses with validation for
batch submission. Configuration is loaded from environment variables (and a
``.env`` file when present) with sensible defaults where appropriate.
"""

import logging
import os
from dataclasses import dataclass, field
from urllib.parse import urlparse

from dotenv import load_dotenv
from web3 import Web3

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChainConfig:
    """Configuration for the chain hosting the rollup contract.

    Attributes:
        rpc_url: HTTP(S) RPC endpoint
        rollup_address: Checksummed address of the Rollup contract
    """

    rpc_url: str
    rollup_address: str

    def __post_init__(self) -> None:
        """Validate chain configuration."""
        if not self.rpc_url:
            raise ValueError("RPC URL is required (RPC_URL)")

        parsed = urlparse(self.rpc_url)
        if parsed.scheme not in ('http', 'https'):
            raise ValueError(
                f"Invalid RPC URL scheme: {parsed.scheme}. "
                "Expected http or https"
            )

        if not self.rollup_address:
            raise ValueError("Rollup contract address is required (ROLLUP_ADDRESS)")

        if not Web3.is_address(self.rollup_address):
            raise ValueError(f"Invalid rollup contract address: {self.rollup_address}")

        checksummed = Web3.to_checksum_address(self.rollup_address)
        if checksummed != self.rollup_address:
            # Use object.__setattr__ since dataclass is frozen
            object.__setattr__(self, 'rollup_address', checksummed)


@dataclass(frozen=True, slots=True)
class SubmissionConfig:
    """Configuration for forging batches on chain."""
    retry_count: int = 3  # extra attempts after the first one
    retry_delay_ms: int = 2000  # pause between attempts
    gas_limit: int = 3_000_000
    receipt_timeout: int = 120  # seconds to wait for a receipt

    def __post_init__(self) -> None:
        """Validate submission configuration."""
        if self.retry_count < 0:
            raise ValueError(f"Retry count must be non-negative, got {self.retry_count}")
        if self.retry_count > 10:
            raise ValueError(f"Retry count too high (max 10), got {self.retry_count}")

        if self.retry_delay_ms < 0:
            raise ValueError(f"Retry delay must be non-negative, got {self.retry_delay_ms}")
        if self.retry_delay_ms > 60_000:
            raise ValueError(f"Retry delay too long (max 60000ms), got {self.retry_delay_ms}")

        if self.gas_limit <= 0:
            raise ValueError(f"Gas limit must be positive, got {self.gas_limit}")

        if self.receipt_timeout <= 0:
            raise ValueError(f"Receipt timeout must be positive, got {self.receipt_timeout}")
        if self.receipt_timeout > 600:
            raise ValueError(f"Receipt timeout too long (max 600s), got {self.receipt_timeout}")


@dataclass(frozen=True, slots=True)
class OperatorConfig:
    """Main configuration for the rollup operator.

    Attributes:
        chain: Configuration for the rollup chain
        submission: Retry and gas settings for forging batches
        private_key: Key used to sign forge transactions (optional)
    """

    chain: ChainConfig
    submission: SubmissionConfig = field(default_factory=SubmissionConfig)
    private_key: str | None = None

    def __post_init__(self) -> None:
        """Validate operator configuration."""
        if self.private_key:
            key = self.private_key.removeprefix('0x')

            if len(key) != 64:
                raise ValueError(
                    f"Invalid private key length. Expected 64 hex characters, got {len(key)}"
                )

            try:
                int(key, 16)
            except ValueError:
                raise ValueError(
                    "Invalid private key format. Must be hexadecimal"
                ) from None

    @classmethod
    def from_env(cls) -> "OperatorConfig":
        """Load configuration from environment variables.

        Returns:
            OperatorConfig instance with loaded values

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        load_dotenv()

        chain = ChainConfig(
            rpc_url=os.environ.get("RPC_URL", ""),
            rollup_address=os.environ.get("ROLLUP_ADDRESS", ""),
        )

        submission = SubmissionConfig(
            retry_count=int(os.environ.get("RETRY_COUNT", "3")),
            retry_delay_ms=int(os.environ.get("RETRY_DELAY_MS", "2000")),
            gas_limit=int(os.environ.get("GAS_LIMIT", "3000000")),
            receipt_timeout=int(os.environ.get("RECEIPT_TIMEOUT", "120")),
        )

        return cls(
            chain=chain,
            submission=submission,
            private_key=os.environ.get("PRIVATE_KEY") or None,
        )

    def log_config(self) -> None:
        """Log the configuration in a readable format for debugging."""
        logger.info("=" * 60)
        logger.info("Rollup Operator Configuration")
        logger.info("=" * 60)

        logger.info("Chain:")
        logger.info(f"  RPC URL: {self.chain.rpc_url}")
        logger.info(f"  Rollup: {self.chain.rollup_address}")

        logger.info("Submission Settings:")
        logger.info(f"  Retry Count: {self.submission.retry_count}")
        logger.info(f"  Retry Delay: {self.submission.retry_delay_ms} ms")
        logger.info(f"  Gas Limit: {self.submission.gas_limit}")
        logger.info(f"  Receipt Timeout: {self.submission.receipt_timeout} seconds")

        logger.info(f"  Private Key: {'[SET]' if self.private_key else '[NOT SET]'}")
        logger.info("=" * 60)
