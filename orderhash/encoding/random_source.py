"""
orderhash: Random Byte Source

Two interchangeable strategies:
  - SecureByteSource: OS randomness (default, non-reproducible)
  - SeededByteSource: PRNG keyed by a label, reproducible across runs

The strategy is chosen ONCE at startup (byte_source_from_config) and passed
to callers. There is no module-level default.
"""
import random
import secrets
from abc import ABC, abstractmethod

from ..core.logger import get_logger

logger = get_logger("RandomByteSource")


class RandomByteSource(ABC):
    """
    Generates random bytes as lowercase hex.
    """
    @abstractmethod
    def random_bytes(self, n: int) -> str:
        """Returns 2n lowercase hex characters."""
        pass

    def random_hex(self, num_bytes: int = 32) -> str:
        return "0x" + self.random_bytes(num_bytes)

    def random_bn(self, num_bytes: int = 16) -> int:
        return int(self.random_bytes(num_bytes) or "0", 16)

    def random_128(self) -> int:
        return self.random_bn(16)


class SecureByteSource(RandomByteSource):
    def random_bytes(self, n: int) -> str:
        return secrets.token_hex(n)


class SeededByteSource(RandomByteSource):
    """
    Wrapper around random.Random seeded with a text label.
    String seeds are hashed with SHA-512 by random.Random, so the sequence
    does not depend on PYTHONHASHSEED.
    """
    def __init__(self, label: str = "gas-report"):
        self._label = label
        self._rng = random.Random(label)

    def random_bytes(self, n: int) -> str:
        return self._rng.randbytes(n).hex()

    def get_label(self) -> str:
        return self._label


def byte_source_from_config(config) -> RandomByteSource:
    """
    Select the byte source for this process.
    `config` is an OrderHashConfig (deterministic_random, seed_label).
    """
    if config.deterministic_random:
        source = SeededByteSource(config.seed_label)
        logger.info("byte_source_selected", mode="deterministic", seed_label=config.seed_label)
    else:
        source = SecureByteSource()
        logger.info("byte_source_selected", mode="secure")
    return source
