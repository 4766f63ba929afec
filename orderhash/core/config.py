"""
orderhash: Process Configuration

Built ONCE at startup from the environment and passed explicitly to whatever
needs it. Nothing else in the package reads os.environ.
"""
import hashlib
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_SEED_LABEL = "gas-report"

_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


def parse_flag(raw: Optional[str]) -> bool:
    """
    Boolean-like environment toggle.
    Unset, empty, 0, false, no and off are false; anything else is true.
    """
    if raw is None:
        return False
    return raw.strip().lower() not in _FALSE_VALUES


@dataclass(frozen=True)
class OrderHashConfig:
    """
    Immutable configuration for a process.
    """
    deterministic_random: bool = False      # REPORT_GAS
    seed_label: str = DEFAULT_SEED_LABEL    # Seed for the reproducible byte source
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "OrderHashConfig":
        env = os.environ if environ is None else environ
        return cls(
            deterministic_random=parse_flag(env.get("REPORT_GAS")),
            seed_label=env.get("ORDERHASH_SEED_LABEL") or DEFAULT_SEED_LABEL,
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )

    def config_hash(self) -> str:
        """Short fingerprint of the settings, for log correlation."""
        data = f"{self.deterministic_random}:{self.seed_label}"
        return hashlib.sha256(data.encode()).hexdigest()[:16]
