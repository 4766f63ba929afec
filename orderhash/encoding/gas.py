"""
orderhash: Intrinsic Gas Estimator

execution gas = gas_used - (tx_base + zero_bytes * zero_byte + nonzero_bytes * nonzero_byte)

Separates the logic cost of a call from its fixed intrinsic cost.
Used for gas reporting only.
"""
import re
from dataclasses import dataclass

from ..core.errors import EncodingError, MalformedNumeral
from .numeral import NumeralInput, strip_hex_prefix
from .scalar import to_bn


@dataclass(frozen=True)
class GasSchedule:
    tx_base: int = 21_000
    zero_byte: int = 4
    nonzero_byte: int = 16


DEFAULT_GAS_SCHEDULE = GasSchedule()

_HEX_PAYLOAD = re.compile(r"[0-9A-Fa-f]*")


def call_data_bytes(call_data: str) -> bytes:
    payload = strip_hex_prefix(call_data)
    if len(payload) % 2:
        raise EncodingError(f"Call data has an odd number of hex digits: {len(payload)}")
    if not _HEX_PAYLOAD.fullmatch(payload):
        raise MalformedNumeral(f"Call data is not hex: {call_data!r}")
    return bytes.fromhex(payload)


def intrinsic_gas(call_data: str, schedule: GasSchedule = DEFAULT_GAS_SCHEDULE) -> int:
    data = call_data_bytes(call_data)
    zero_bytes = data.count(0)
    nonzero_bytes = len(data) - zero_bytes
    return schedule.tx_base + zero_bytes * schedule.zero_byte + nonzero_bytes * schedule.nonzero_byte


def execution_gas(
    call_data: str,
    gas_used: NumeralInput,
    schedule: GasSchedule = DEFAULT_GAS_SCHEDULE,
) -> int:
    """
    Gas spent on execution, excluding the intrinsic transaction cost.
    Can be negative if `gas_used` was under-reported.
    """
    return to_bn(gas_used) - intrinsic_gas(call_data, schedule)
