"""
orderhash: Canonical Scalar Encoder

Fixed-width, left-zero-padded, big-endian hex encoding.
  - address: 20 bytes, EIP-55 checksum casing
  - key/word: 32 bytes
  - width 0: no padding

Values are never truncated. A payload wider than the target raises EncodingError.
"""
from eth_utils import to_checksum_address

from ..core.errors import EncodingError
from .numeral import NumeralInput, parse_numeral

ADDRESS_BYTES = 20
WORD_BYTES = 32


def to_hex(value: NumeralInput, num_bytes: int = 0) -> str:
    """
    Encode a numeral as a 0x-prefixed lowercase hex string.

    Hex strings keep their digits (including leading zeros) and are padded;
    integers and decimal numerals are converted first.
    """
    if num_bytes < 0:
        raise ValueError(f"num_bytes must be non-negative, got {num_bytes}")

    payload = parse_numeral(value).hex_payload()
    width = num_bytes * 2
    if num_bytes and len(payload) > width:
        raise EncodingError(
            f"Value {value!r} needs {(len(payload) + 1) // 2} bytes, exceeds width of {num_bytes}"
        )
    return "0x" + payload.rjust(width, "0")


def to_bn(value: NumeralInput) -> int:
    """Exact unsigned integer value of a numeral."""
    return parse_numeral(value).to_int()


def to_address(value: NumeralInput) -> str:
    return to_checksum_address(to_hex(value, ADDRESS_BYTES))


def to_key(value: NumeralInput) -> str:
    return to_hex(value, WORD_BYTES)


def to_word(value: NumeralInput, num_bytes: int = WORD_BYTES) -> bytes:
    """
    32-byte big-endian word holding `value` right-aligned.
    `num_bytes` is the declared width of the field and is enforced first.
    """
    payload = to_hex(value, num_bytes)[2:]
    raw = bytes.fromhex(payload)
    return raw.rjust(WORD_BYTES, b"\x00")
