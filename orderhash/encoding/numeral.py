"""
orderhash: Numeral Normalization

Every numeric input is classified into exactly one variant before it is
encoded. Ambiguous or malformed inputs are rejected here, never coerced.

Classification (frozen):
  - int                                   -> INTEGER
  - str with an 0x prefix or a hex letter -> HEX
  - str of decimal digits                 -> DECIMAL
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..core.errors import MalformedNumeral

NumeralInput = Union[int, str]

_HEX_HINT = re.compile(r"[A-Fa-fxX]")
_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]*")
_DECIMAL_DIGITS = re.compile(r"[0-9]+")


class NumeralKind(str, Enum):
    INTEGER = "INTEGER"
    DECIMAL = "DECIMAL"
    HEX = "HEX"


@dataclass(frozen=True)
class Numeral:
    """
    Tagged numeric input.
    For HEX, `text` is the lowercase payload without the 0x prefix and keeps
    any leading zeros the caller wrote.
    """
    kind: NumeralKind
    text: str
    value: int

    def to_int(self) -> int:
        return self.value

    def hex_payload(self) -> str:
        """Lowercase hex digits without prefix; no padding applied."""
        if self.kind == NumeralKind.HEX:
            return self.text
        return format(self.value, "x")


def strip_hex_prefix(text: str) -> str:
    if text[:2] in ("0x", "0X"):
        return text[2:]
    return text


def parse_numeral(value: NumeralInput) -> Numeral:
    """
    Classify and normalize a numeric input.

    Raises:
        MalformedNumeral: negative or boolean integers, non int/str types,
            empty strings, and strings that are neither decimal nor hex.
    """
    # bool is an int subclass; True/False are not amounts.
    if isinstance(value, bool):
        raise MalformedNumeral(f"Boolean is not a numeral: {value!r}")

    if isinstance(value, int):
        if value < 0:
            raise MalformedNumeral(f"Negative values cannot be encoded: {value}")
        return Numeral(NumeralKind.INTEGER, str(value), value)

    if not isinstance(value, str):
        raise MalformedNumeral(f"Unsupported numeral type: {type(value).__name__}")

    text = value.strip()
    if not text:
        raise MalformedNumeral("Empty string is not a numeral")

    if _HEX_HINT.search(text):
        payload = strip_hex_prefix(text)
        if not _HEX_DIGITS.fullmatch(payload):
            raise MalformedNumeral(f"Invalid hex numeral: {value!r}")
        payload = payload.lower()
        return Numeral(NumeralKind.HEX, payload, int(payload, 16) if payload else 0)

    if not _DECIMAL_DIGITS.fullmatch(text):
        raise MalformedNumeral(f"Invalid decimal numeral: {value!r}")
    return Numeral(NumeralKind.DECIMAL, text, int(text, 10))
