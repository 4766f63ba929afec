"""
orderhash: Signature Normalizer

Canonicalizes ECDSA signatures to the 64-byte compact form (EIP-2098):
    compact = r || yParityAndS,  yParityAndS = s | (recoveryParam << 255)

The expanded 65-byte form is r || s || v with v in {0, 1, 27, 28}.
"""
import re
from dataclasses import dataclass

from ..core.errors import InvalidSignature, InvalidSignatureLength
from ..core.logger import get_logger
from .numeral import strip_hex_prefix

logger = get_logger("SignatureNormalizer")

COMPACT_SIGNATURE_BYTES = 64
EXPANDED_SIGNATURE_BYTES = 65

_HEX_PAYLOAD = re.compile(r"[0-9A-Fa-f]*")


@dataclass(frozen=True)
class SignatureParts:
    r: str                  # 0x + 32 bytes
    s: str                  # 0x + 32 bytes, high bit clear
    v: int                  # 27 or 28
    recovery_param: int     # 0 or 1
    y_parity_and_s: str     # 0x + 32 bytes

    @property
    def compact(self) -> str:
        return self.r + self.y_parity_and_s[2:]

    @property
    def serialized(self) -> str:
        """Expanded 65-byte form."""
        return self.r + self.s[2:] + format(self.v, "02x")


def _signature_bytes(signature: str) -> bytes:
    payload = strip_hex_prefix(signature)
    if len(payload) not in (2 * COMPACT_SIGNATURE_BYTES, 2 * EXPANDED_SIGNATURE_BYTES):
        raise InvalidSignatureLength(len(payload))
    if not _HEX_PAYLOAD.fullmatch(payload):
        raise InvalidSignature(f"Signature is not a hex byte string: {signature!r}")
    return bytes.fromhex(payload)


def split_signature(signature: str) -> SignatureParts:
    """
    Split a 64- or 65-byte signature into its components.

    Raises:
        InvalidSignatureLength: Payload is neither 64 nor 65 bytes.
        InvalidSignature: Bad v byte, or s with the high bit set (65-byte form).
    """
    raw = _signature_bytes(signature)
    r = raw[:32]

    if len(raw) == COMPACT_SIGNATURE_BYTES:
        y_parity_and_s = raw[32:64]
        recovery_param = y_parity_and_s[0] >> 7
        s = bytes([y_parity_and_s[0] & 0x7F]) + y_parity_and_s[1:]
        v = 27 + recovery_param
    else:
        v = raw[64]
        if v < 27:
            if v not in (0, 1):
                raise InvalidSignature(f"Invalid v byte: {v}")
            v += 27
        elif v not in (27, 28):
            raise InvalidSignature(f"Invalid v byte: {v}")
        recovery_param = v - 27

        s = raw[32:64]
        if s[0] & 0x80:
            raise InvalidSignature("Signature s out of range (high bit set)")
        high = s[0] | 0x80 if recovery_param else s[0]
        y_parity_and_s = bytes([high]) + s[1:]

    return SignatureParts(
        r="0x" + r.hex(),
        s="0x" + s.hex(),
        v=v,
        recovery_param=recovery_param,
        y_parity_and_s="0x" + y_parity_and_s.hex(),
    )


def compact_signature(signature: str) -> str:
    """
    Return the 64-byte compact form of a signature.
    Compact input is returned unchanged.
    """
    raw = _signature_bytes(signature)
    if len(raw) == COMPACT_SIGNATURE_BYTES:
        return signature

    compact = split_signature(signature).compact
    logger.debug("signature_compacted", compact=compact)
    return compact
