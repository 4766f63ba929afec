"""
orderhash: Error Kinds

Every error is fatal for the value that produced it. Encoding is a pure
transformation, so nothing here is ever retried.
"""


class EncodingError(ValueError):
    """Value does not fit the requested byte width."""


class MalformedNumeral(EncodingError):
    """Input is neither a decimal numeral nor a hex string."""


class InvalidSignature(ValueError):
    """Signature bytes cannot be split into r, s and v."""


class InvalidSignatureLength(InvalidSignature):
    """Signature is neither 64 nor 65 bytes."""

    def __init__(self, hex_digits: int):
        super().__init__(
            f"invalid signature length (must be 64 or 65 bytes), got {hex_digits} hex digits"
        )
        self.hex_digits = hex_digits
        self.length = hex_digits // 2
