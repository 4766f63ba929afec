import unittest
from orderhash.core.errors import InvalidSignature, InvalidSignatureLength
from orderhash.encoding.signature import compact_signature, split_signature

R = "11" * 32
S = "22" * 32

def expanded(v: int, s: str = S) -> str:
    return "0x" + R + s + format(v, "02x")

class TestCompactSignature(unittest.TestCase):
    def test_compact_passthrough(self):
        sig = "0x" + R + "A2" + "22" * 31
        # Returned unchanged, casing included
        self.assertIs(compact_signature(sig), sig)

    def test_even_parity(self):
        self.assertEqual(compact_signature(expanded(27)), "0x" + R + S)

    def test_odd_parity_sets_high_bit(self):
        self.assertEqual(compact_signature(expanded(28)), "0x" + R + "a2" + "22" * 31)

    def test_zero_one_v(self):
        self.assertEqual(compact_signature(expanded(0)), compact_signature(expanded(27)))
        self.assertEqual(compact_signature(expanded(1)), compact_signature(expanded(28)))

    def test_idempotence(self):
        for v in (0, 1, 27, 28):
            with self.subTest(v=v):
                once = compact_signature(expanded(v))
                self.assertEqual(compact_signature(once), once)
                self.assertEqual(len(once), 2 + 128)

    def test_invalid_lengths(self):
        for size in (0, 32, 63, 66, 130):
            with self.subTest(size=size):
                with self.assertRaises(InvalidSignatureLength) as ctx:
                    compact_signature("0x" + "ab" * size)
                self.assertEqual(ctx.exception.length, size)

    def test_length_error_is_invalid_signature(self):
        with self.assertRaises(InvalidSignature):
            compact_signature("0x1234")

    def test_odd_hex_digits_is_length_error(self):
        for digits in (127, 129, 131):
            with self.subTest(digits=digits):
                with self.assertRaises(InvalidSignatureLength) as ctx:
                    compact_signature("0x" + "a" * digits)
                self.assertEqual(ctx.exception.hex_digits, digits)

    def test_non_hex(self):
        with self.assertRaises(InvalidSignature) as ctx:
            compact_signature("0x" + "zz" * 65)
        self.assertNotIsInstance(ctx.exception, InvalidSignatureLength)

class TestSplitSignature(unittest.TestCase):
    def test_expanded_components(self):
        parts = split_signature(expanded(28))
        self.assertEqual(parts.r, "0x" + R)
        self.assertEqual(parts.s, "0x" + S)
        self.assertEqual(parts.v, 28)
        self.assertEqual(parts.recovery_param, 1)
        self.assertEqual(parts.y_parity_and_s, "0x" + "a2" + "22" * 31)

    def test_compact_components(self):
        parts = split_signature(compact_signature(expanded(28)))
        self.assertEqual(parts.s, "0x" + S)
        self.assertEqual(parts.v, 28)
        self.assertEqual(parts.serialized, expanded(28))

    def test_invalid_v(self):
        for v in (2, 26, 29, 37):
            with self.subTest(v=v):
                with self.assertRaises(InvalidSignature):
                    split_signature(expanded(v))

    def test_high_s_rejected(self):
        with self.assertRaises(InvalidSignature):
            split_signature(expanded(27, s="82" + "22" * 31))

if __name__ == '__main__':
    unittest.main()
