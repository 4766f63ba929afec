import unittest
from orderhash.core.errors import EncodingError, MalformedNumeral
from orderhash.encoding.gas import GasSchedule, execution_gas, intrinsic_gas

class TestIntrinsicGas(unittest.TestCase):
    def test_empty_call_data(self):
        self.assertEqual(intrinsic_gas("0x"), 21000)
        self.assertEqual(intrinsic_gas(""), 21000)

    def test_byte_partition(self):
        # 2 zero bytes, 3 non-zero bytes
        self.assertEqual(intrinsic_gas("0x0000010203"), 21000 + 2 * 4 + 3 * 16)

    def test_custom_schedule(self):
        schedule = GasSchedule(tx_base=100, zero_byte=1, nonzero_byte=10)
        self.assertEqual(intrinsic_gas("0x00ff", schedule), 111)

    def test_odd_length(self):
        with self.assertRaises(EncodingError):
            intrinsic_gas("0x123")

    def test_non_hex(self):
        with self.assertRaises(MalformedNumeral):
            intrinsic_gas("0xzz")

    def test_embedded_whitespace(self):
        for call_data in ("0x00  ff", "0x 00ff ", "0x00\tff\n"):
            with self.subTest(call_data=call_data):
                with self.assertRaises(MalformedNumeral):
                    intrinsic_gas(call_data)

class TestExecutionGas(unittest.TestCase):
    def test_reference_example(self):
        self.assertEqual(execution_gas("0x00ff", 21020), 0)

    def test_logic_cost(self):
        call_data = "0xa9059cbb" + "00" * 12 + "11" * 20
        intrinsic = 21000 + 12 * 4 + 24 * 16
        self.assertEqual(execution_gas(call_data, intrinsic + 30000), 30000)

    def test_gas_used_forms(self):
        self.assertEqual(execution_gas("0x00ff", "21020"), 0)
        self.assertEqual(execution_gas("0x00ff", "0x521c"), 0)

    def test_under_reported(self):
        self.assertEqual(execution_gas("0x", 20000), -1000)

if __name__ == '__main__':
    unittest.main()
