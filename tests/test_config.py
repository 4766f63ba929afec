import unittest
from orderhash.core.config import DEFAULT_SEED_LABEL, OrderHashConfig, parse_flag

class TestParseFlag(unittest.TestCase):
    def test_false_values(self):
        for raw in (None, "", "0", "false", "FALSE", "no", "off", " Off "):
            with self.subTest(raw=raw):
                self.assertFalse(parse_flag(raw))

    def test_true_values(self):
        for raw in ("1", "true", "yes", "on", "anything"):
            with self.subTest(raw=raw):
                self.assertTrue(parse_flag(raw))

class TestOrderHashConfig(unittest.TestCase):
    def test_defaults(self):
        config = OrderHashConfig.from_env({})
        self.assertFalse(config.deterministic_random)
        self.assertEqual(config.seed_label, DEFAULT_SEED_LABEL)
        self.assertEqual(config.log_level, "INFO")

    def test_from_env(self):
        config = OrderHashConfig.from_env({
            "REPORT_GAS": "true",
            "ORDERHASH_SEED_LABEL": "fixture",
            "LOG_LEVEL": "debug",
        })
        self.assertTrue(config.deterministic_random)
        self.assertEqual(config.seed_label, "fixture")
        self.assertEqual(config.log_level, "DEBUG")

    def test_gas_schedule_not_configurable(self):
        config = OrderHashConfig.from_env({"ORDERHASH_TX_BASE_GAS": "53000"})
        self.assertFalse(hasattr(config, "gas_schedule"))

    def test_config_hash(self):
        a = OrderHashConfig()
        b = OrderHashConfig()
        c = OrderHashConfig(deterministic_random=True)
        self.assertEqual(a.config_hash(), b.config_hash())
        self.assertNotEqual(a.config_hash(), c.config_hash())
        self.assertEqual(len(a.config_hash()), 16)

if __name__ == '__main__':
    unittest.main()
