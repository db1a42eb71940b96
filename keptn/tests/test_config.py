import os
import tempfile

# Set cache dir to a temp dir before importing anything from keptn
tmpdir = tempfile.mkdtemp()
os.environ["KEPTN_CACHE_DIR"] = tmpdir

import unittest

from keptn import config


class TestConfig(unittest.TestCase):
    def test_to_bool(self):
        for value in ["1", "true", "True", "on", "yes"]:
            self.assertTrue(config._to_bool(value))
        for value in ["0", "false", "off", "no", ""]:
            self.assertFalse(config._to_bool(value))
        with self.assertRaises(ValueError):
            config._to_bool("maybe")
        with self.assertRaises(TypeError):
            config._to_bool(1)

    def test_parse_timeout(self):
        self.assertIsNone(config._parse_timeout(None))
        self.assertIsNone(config._parse_timeout("0"))
        self.assertIsNone(config._parse_timeout("off"))
        self.assertIsNone(config._parse_timeout("-3"))
        self.assertEqual(config._parse_timeout("30"), 30.0)
        self.assertEqual(config._parse_timeout("2.5"), 2.5)

    def test_invalid_timeout_falls_back_to_none(self):
        self.assertIsNone(config._parse_timeout("soon"))


if __name__ == "__main__":
    unittest.main()
