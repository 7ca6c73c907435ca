import json
import logging
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "highlight"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from snapglyph_core.logging_setup import JsonFormatter


class JsonFormatterTests(unittest.TestCase):
    def test_event_fields(self):
        record = logging.LogRecord("snapglyph", logging.WARNING, __file__, 1, "icon export failed", None, None)
        record.event = "bulk_item_failed"
        record.item = "Star"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["level"], "WARNING")
        self.assertEqual(payload["msg"], "icon export failed")
        self.assertEqual(payload["event"], "bulk_item_failed")
        self.assertEqual(payload["item"], "Star")
        self.assertNotIn("exc", payload)

    def test_exception_included(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = logging.LogRecord("snapglyph", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
        payload = json.loads(JsonFormatter().format(record))
        self.assertIn("ValueError: bad", payload["exc"])


if __name__ == "__main__":
    unittest.main()
