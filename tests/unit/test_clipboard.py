import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "highlight"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from snapglyph_core.clipboard import QtClipboard
from snapglyph_renderer import ClipboardUnavailable


class QtClipboardTests(unittest.TestCase):
    def test_without_application(self):
        with self.assertRaises(ClipboardUnavailable):
            QtClipboard().write_image(b"\x89PNG")


if __name__ == "__main__":
    unittest.main()
