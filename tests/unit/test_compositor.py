import sys
import unittest
from pathlib import Path

try:  # pragma: no cover
    import cairosvg
except Exception:  # pragma: no cover
    cairosvg = None

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "highlight"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from snapglyph_renderer import BackgroundSpec, IconCompositor, RenderSettings, SnippetCompositor, SourceNotFound

SQUARE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">'
    '<rect x="0" y="0" width="24" height="24" fill="#ff0000"/></svg>'
)


class SnippetCompositorTests(unittest.TestCase):
    def setUp(self):
        self.compositor = SnippetCompositor()
        self.settings = RenderSettings(theme="amoled")
        self.text = "const x = 1;\n"

    def test_surface_matches_layout(self):
        layout = self.compositor.layout(self.text, self.settings)
        image = self.compositor.render_image(self.text, self.settings)
        self.assertEqual(layout.line_count, 2)
        self.assertEqual([label for label, _ in layout.gutter_labels], ["1", "2"])
        self.assertEqual(image.size, layout.surface_size)
        self.assertEqual(image.mode, "RGB")

    def test_background_and_content_box(self):
        layout = self.compositor.layout(self.text, self.settings)
        image = self.compositor.render_image(self.text, self.settings)
        corner = image.getpixel((0, 0))
        for got, want in zip(corner, (0x66, 0x7E, 0xEA)):
            self.assertLessEqual(abs(got - want), 2)
        left, top, right, bottom = layout.content_rect
        inside = (int((left + right) / 2), int(bottom) - 10)
        self.assertEqual(image.getpixel(inside), (0, 0, 0))

    def test_window_dots(self):
        image = self.compositor.render_image(self.text, self.settings)
        self.assertEqual(image.getpixel((112, 112)), (0xEF, 0x44, 0x44))
        self.assertEqual(image.getpixel((144, 112)), (0xEA, 0xB3, 0x08))
        self.assertEqual(image.getpixel((176, 112)), (0x22, 0xC5, 0x5E))

    def test_gutter_and_code_are_painted(self):
        layout = self.compositor.layout(self.text, self.settings)
        image = self.compositor.render_image(self.text, self.settings)
        left = layout.padding
        y = layout.code_start_y
        gutter = image.crop((int(left), int(y), int(left + layout.line_number_gutter_width - 2), int(y + layout.line_height)))
        self.assertIsNotNone(gutter.getbbox())
        code = image.crop((int(layout.code_start_x), int(y), int(layout.code_start_x + 200), int(y + layout.line_height)))
        self.assertIsNotNone(code.getbbox())

    def test_transparent_background(self):
        settings = RenderSettings(background=BackgroundSpec.none())
        image = self.compositor.render_image("x", settings)
        self.assertEqual(image.mode, "RGBA")
        self.assertEqual(image.getpixel((0, 0))[3], 0)

    def test_render_is_deterministic(self):
        first = self.compositor.render_image(self.text, self.settings)
        second = self.compositor.render_image(self.text, self.settings)
        self.assertEqual(first.tobytes(), second.tobytes())

    def test_png_bytes(self):
        png = self.compositor.render_png(self.text, self.settings)
        self.assertTrue(png.startswith(b"\x89PNG\r\n\x1a\n"))


class IconCompositorTests(unittest.TestCase):
    def setUp(self):
        self.compositor = IconCompositor()
        self.settings = RenderSettings(
            icon_size=48, padding=16, corner_radius=12, background=BackgroundSpec.solid("#ffffff")
        )

    def test_surface_size(self):
        self.assertEqual(self.compositor.surface_size(self.settings), 160)

    def test_missing_document(self):
        with self.assertRaises(SourceNotFound):
            self.compositor.render_image(None, self.settings)
        with self.assertRaises(SourceNotFound):
            self.compositor.render_image("", self.settings)

    def test_icon_centered_in_rounded_tile(self):
        if cairosvg is None:
            self.skipTest("cairosvg not available")
        image = self.compositor.render_image(SQUARE_SVG, self.settings)
        self.assertEqual(image.size, (160, 160))
        self.assertEqual(image.getpixel((80, 80)), (255, 0, 0, 255))
        self.assertEqual(image.getpixel((10, 80)), (255, 255, 255, 255))
        self.assertEqual(image.getpixel((0, 0))[3], 0)

    def test_icon_without_background(self):
        if cairosvg is None:
            self.skipTest("cairosvg not available")
        settings = RenderSettings(icon_size=48, padding=16, background=BackgroundSpec.none())
        image = self.compositor.render_image(SQUARE_SVG, settings)
        self.assertEqual(image.getpixel((10, 80))[3], 0)
        self.assertEqual(image.getpixel((80, 80)), (255, 0, 0, 255))


if __name__ == "__main__":
    unittest.main()
