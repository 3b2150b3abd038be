from __future__ import annotations

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from chartscene import ChartDefaults, InvalidAlignment, InvalidDimension, Plot, Shape, Text, validate_defaults
from chartscene.config import DEFAULT_CHART_DEFAULTS, GOOGLE_CHART_SERVICE
from chartscene.scene_io import load_plot, plot_from_dict, scene_schema
import main as cli

_SCENE = {
    "width": 300,
    "height": 300,
    "fill_color2": "ffffcc",
    "elements": [
        {
            "type": "shape",
            "x": 150,
            "y": 150,
            "points": [[-130, -130], [130, -130], [130, 130], [-130, 130]],
            "fill_color": "ccccff",
        },
        {"type": "text", "x": 148, "y": 148, "text": "hello, world!", "color": "ffffff", "size": 40,
         "halign": "center", "valign": "middle"},
        {"type": "text", "x": 150, "y": 150, "text": "hello, world!", "size": 40,
         "halign": "center", "valign": "middle"},
    ],
}


class SceneIoTests(unittest.TestCase):
    def test_plot_from_dict_builds_elements_in_order(self) -> None:
        plot = plot_from_dict(_SCENE)
        self.assertIsInstance(plot, Plot)
        self.assertEqual(plot.fill_color2, "ffffcc")
        kinds = [type(e) for e in plot.elements]
        self.assertEqual(kinds, [Shape, Text, Text])
        shape = plot.elements[0]
        assert isinstance(shape, Shape)
        self.assertEqual(shape.points[0], shape.points[-1])
        self.assertEqual(plot.elements[1].color, "ffffff")  # type: ignore[union-attr]
        self.assertEqual(plot.elements[2].color, "000000")  # type: ignore[union-attr]

    def test_plot_from_dict_defaults(self) -> None:
        plot = plot_from_dict({})
        self.assertEqual((plot.width, plot.height, plot.fill_color1), (300, 300, "ffffff"))
        self.assertEqual(len(plot), 0)

    def test_rejects_unknown_element_type(self) -> None:
        with self.assertRaisesRegex(ValueError, "unsupported type"):
            plot_from_dict({"elements": [{"type": "circle", "x": 0, "y": 0}]})

    def test_rejects_non_list_elements(self) -> None:
        with self.assertRaisesRegex(TypeError, "must be a list"):
            plot_from_dict({"elements": {"type": "text"}})

    def test_rejects_fractional_numbers_instead_of_truncating(self) -> None:
        with self.assertRaises(InvalidDimension):
            plot_from_dict({"width": 300.9})
        with self.assertRaisesRegex(ValueError, "Text.size"):
            plot_from_dict({"elements": [{"type": "text", "x": 0, "y": 0, "size": 12.7}]})

    def test_whole_floats_are_accepted_as_integers(self) -> None:
        plot = plot_from_dict({"width": 300.0, "elements": [{"type": "text", "x": 0, "y": 0, "size": 14.0}]})
        self.assertEqual(plot.width, 300)
        self.assertEqual(plot.elements[0].size, 14)  # type: ignore[union-attr]

    def test_propagates_alignment_errors(self) -> None:
        with self.assertRaises(InvalidAlignment):
            plot_from_dict({"elements": [{"type": "text", "x": 0, "y": 0, "halign": "justify"}]})

    def test_load_plot_reads_json_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scene.json"
            path.write_text(json.dumps(_SCENE), encoding="utf-8")
            plot = load_plot(path)
        self.assertEqual(plot.generate_uri(), plot_from_dict(_SCENE).generate_uri())

    def test_load_plot_rejects_non_object(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scene.json"
            path.write_text("[]", encoding="utf-8")
            with self.assertRaisesRegex(TypeError, "JSON object"):
                load_plot(path)

    def test_scene_schema_returns_copy(self) -> None:
        schema = scene_schema()
        schema["title"] = "changed"
        self.assertEqual(scene_schema()["title"], "Chart Scene")


class ChartDefaultsTests(unittest.TestCase):
    def test_validate_defaults_without_overrides(self) -> None:
        self.assertEqual(validate_defaults(), DEFAULT_CHART_DEFAULTS)
        self.assertEqual(DEFAULT_CHART_DEFAULTS.service_url, GOOGLE_CHART_SERVICE)

    def test_validate_defaults_accepts_override(self) -> None:
        defaults = validate_defaults({"validate_colors": False})
        self.assertEqual(defaults, ChartDefaults(validate_colors=False))

    def test_validate_defaults_rejects_unknown_key(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown chart setting"):
            validate_defaults({"colour": "red"})

    def test_validate_defaults_rejects_blank_service_url(self) -> None:
        with self.assertRaisesRegex(ValueError, "service_url"):
            validate_defaults({"service_url": "  "})


class CliTests(unittest.TestCase):
    def _run(self, *argv: str) -> str:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            cli.main(list(argv))
        return out.getvalue().strip()

    def test_encode_prints_uri(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scene.json"
            path.write_text(json.dumps(_SCENE), encoding="utf-8")
            uri = self._run("encode", str(path), "--service-url", "https://charts.example.test/chart")
        self.assertTrue(uri.startswith("https://charts.example.test/chart?cht=lxy&chs=300x300&"))
        self.assertIn("chf=bg,lg,0,ffffff,0,ffffcc,1", uri)

    def test_encode_img_prints_attributes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scene.json"
            path.write_text(json.dumps({"width": 120, "height": 80}), encoding="utf-8")
            attrs = self._run("encode", str(path), "--img")
        self.assertTrue(attrs.startswith('src="'))
        self.assertTrue(attrs.endswith('width="120" height="80"'))

    def test_schema_command(self) -> None:
        self.assertEqual(json.loads(self._run("schema"))["title"], "Chart Scene")


if __name__ == "__main__":
    unittest.main()
