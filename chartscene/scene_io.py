from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from chartscene.config import (
    DEFAULT_ANGLE,
    DEFAULT_FILL_COLOR,
    DEFAULT_HALIGN,
    DEFAULT_PLOT_HEIGHT,
    DEFAULT_PLOT_WIDTH,
    DEFAULT_TEXT_COLOR,
    DEFAULT_TEXT_SIZE,
    DEFAULT_VALIGN,
    ChartDefaults,
)
from chartscene.elements import HALIGN_CODES, VALIGN_CODES, GraphicElement, Shape, Text
from chartscene.plot import Plot, PlotOptions, build_plot

LOGGER = logging.getLogger(__name__)

_COLOR = {"type": "string", "pattern": "^[0-9a-fA-F]{6}$"}

SCENE_JSON_SCHEMA: dict[str, object] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Chart Scene",
    "type": "object",
    "properties": {
        "width": {"type": "integer", "minimum": 1},
        "height": {"type": "integer", "minimum": 1},
        "fill_color1": _COLOR,
        "fill_color2": _COLOR,
        "angle": {"type": "number"},
        "elements": {
            "type": "array",
            "items": {
                "oneOf": [
                    {
                        "type": "object",
                        "required": ["type", "x", "y", "points"],
                        "properties": {
                            "type": {"const": "shape"},
                            "x": {"type": "number"},
                            "y": {"type": "number"},
                            "points": {
                                "type": "array",
                                "items": {"type": "array", "items": {"type": "number"}, "minItems": 2, "maxItems": 2},
                            },
                            "outline_color": _COLOR,
                            "fill_color": _COLOR,
                        },
                    },
                    {
                        "type": "object",
                        "required": ["type", "x", "y"],
                        "properties": {
                            "type": {"const": "text"},
                            "x": {"type": "number"},
                            "y": {"type": "number"},
                            "text": {"type": "string"},
                            "size": {"type": "integer", "minimum": 1},
                            "color": _COLOR,
                            "halign": {"type": "string", "enum": list(HALIGN_CODES)},
                            "valign": {"type": "string", "enum": list(VALIGN_CODES)},
                        },
                    },
                ]
            },
        },
    },
}


def scene_schema() -> dict[str, object]:
    return json.loads(json.dumps(SCENE_JSON_SCHEMA))


def plot_from_dict(payload: Mapping[str, Any], *, defaults: ChartDefaults | None = None) -> Plot:
    defaults = defaults or ChartDefaults.from_env()
    options = PlotOptions(
        width=_coerce_whole(payload.get("width", DEFAULT_PLOT_WIDTH)),
        height=_coerce_whole(payload.get("height", DEFAULT_PLOT_HEIGHT)),
        fill_color1=str(payload.get("fill_color1") or DEFAULT_FILL_COLOR),
        fill_color2=_coerce_optional_str(payload.get("fill_color2")),
        angle=float(payload.get("angle", DEFAULT_ANGLE)),
    )

    raw_elements = payload.get("elements", [])
    if not isinstance(raw_elements, list):
        raise TypeError("`elements` must be a list when provided")

    elements: list[GraphicElement] = []
    for index, raw in enumerate(raw_elements):
        if not isinstance(raw, Mapping):
            raise TypeError(f"Element {index} must be a mapping")
        elements.append(_element_from_dict(raw, index=index, validate_colors=defaults.validate_colors))

    plot = build_plot(elements, options, defaults=defaults)
    LOGGER.debug("scene parsed: elements=%d width=%d height=%d", len(elements), plot.width, plot.height)
    return plot


def load_plot(scene_path: str | Path, *, defaults: ChartDefaults | None = None) -> Plot:
    scene = Path(scene_path)
    payload = json.loads(scene.read_text(encoding="utf-8"))
    if not isinstance(payload, Mapping):
        raise TypeError("Scene payload must be a JSON object")
    return plot_from_dict(payload, defaults=defaults)


def _element_from_dict(raw: Mapping[str, Any], *, index: int, validate_colors: bool) -> GraphicElement:
    kind = raw.get("type")
    if kind == "shape":
        return Shape(
            origin_x=float(raw["x"]),
            origin_y=float(raw["y"]),
            points=raw.get("points") or [],
            outline_color=_coerce_optional_str(raw.get("outline_color")),
            fill_color=_coerce_optional_str(raw.get("fill_color")),
            validate_colors=validate_colors,
        )
    if kind == "text":
        return Text(
            origin_x=float(raw["x"]),
            origin_y=float(raw["y"]),
            text=str(raw.get("text") or ""),
            size=_coerce_whole(raw.get("size", DEFAULT_TEXT_SIZE)),
            color=str(raw.get("color") or DEFAULT_TEXT_COLOR),
            halign=str(raw.get("halign") or DEFAULT_HALIGN),  # type: ignore[arg-type]
            valign=str(raw.get("valign") or DEFAULT_VALIGN),  # type: ignore[arg-type]
            validate_colors=validate_colors,
        )
    raise ValueError(f"Element {index} has unsupported type: {kind!r}")


def _coerce_whole(raw: Any) -> Any:
    # JSON numbers like 300.0 count as integers; anything else is left for validation
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    return raw


def _coerce_optional_str(raw: object) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return text if text else None
