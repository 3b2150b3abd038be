from chartscene.config import ChartDefaults, validate_defaults
from chartscene.elements import GraphicElement, Shape, ShapeOptions, Text, TextOptions
from chartscene.encode import escape_text, unescape_text
from chartscene.errors import (
    ChartSceneError,
    InconsistentColorList,
    InvalidAlignment,
    InvalidColor,
    InvalidDimension,
)
from chartscene.plot import Plot, PlotOptions, build_plot
from chartscene.scales import pixel_to_percent, pixel_to_relative
from chartscene.scene_io import load_plot, plot_from_dict

__all__ = [
    "ChartDefaults",
    "ChartSceneError",
    "GraphicElement",
    "InconsistentColorList",
    "InvalidAlignment",
    "InvalidColor",
    "InvalidDimension",
    "Plot",
    "PlotOptions",
    "Shape",
    "ShapeOptions",
    "Text",
    "TextOptions",
    "build_plot",
    "escape_text",
    "load_plot",
    "pixel_to_percent",
    "pixel_to_relative",
    "plot_from_dict",
    "unescape_text",
    "validate_defaults",
]
