from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

from chartscene.colors import validate_hex_color, validate_optional_hex_color
from chartscene.config import (
    DEFAULT_ANGLE,
    DEFAULT_FILL_COLOR,
    DEFAULT_PLOT_HEIGHT,
    DEFAULT_PLOT_WIDTH,
    ChartDefaults,
)
from chartscene.elements import GraphicElement, Shape, Text
from chartscene.encode import (
    AXIS_INHIBIT,
    CHART_TYPE,
    encode_background,
    encode_dimensions,
    encode_line_colors,
    encode_lines,
    encode_markers,
    partition_elements,
)
from chartscene.errors import InvalidDimension

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotOptions:
    width: int = DEFAULT_PLOT_WIDTH
    height: int = DEFAULT_PLOT_HEIGHT
    fill_color1: str = DEFAULT_FILL_COLOR
    fill_color2: str | None = None
    angle: float = DEFAULT_ANGLE


class Plot:
    """Ordered display list of Shapes and Texts rendered onto one chart.

    Elements draw in the order they are added, so the last one added is on
    top. ``fill_color2`` turns the background into a linear gradient from
    ``fill_color1`` at ``angle`` degrees (0 is left to right).
    """

    def __init__(
        self,
        width: int = DEFAULT_PLOT_WIDTH,
        height: int = DEFAULT_PLOT_HEIGHT,
        fill_color1: str = DEFAULT_FILL_COLOR,
        fill_color2: str | None = None,
        angle: float = DEFAULT_ANGLE,
        *,
        defaults: ChartDefaults | None = None,
    ) -> None:
        self._defaults = defaults or ChartDefaults.from_env()
        self._width = _validate_dimension(width, "width")
        self._height = _validate_dimension(height, "height")
        enabled = self._defaults.validate_colors
        self._fill_color1 = validate_hex_color(fill_color1, field="Plot.fill_color1", enabled=enabled)
        self._fill_color2 = validate_optional_hex_color(fill_color2, field="Plot.fill_color2", enabled=enabled)
        if isinstance(angle, bool) or not isinstance(angle, (int, float)):
            raise ValueError(f"Plot.angle must be a number of degrees, got {angle!r}")
        self._angle = angle
        self._elements: list[GraphicElement] = []

    @classmethod
    def from_options(cls, options: PlotOptions | None = None, *, defaults: ChartDefaults | None = None) -> "Plot":
        opts = options or PlotOptions()
        return cls(
            width=opts.width,
            height=opts.height,
            fill_color1=opts.fill_color1,
            fill_color2=opts.fill_color2,
            angle=opts.angle,
            defaults=defaults,
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def fill_color1(self) -> str:
        return self._fill_color1

    @property
    def fill_color2(self) -> str | None:
        return self._fill_color2

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def elements(self) -> tuple[GraphicElement, ...]:
        return tuple(self._elements)

    def add_element(self, element: GraphicElement) -> "Plot":
        self._elements.append(element)
        LOGGER.debug("plot element added: type=%s index=%d", type(element).__name__, len(self._elements) - 1)
        return self

    def shape_elements(self) -> list[Shape]:
        return partition_elements(self._elements)[0]

    def text_elements(self) -> list[Text]:
        return partition_elements(self._elements)[1]

    def generate_uri(self) -> str:
        """Return a GET URI that renders this plot on the chart service."""

        shapes, texts = partition_elements(self._elements)
        uri = "&".join(
            [
                f"{self._defaults.service_url}?{CHART_TYPE}",
                encode_dimensions(self._width, self._height),
                *AXIS_INHIBIT,
                encode_line_colors(shapes),
                encode_lines(shapes, self._width, self._height),
                encode_markers(shapes, texts, self._width, self._height),
                encode_background(self._fill_color1, self._fill_color2, self._angle),
            ]
        )
        LOGGER.debug("plot encoded: shapes=%d texts=%d length=%d", len(shapes), len(texts), len(uri))
        return uri

    def generate_img_uri(self) -> str:
        """Attribute string for an IMG tag, e.g. ``f"<img {plot.generate_img_uri()} />"``."""

        return f'src="{self.generate_uri()}" width="{self._width}" height="{self._height}"'

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return (
            f"Plot(width={self._width}, height={self._height}, fill_color1={self._fill_color1!r}, "
            f"fill_color2={self._fill_color2!r}, angle={self._angle!r}, elements={len(self._elements)})"
        )


def build_plot(
    elements: Sequence[GraphicElement],
    options: PlotOptions | None = None,
    *,
    defaults: ChartDefaults | None = None,
) -> Plot:
    plot = Plot.from_options(options, defaults=defaults)
    for element in elements:
        plot.add_element(element)
    return plot


def _validate_dimension(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimension(f"Plot.{name} must be an integer number of pixels, got {value!r}")
    if value <= 0:
        raise InvalidDimension(f"Plot.{name} must be > 0, got {value}")
    return value
