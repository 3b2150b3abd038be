from __future__ import annotations

from typing import Iterable, Sequence
from urllib.parse import quote_plus, unquote_plus

import numpy as np

from chartscene.colors import TRANSPARENT
from chartscene.elements import GraphicElement, Shape, Text
from chartscene.errors import InconsistentColorList
from chartscene.scales import pixel_to_relative, pixels_to_percent

CHART_TYPE = "cht=lxy"
# axes: 0=x, 1=y, both drawn with zero-width lines and no labels
AXIS_INHIBIT: tuple[str, str] = (
    "chxt=x,y",
    "chxs=0,000000,0,0,_|1,000000,0,0,_",
)
EMPTY_LINES = "0|0"
SHAPE_MARKER_TYPE = "B"
TEXT_MARKER_TYPE = "@t"


def escape_text(text: str) -> str:
    """Escape a label for the ``chm`` marker list.

    Commas separate marker fields, so literal commas get a backslash before
    the whole label is percent-encoded.
    """

    return quote_plus(text.replace(",", "\\,"))


def unescape_text(encoded: str) -> str:
    return unquote_plus(encoded).replace("\\,", ",")


def partition_elements(elements: Iterable[GraphicElement]) -> tuple[list[Shape], list[Text]]:
    shapes: list[Shape] = []
    texts: list[Text] = []
    for element in elements:
        if element.kind == "shape":
            shapes.append(element)  # type: ignore[arg-type]
        elif element.kind == "text":
            texts.append(element)  # type: ignore[arg-type]
        else:
            raise TypeError(f"unsupported element kind: {element.kind!r}")
    return shapes, texts


def encode_dimensions(width: int, height: int) -> str:
    return f"chs={width}x{height}"


def encode_line_colors(shapes: Sequence[Shape]) -> str:
    outline_colors = [s.outline_color for s in shapes]
    present = [c for c in outline_colors if c is not None]
    if not present:
        return f"chco={TRANSPARENT}"
    if len(present) != len(outline_colors):
        missing = [i for i, c in enumerate(outline_colors) if c is None]
        raise InconsistentColorList(
            f"outline_color must be set on every shape or on none; missing on shapes {missing}"
        )
    first = outline_colors[0]
    if all(c == first for c in outline_colors):
        return f"chco={first}"
    return "chco=" + "|".join(present)


def encode_lines(shapes: Sequence[Shape], width: int, height: int) -> str:
    shape_coords = "|".join(_encode_shape(s, width, height) for s in shapes)
    return "chd=t:" + (shape_coords if shape_coords else EMPTY_LINES)


def encode_markers(shapes: Sequence[Shape], texts: Sequence[Text], width: int, height: int) -> str:
    # unfilled shapes still get a marker so indices match the chd series
    markers = [
        f"{SHAPE_MARKER_TYPE},{s.fill_color or TRANSPARENT},{i},0,0" for i, s in enumerate(shapes)
    ]
    markers.extend(
        f"{TEXT_MARKER_TYPE}{escape_text(t.text)},{t.color},0,"
        f"{pixel_to_relative(t.origin_x, width)}:{pixel_to_relative(t.origin_y, height)},"
        f"{t.size},0,{t.alignment}"
        for t in texts
    )
    return "chm=" + "|".join(markers)


def encode_background(fill_color1: str, fill_color2: str | None, angle: float) -> str:
    if fill_color2 is None or fill_color1 == fill_color2:
        return f"chf=bg,s,{fill_color1}"
    return f"chf=bg,lg,{_format_angle(angle)},{fill_color1},0,{fill_color2},1"


def _encode_shape(shape: Shape, width: int, height: int) -> str:
    offsets = np.asarray(shape.points, dtype=np.float64).reshape(-1, 2)
    x_points = pixels_to_percent(offsets[:, 0] + shape.origin_x, width)
    y_points = pixels_to_percent(offsets[:, 1] + shape.origin_y, height)
    return ",".join(x_points) + "|" + ",".join(y_points)


def _format_angle(angle: float) -> str:
    if float(angle).is_integer():
        return str(int(angle))
    return repr(float(angle))
