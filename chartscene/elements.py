from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal

from chartscene.adapters.normalize import Point, normalize_points
from chartscene.colors import validate_hex_color, validate_optional_hex_color
from chartscene.config import (
    DEFAULT_HALIGN,
    DEFAULT_TEXT_COLOR,
    DEFAULT_TEXT_SIZE,
    DEFAULT_VALIGN,
    ChartDefaults,
)
from chartscene.errors import InvalidAlignment

ElementKind = Literal["shape", "text"]
HAlign = Literal["left", "center", "right"]
VAlign = Literal["bottom", "middle", "top"]

HALIGN_CODES: dict[str, str] = {"left": "l", "center": "h", "right": "r"}
VALIGN_CODES: dict[str, str] = {"bottom": "b", "middle": "v", "top": "t"}


@dataclass(frozen=True)
class GraphicElement:
    """Anything that can be placed on a Plot at a pixel origin."""

    kind: ClassVar[ElementKind]

    origin_x: float
    origin_y: float

    def __post_init__(self) -> None:
        if type(self) is GraphicElement:
            raise TypeError("GraphicElement is abstract; use Shape or Text")


@dataclass(frozen=True)
class ShapeOptions:
    outline_color: str | None = None
    fill_color: str | None = None


@dataclass(frozen=True)
class Shape(GraphicElement):
    """A closed polygon.

    ``points`` are ``(dx, dy)`` offsets from the origin. The polygon is closed
    on construction: when the last point differs from the first, the first is
    appended again.
    """

    kind: ClassVar[ElementKind] = "shape"

    points: tuple[Point, ...] = ()
    outline_color: str | None = None
    fill_color: str | None = None
    validate_colors: bool | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "validate_colors", _resolve_color_validation(self.validate_colors))
        points = normalize_points(self.points)
        if points and points[0] != points[-1]:
            points = points + (points[0],)
        object.__setattr__(self, "points", points)
        object.__setattr__(
            self,
            "outline_color",
            validate_optional_hex_color(self.outline_color, field="Shape.outline_color", enabled=self.validate_colors),
        )
        object.__setattr__(
            self,
            "fill_color",
            validate_optional_hex_color(self.fill_color, field="Shape.fill_color", enabled=self.validate_colors),
        )

    @classmethod
    def from_options(
        cls,
        origin_x: float,
        origin_y: float,
        points: Any,
        options: ShapeOptions | None = None,
        *,
        validate_colors: bool | None = None,
    ) -> "Shape":
        opts = options or ShapeOptions()
        return cls(
            origin_x=origin_x,
            origin_y=origin_y,
            points=points,
            outline_color=opts.outline_color,
            fill_color=opts.fill_color,
            validate_colors=validate_colors,
        )


@dataclass(frozen=True)
class TextOptions:
    size: int = DEFAULT_TEXT_SIZE
    color: str = DEFAULT_TEXT_COLOR
    halign: HAlign = DEFAULT_HALIGN
    valign: VAlign = DEFAULT_VALIGN


@dataclass(frozen=True)
class Text(GraphicElement):
    """A text label anchored at its origin according to halign/valign."""

    kind: ClassVar[ElementKind] = "text"

    text: str = ""
    size: int = DEFAULT_TEXT_SIZE
    color: str = DEFAULT_TEXT_COLOR
    halign: HAlign = DEFAULT_HALIGN
    valign: VAlign = DEFAULT_VALIGN
    validate_colors: bool | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "validate_colors", _resolve_color_validation(self.validate_colors))
        if self.text is None:
            object.__setattr__(self, "text", "")
        if not isinstance(self.text, str):
            raise TypeError(f"Text.text must be a string, got {type(self.text).__name__}")
        if self.halign not in HALIGN_CODES:
            raise InvalidAlignment(f"Unsupported halign: {self.halign!r} (expected one of {sorted(HALIGN_CODES)})")
        if self.valign not in VALIGN_CODES:
            raise InvalidAlignment(f"Unsupported valign: {self.valign!r} (expected one of {sorted(VALIGN_CODES)})")
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise ValueError(f"Text.size must be a positive integer, got {self.size!r}")
        validate_hex_color(self.color, field="Text.color", enabled=self.validate_colors)

    @property
    def alignment(self) -> str:
        return HALIGN_CODES[self.halign] + VALIGN_CODES[self.valign]

    @classmethod
    def from_options(
        cls,
        origin_x: float,
        origin_y: float,
        text: str | None,
        options: TextOptions | None = None,
        *,
        validate_colors: bool | None = None,
    ) -> "Text":
        opts = options or TextOptions()
        return cls(
            origin_x=origin_x,
            origin_y=origin_y,
            text=text,  # type: ignore[arg-type]
            size=opts.size,
            color=opts.color,
            halign=opts.halign,
            valign=opts.valign,
            validate_colors=validate_colors,
        )


def _resolve_color_validation(flag: bool | None) -> bool:
    # unset means follow CHARTSCENE_VALIDATE_COLORS
    if flag is None:
        return ChartDefaults.from_env().validate_colors
    return flag
