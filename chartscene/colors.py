from __future__ import annotations

import re

from chartscene.errors import InvalidColor

TRANSPARENT = "ffffff00"

_HEX_COLOR = re.compile(r"^[0-9a-fA-F]{6}$")


def validate_hex_color(value: object, *, field: str, enabled: bool = True) -> str:
    if not enabled:
        return str(value)
    if not isinstance(value, str) or not _HEX_COLOR.match(value):
        raise InvalidColor(f"`{field}` must be a six-digit hex color (RRGGBB), got {value!r}")
    return value


def validate_optional_hex_color(value: object, *, field: str, enabled: bool = True) -> str | None:
    if value is None:
        return None
    return validate_hex_color(value, field=field, enabled=enabled)
