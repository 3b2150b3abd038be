from __future__ import annotations

from dataclasses import asdict, dataclass
import os
from typing import Any, Mapping

GOOGLE_CHART_SERVICE = "http://chart.apis.google.com/chart"

DEFAULT_PLOT_WIDTH = 300
DEFAULT_PLOT_HEIGHT = 300
DEFAULT_FILL_COLOR = "ffffff"
DEFAULT_ANGLE = 0
DEFAULT_TEXT_SIZE = 12
DEFAULT_TEXT_COLOR = "000000"
DEFAULT_HALIGN = "left"
DEFAULT_VALIGN = "bottom"


@dataclass(frozen=True)
class ChartDefaults:
    """Process-wide encoder settings."""

    service_url: str = GOOGLE_CHART_SERVICE
    validate_colors: bool = True

    @classmethod
    def from_env(
        cls,
        *,
        service_env_var: str = "CHARTSCENE_SERVICE_URL",
        validate_env_var: str = "CHARTSCENE_VALIDATE_COLORS",
    ) -> "ChartDefaults":
        service_url = os.getenv(service_env_var, "").strip() or GOOGLE_CHART_SERVICE
        validate_colors = os.getenv(validate_env_var, "1").strip() != "0"
        return cls(service_url=service_url, validate_colors=validate_colors)


DEFAULT_CHART_DEFAULTS = ChartDefaults()


def validate_defaults(overrides: Mapping[str, Any] | None = None) -> ChartDefaults:
    """Merge overrides into the stock defaults, rejecting unknown keys."""

    raw: dict[str, Any] = asdict(DEFAULT_CHART_DEFAULTS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown chart setting: {key}")
            raw[key] = value

    if not isinstance(raw["service_url"], str) or not raw["service_url"].strip():
        raise ValueError("Setting `service_url` must be a non-empty string")
    if not isinstance(raw["validate_colors"], bool):
        raise ValueError("Setting `validate_colors` must be a bool")

    return ChartDefaults(
        service_url=raw["service_url"].strip(),
        validate_colors=raw["validate_colors"],
    )
