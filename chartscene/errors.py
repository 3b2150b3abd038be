from __future__ import annotations


class ChartSceneError(ValueError):
    """Base class for scene construction and encoding failures."""


class InvalidDimension(ChartSceneError):
    pass


class InvalidColor(ChartSceneError):
    pass


class InvalidAlignment(ChartSceneError):
    pass


class InconsistentColorList(ChartSceneError):
    pass
