from __future__ import annotations
from typing import Any, ClassVar, Iterable, Tuple, TypeVar, Union
import logging

from .adapters import Point, to_f64
from .options import (
    BarAlign, BarsOptions, LinesOptions, PointsOptions, SeriesOptions, SeriesStyle, Symbol, assign,
)

logger = logging.getLogger(__name__)

S = TypeVar("S", bound="Series")


class Series:
    """
    Envelope shared by every chart kind: label, owned points and style.

    The points are materialized once, here; the source iterable is consumed
    and never referenced again. Kind-specific options live on `options`
    and are only reachable through the subclass builders.
    """

    kind: ClassVar[str]

    def __init__(self, label: str, data: Iterable[Any], options: SeriesOptions):
        self.label = label
        self.data: Tuple[Point, ...] = tuple(to_f64(data))
        self.style = SeriesStyle()
        self.options = options
        logger.debug("%s series %r: %d points", self.kind, label, len(self.data))

    def color(self: S, color: str) -> S:
        assign(self.style, color=color)
        return self

    def xaxis(self: S, which: int) -> S:
        assign(self.style, xaxis=which)
        return self

    def yaxis(self: S, which: int) -> S:
        assign(self.style, yaxis=which)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r}, {len(self.data)} points)"


class Lines(Series):
    kind = "lines"
    options: LinesOptions

    def __init__(self, label: str, data: Iterable[Any]):
        super().__init__(label, data, LinesOptions())

    def fill(self, opacity: float) -> "Lines":
        """Fill below the line with the given opacity; 0 turns filling off."""
        assign(self.options, fill=opacity)
        return self

    def fill_color(self, color: str) -> "Lines":
        assign(self.options, fill_color=color)
        return self

    def line_width(self, width: float) -> "Lines":
        assign(self.options, line_width=width)
        return self

    def steps(self, enabled: bool = True) -> "Lines":
        assign(self.options, steps=enabled)
        return self


class Points(Series):
    kind = "points"
    options: PointsOptions

    def __init__(self, label: str, data: Iterable[Any]):
        super().__init__(label, data, PointsOptions())

    def symbol(self, name: Union[Symbol, str]) -> "Points":
        assign(self.options, symbol=name)
        return self

    def radius(self, size: float) -> "Points":
        assign(self.options, radius=size)
        return self

    def line_width(self, width: float) -> "Points":
        assign(self.options, line_width=width)
        return self

    def fill(self, opacity: float) -> "Points":
        assign(self.options, fill=opacity)
        return self

    def fill_color(self, color: str) -> "Points":
        assign(self.options, fill_color=color)
        return self


class Bars(Series):
    kind = "bars"
    options: BarsOptions

    def __init__(self, label: str, data: Iterable[Any]):
        super().__init__(label, data, BarsOptions())

    def width(self, width: float) -> "Bars":
        """Bar footprint as a fraction of one x-axis unit."""
        assign(self.options, bar_width=width)
        return self

    def align(self, align: Union[BarAlign, str]) -> "Bars":
        assign(self.options, align=align)
        return self

    def horizontal(self, enabled: bool = True) -> "Bars":
        assign(self.options, horizontal=enabled)
        return self

    def line_width(self, width: float) -> "Bars":
        assign(self.options, line_width=width)
        return self

    def fill(self, opacity: float) -> "Bars":
        assign(self.options, fill=opacity)
        return self

    def fill_color(self, color: str) -> "Bars":
        assign(self.options, fill_color=color)
        return self
