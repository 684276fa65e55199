from __future__ import annotations
from typing import Any, Iterable, List, Optional, Tuple, Union
import logging

from .coerce import to_float
from .errors import InvalidArgument
from .options import (
    AxisOptions, Corner, GridOptions, Marking, MarkingRange, PlotOptions, Side, Symbol, assign,
)
from .series import Bars, Lines, Points, Series

logger = logging.getLogger(__name__)


class Axis:
    """Edits one entry of a plot's `xaxes`/`yaxes` list in place."""

    def __init__(self, axes: List[AxisOptions], which: int):
        if which < 1:
            raise InvalidArgument(f"axis numbers start at 1, got {which}")
        while len(axes) < which:
            axes.append(AxisOptions())
        self.options = axes[which - 1]

    def min(self, value: float) -> "Axis":
        assign(self.options, min=to_float(value))
        return self

    def max(self, value: float) -> "Axis":
        assign(self.options, max=to_float(value))
        return self

    def bounds(self, min: Optional[float] = None, max: Optional[float] = None) -> "Axis":
        """Set whichever of the two bounds is given; None leaves a bound as is."""
        if min is not None:
            self.min(min)
        if max is not None:
            self.max(max)
        return self

    def position(self, side: Union[Side, str]) -> "Axis":
        assign(self.options, position=side)
        if self.options.position == Side.right:
            assign(self.options, align_ticks_with_axis=1)
        return self

    def time(self) -> "Axis":
        """Interpret values as epoch milliseconds."""
        assign(self.options, mode="time")
        return self

    def tick_values(self, values: Iterable[Any]) -> "Axis":
        assign(self.options, ticks=[to_float(v) for v in values])
        return self

    def tick_values_and_labels(self, ticks: Iterable[Tuple[Any, str]]) -> "Axis":
        assign(self.options, ticks=[(to_float(v), str(label)) for v, label in ticks])
        return self

    def transform(self, expr: str, inverse: Optional[str] = None) -> "Axis":
        """JS expressions over `v`, e.g. "Math.log(v+0.0001)"."""
        assign(self.options, transform=expr, inverse_transform=inverse)
        return self

    def label_pre(self, text: str) -> "Axis":
        assign(self.options, label_prefix=text)
        return self

    def label_post(self, text: str) -> "Axis":
        assign(self.options, label_suffix=text)
        return self

    def set_option(self, key: str, value: Any) -> "Axis":
        """Raw Flot axis option, e.g. set_option("tickDecimals", 1)."""
        self.options.extra[key] = value
        return self


class Grid:
    def __init__(self, options: GridOptions):
        self.options = options

    def color(self, color: str) -> "Grid":
        assign(self.options, color=color)
        return self

    def background_color(self, color: str) -> "Grid":
        assign(self.options, background_color=color)
        return self

    def background_gradient(self, top: str, bottom: str) -> "Grid":
        assign(self.options, background_color={"colors": [top, bottom]})
        return self

    def border_width(self, width: float) -> "Grid":
        assign(self.options, border_width=width)
        return self

    def border_color(self, color: str) -> "Grid":
        assign(self.options, border_color=color)
        return self

    def hoverable(self, enabled: bool = True) -> "Grid":
        assign(self.options, hoverable=enabled)
        return self

    def clickable(self, enabled: bool = True) -> "Grid":
        assign(self.options, clickable=enabled)
        return self


class Markings:
    """Shaded areas and reference lines drawn on the grid."""

    def __init__(self, grid: GridOptions):
        if grid.markings is None:
            assign(grid, markings=[])
        self._markings = grid.markings

    def add(self, marking: Marking) -> "Markings":
        self._markings.append(marking)
        return self

    def vertical_area(self, x1: float, x2: float) -> "Markings":
        return self.add(Marking(xaxis=_span(x1, x2)))

    def horizontal_area(self, y1: float, y2: float) -> "Markings":
        return self.add(Marking(yaxis=_span(y1, y2)))

    def vertical_line(self, x: float) -> "Markings":
        return self.vertical_area(x, x)

    def horizontal_line(self, y: float) -> "Markings":
        return self.horizontal_area(y, y)

    def area(self, x1: float, x2: float, y1: float, y2: float) -> "Markings":
        return self.add(Marking(xaxis=_span(x1, x2), yaxis=_span(y1, y2)))

    def color(self, color: str) -> "Markings":
        """Color the most recently added marking."""
        if not self._markings:
            raise InvalidArgument("no marking to color; add one first")
        assign(self._markings[-1], color=color)
        return self

    def line_width(self, width: float) -> "Markings":
        if not self._markings:
            raise InvalidArgument("no marking to size; add one first")
        assign(self._markings[-1], line_width=width)
        return self


def _span(a: Any, b: Any) -> MarkingRange:
    return MarkingRange(start=to_float(a), end=to_float(b))


class Plot:
    """
    One chart area on a Page: ordered series plus plot-wide options.

    Create plots with `Page.plot()`; `placeholder` is the id of the element
    the chart is drawn into.
    """

    def __init__(self, placeholder: str, title: str = ""):
        self.placeholder = placeholder
        self.title = title
        self.series: List[Series] = []
        self.options = PlotOptions()
        self.description = ""
        self.symbols = False

    # Series factories

    def lines(self, label: str, data: Iterable[Any]) -> Lines:
        return self._add(Lines(label, data))

    def points(self, label: str, data: Iterable[Any]) -> Points:
        return self._add(Points(label, data))

    def bars(self, label: str, data: Iterable[Any]) -> Bars:
        return self._add(Bars(label, data))

    def _add(self, series):
        self.series.append(series)
        return series

    # Plot-wide options

    def size(self, width: int, height: int) -> "Plot":
        assign(self.options, width=width, height=height)
        return self

    def legend_pos(self, pos: Union[Corner, str]) -> "Plot":
        """Place the legend in a corner; Corner.none hides it."""
        assign(self.options.legend, position=pos)
        return self

    def extra_symbols(self) -> "Plot":
        """Load the symbol plugin even if no series asks for a non-circle marker."""
        self.symbols = True
        return self

    def text(self, text: str) -> "Plot":
        """Descriptive paragraph shown under the chart (HTML-escaped)."""
        self.description = text
        return self

    def set_option(self, key: str, subkey: str, value: Any) -> "Plot":
        """Raw Flot option `key.subkey`, merged over everything else."""
        self.options.extra.setdefault(key, {})[subkey] = value
        return self

    def xaxis(self, which: int = 1) -> Axis:
        return Axis(self.options.xaxes, which)

    def yaxis(self, which: int = 1) -> Axis:
        return Axis(self.options.yaxes, which)

    def yaxis2(self) -> Axis:
        return self.yaxis(2)

    def grid(self) -> Grid:
        return Grid(self.options.grid)

    def markings(self) -> Markings:
        return Markings(self.options.grid)

    # Derived flags consulted by the encoder

    @property
    def uses_time(self) -> bool:
        return any(a.mode == "time" for a in self.options.xaxes + self.options.yaxes)

    @property
    def uses_symbols(self) -> bool:
        return self.symbols or any(
            isinstance(s, Points) and s.options.symbol != Symbol.circle for s in self.series
        )

    def __repr__(self) -> str:
        return f"Plot({self.placeholder!r}, title={self.title!r}, series={len(self.series)})"
