from __future__ import annotations
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError

from .errors import invalid_from_validation


# ---------- Enums ----------

class Corner(str, Enum):
    none = "none"
    top_right = "ne"
    top_left = "nw"
    bottom_right = "se"
    bottom_left = "sw"

class Side(str, Enum):
    right = "right"
    left = "left"
    bottom = "bottom"
    top = "top"

class Symbol(str, Enum):
    circle = "circle"
    square = "square"
    diamond = "diamond"
    triangle = "triangle"
    cross = "cross"

class BarAlign(str, Enum):
    left = "left"
    center = "center"
    right = "right"


# ---------- Base ----------

class _Options(BaseModel):
    # Field names are snake_case; aliases are Flot's option names.
    model_config = ConfigDict(validate_assignment=True, populate_by_name=True, extra="forbid")


def assign(model: BaseModel, **values: Any) -> None:
    """Validated attribute assignment; pydantic errors surface as InvalidArgument."""
    try:
        for key, value in values.items():
            setattr(model, key, value)
    except ValidationError as ve:
        raise invalid_from_validation(ve) from ve


# ---------- Series options ----------

Opacity = Annotated[float, Field(ge=0.0, le=1.0)]
NonNegative = Annotated[float, Field(ge=0.0)]

class SeriesStyle(_Options):
    color: Optional[str] = None
    xaxis: Optional[PositiveInt] = None
    yaxis: Optional[PositiveInt] = None

class LinesOptions(_Options):
    kind: Literal["lines"] = "lines"
    fill: Opacity = 0.0
    fill_color: Optional[str] = Field(None, alias="fillColor")
    line_width: NonNegative = Field(2.0, alias="lineWidth")
    steps: bool = False

class PointsOptions(_Options):
    kind: Literal["points"] = "points"
    symbol: Symbol = Symbol.circle
    radius: NonNegative = 3.0
    line_width: NonNegative = Field(2.0, alias="lineWidth")
    fill: Optional[Opacity] = None
    fill_color: Optional[str] = Field(None, alias="fillColor")

class BarsOptions(_Options):
    kind: Literal["bars"] = "bars"
    bar_width: float = Field(0.8, gt=0.0, alias="barWidth")
    align: BarAlign = BarAlign.left
    horizontal: bool = False
    line_width: NonNegative = Field(2.0, alias="lineWidth")
    fill: Optional[Opacity] = None
    fill_color: Optional[str] = Field(None, alias="fillColor")

SeriesOptions = Annotated[
    Union[LinesOptions, PointsOptions, BarsOptions],
    Field(discriminator="kind"),
]


# ---------- Plot options ----------

Tick = Union[float, Tuple[float, str]]

class LegendOptions(_Options):
    position: Corner = Corner.top_right

class AxisOptions(_Options):
    mode: Optional[Literal["time"]] = None
    min: Optional[float] = None
    max: Optional[float] = None
    position: Optional[Side] = None
    align_ticks_with_axis: Optional[PositiveInt] = Field(None, alias="alignTicksWithAxis")
    ticks: Optional[List[Tick]] = None
    # JS expressions over `v`; the encoder wraps them into functions
    transform: Optional[str] = None
    inverse_transform: Optional[str] = Field(None, alias="inverseTransform")
    label_prefix: Optional[str] = None
    label_suffix: Optional[str] = None
    # raw Flot axis options, merged over the fields above
    extra: Dict[str, Any] = Field(default_factory=dict)

class MarkingRange(_Options):
    start: float = Field(alias="from")
    end: float = Field(alias="to")

class Marking(_Options):
    xaxis: Optional[MarkingRange] = None
    yaxis: Optional[MarkingRange] = None
    color: Optional[str] = None
    line_width: Optional[NonNegative] = Field(None, alias="lineWidth")

class GridOptions(_Options):
    color: Optional[str] = None
    background_color: Optional[Union[str, Dict[str, List[str]]]] = Field(None, alias="backgroundColor")
    border_width: Optional[NonNegative] = Field(None, alias="borderWidth")
    border_color: Optional[str] = Field(None, alias="borderColor")
    hoverable: Optional[bool] = None
    clickable: Optional[bool] = None
    markings: Optional[List[Marking]] = None

class PlotOptions(_Options):
    width: PositiveInt = 800
    height: PositiveInt = 300
    legend: LegendOptions = Field(default_factory=LegendOptions)
    xaxes: List[AxisOptions] = Field(default_factory=list)
    yaxes: List[AxisOptions] = Field(default_factory=list)
    grid: GridOptions = Field(default_factory=GridOptions)
    extra: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
