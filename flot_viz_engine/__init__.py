
from .page import Page
from .plot import Plot, Axis, Grid, Markings
from .series import Series, Lines, Points, Bars
from .options import Corner, Side, Symbol, BarAlign
from .adapters import FloatRange, range, mapr, mapv, zip, to_f64, from_frame
from .coerce import to_float, to_epoch_ms
from .config import RuntimeLocation, resolve_runtime
from .encoder import JsCode, encode_page, series_config, plot_options
from .errors import FlotError, InvalidArgument, CoercionError, WriteError
