from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List
import json
import logging
import secrets

from jinja2 import Environment
from plotly.utils import PlotlyJSONEncoder

from .config import RuntimeLocation
from .options import AxisOptions, Corner
from .plot import Plot
from .series import Series

if TYPE_CHECKING:
    from .page import Page

logger = logging.getLogger(__name__)

__all__ = [
    "JsCode",
    "series_config",
    "plot_options",
    "dumps",
    "encode_page",
]


@dataclass(frozen=True)
class JsCode:
    """JavaScript emitted verbatim in place of a JSON value."""
    code: str


# ---------- Series / plot configuration ----------

def series_config(series: Series) -> Dict[str, Any]:
    entry: Dict[str, Any] = {
        "label": series.label,
        "data": [[x, y] for x, y in series.data],
    }
    entry.update(series.style.model_dump(mode="json", exclude_none=True))
    kind_opts = series.options.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"kind"})
    entry[series.kind] = {"show": True, **kind_opts}
    return entry


def plot_options(plot: Plot) -> Dict[str, Any]:
    opts = plot.options
    L: Dict[str, Any] = {}

    if opts.legend.position == Corner.none:
        L["legend"] = {"show": False}
    else:
        L["legend"] = {"show": True, "position": opts.legend.position.value}

    if opts.xaxes: L["xaxes"] = [_axis_config(a) for a in opts.xaxes]
    if opts.yaxes: L["yaxes"] = [_axis_config(a) for a in opts.yaxes]

    grid = opts.grid.model_dump(mode="json", by_alias=True, exclude_none=True)
    if grid: L["grid"] = grid

    # set_option() passthrough wins over everything above
    for key, sub in opts.extra.items():
        current = L.get(key)
        L[key] = {**current, **sub} if isinstance(current, dict) else dict(sub)
    return L


def _axis_config(axis: AxisOptions) -> Dict[str, Any]:
    A = axis.model_dump(
        mode="json", by_alias=True, exclude_none=True,
        exclude={"transform", "inverse_transform", "label_prefix", "label_suffix", "extra"},
    )
    if axis.transform is not None:
        A["transform"] = JsCode(f"function (v) {{ return {axis.transform}; }}")
    if axis.inverse_transform is not None:
        A["inverseTransform"] = JsCode(f"function (v) {{ return {axis.inverse_transform}; }}")
    if axis.label_prefix is not None or axis.label_suffix is not None:
        pre = _script_safe(json.dumps(axis.label_prefix or ""))
        post = _script_safe(json.dumps(axis.label_suffix or ""))
        A["tickFormatter"] = JsCode(
            f"function (v, axis) {{ return {pre} + v.toFixed(axis.tickDecimals) + {post}; }}"
        )
    A.update(axis.extra)
    return A


# ---------- JSON ----------

_JS_SENTINEL = "__flot_js_{}_{}__"


def _script_safe(text: str) -> str:
    return text.replace("<", "\\u003c").replace(">", "\\u003e").replace("/", "\\/")


def dumps(obj: Any) -> str:
    """
    Compact JSON safe to embed in a <script> element.

    Numbers keep full float precision; NaN/Infinity become null. JsCode
    values are spliced in as raw JavaScript after encoding.
    """
    snippets: List[str] = []
    # placeholders carry a per-call token
    token = secrets.token_hex(8)

    def _swap(o: Any) -> Any:
        if isinstance(o, JsCode):
            snippets.append(o.code)
            return _JS_SENTINEL.format(token, len(snippets) - 1)
        if isinstance(o, dict):
            return {k: _swap(v) for k, v in o.items()}
        if isinstance(o, (list, tuple)):
            return [_swap(v) for v in o]
        return o

    text = json.dumps(_swap(obj), cls=PlotlyJSONEncoder, separators=(",", ":"))
    text = _script_safe(text)
    for i, code in enumerate(snippets):
        text = text.replace(json.dumps(_JS_SENTINEL.format(token, i)), code, 1)
    return text


# ---------- Document ----------

_PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta http-equiv="Content-Type" content="text/html; charset=utf-8">
<title>{{ title or "Flot Plots" }}</title>
{% for src in scripts %}
<script language="javascript" type="text/javascript" src="{{ src }}"></script>
{% endfor %}
</head>
<body>
{% if title %}
<h1>{{ title }}</h1>
{% endif %}
{% for plot in plots %}
<div class="flot-plot">
{% if plot.title %}
<h3 style="text-align:center">{{ plot.title }}</h3>
{% endif %}
<div id="{{ plot.id }}" style="width:{{ plot.width }}px;height:{{ plot.height }}px"></div>
{% if plot.text %}
<p>{{ plot.text }}</p>
{% endif %}
</div>
{% endfor %}
<script type="text/javascript">
$(function () {
{% for plot in plots %}
var {{ plot.id }}_series = {{ plot.series_json|safe }};
var {{ plot.id }}_options = {{ plot.options_json|safe }};
$.plot($("#{{ plot.id }}"), {{ plot.id }}_series, {{ plot.id }}_options);
{% endfor %}
});
</script>
</body>
</html>
"""

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True)
_template = _env.from_string(_PAGE_TEMPLATE)


def _scripts(plots: List[Plot], runtime: RuntimeLocation) -> List[str]:
    scripts = [runtime.jquery(), runtime.flot()]
    if any(p.uses_time for p in plots):
        scripts.append(runtime.flot("jquery.flot.time.min.js"))
    if any(p.uses_symbols for p in plots):
        scripts.append(runtime.flot("jquery.flot.symbol.min.js"))
    return scripts


def encode_page(page: "Page", runtime: RuntimeLocation) -> str:
    """Render the whole page to an HTML string. Reads the model, never mutates it."""
    plots = [
        {
            "id": p.placeholder,
            "title": p.title,
            "width": p.options.width,
            "height": p.options.height,
            "text": p.description,
            "series_json": dumps([series_config(s) for s in p.series]),
            "options_json": dumps(plot_options(p)),
        }
        for p in page.plots
    ]
    html = _template.render(
        title=page.title,
        scripts=_scripts(page.plots, runtime),
        plots=plots,
    )
    logger.debug("Encoded page %r: %d plots, %d chars", page.title, len(plots), len(html))
    return html
