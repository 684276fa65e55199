import flot_viz_engine as flot
from flot_viz_engine import Page
from flot_viz_engine.config import FLOT_CDN, JQUERY_CDN


def test_lines_and_points(embedded):
    page = Page()
    p = page.plot()
    p.lines("lines", [(0.0, 1.0), (1.0, 4.5)]).fill(0.3).line_width(0)
    p.points("points", [(0.5, 1.2), (0.8, 4.0)]).symbol("circle")
    html = page.to_html()

    series, options = embedded(html)
    assert len(series) == 2
    lines, points = series
    assert lines["label"] == "lines"
    assert lines["data"] == [[0.0, 1.0], [1.0, 4.5]]
    assert lines["lines"]["show"] is True
    assert lines["lines"]["fill"] == 0.3
    assert lines["lines"]["lineWidth"] == 0
    assert points["label"] == "points"
    assert points["data"] == [[0.5, 1.2], [0.8, 4.0]]
    assert points["points"]["symbol"] == "circle"
    assert options["legend"] == {"show": True, "position": "ne"}
    assert f"{JQUERY_CDN}/jquery.min.js" in html
    assert f"{FLOT_CDN}/jquery.flot.min.js" in html


def test_bars_from_adapter(embedded):
    page = Page("Histogram")
    page.plot("Squares of Integers up to 9").bars("squares", flot.mapv(range(10), lambda x: x * x)).width(0.75)
    series, _ = embedded(page.to_html())
    assert series[0]["data"] == [[float(i), float(i * i)] for i in range(10)]
    assert series[0]["bars"]["barWidth"] == 0.75
