import io

import pytest

from flot_viz_engine import Page, WriteError, resolve_runtime
from flot_viz_engine.config import FLOT_CDN, FLOT_ENV_VAR, JQUERY_CDN


def _page():
    page = Page("Report")
    page.plot("p").lines("l", [(0, 1), (1, 4.5)]).fill(0.3)
    return page


def test_render_to_path_and_again(tmp_path):
    page = _page()
    out = tmp_path / "page.html"
    page.render(out)
    first = out.read_text(encoding="utf-8")
    assert first == page.to_html()
    page.render(str(out))
    assert out.read_text(encoding="utf-8") == first


def test_render_to_text_sink():
    buf = io.StringIO()
    _page().render(buf)
    assert buf.getvalue().startswith("<!DOCTYPE html>")


def test_write_failure_surfaces_as_write_error(tmp_path):
    target = tmp_path / "missing" / "page.html"
    with pytest.raises(WriteError) as ei:
        _page().render(target)
    assert isinstance(ei.value, OSError)
    assert ei.value.destination == target
    assert isinstance(ei.value.__cause__, OSError)


def test_default_runtime_is_pinned_cdn():
    rt = resolve_runtime()
    assert rt.jquery() == f"{JQUERY_CDN}/jquery.min.js"
    assert rt.flot() == f"{FLOT_CDN}/jquery.flot.min.js"
    assert "3.2.1" in rt.jquery() and "0.8.3" in rt.flot()


def test_runtime_resolution_order(monkeypatch):
    monkeypatch.setenv(FLOT_ENV_VAR, "/opt/flot")
    assert resolve_runtime().flot_base == "file:///opt/flot"
    assert resolve_runtime("https://example.org/flot/").jquery() == "https://example.org/flot/jquery.min.js"
    assert resolve_runtime("vendor/flot").flot() == "vendor/flot/jquery.flot.min.js"


def test_env_override_changes_only_script_references(monkeypatch, embedded):
    page = _page()
    default_html = page.to_html()
    assert f'src="{JQUERY_CDN}/jquery.min.js"' in default_html
    assert f'src="{FLOT_CDN}/jquery.flot.min.js"' in default_html

    monkeypatch.setenv(FLOT_ENV_VAR, "/opt/flot")
    local_html = page.to_html()
    assert 'src="file:///opt/flot/jquery.min.js"' in local_html
    assert 'src="file:///opt/flot/jquery.flot.min.js"' in local_html
    assert "cdnjs" not in local_html
    assert embedded(local_html) == embedded(default_html)

    def _strip_scripts(html):
        return [line for line in html.splitlines() if "<script language" not in line]

    assert _strip_scripts(local_html) == _strip_scripts(default_html)


def test_page_runtime_beats_environment(monkeypatch):
    monkeypatch.setenv(FLOT_ENV_VAR, "/opt/flot")
    page = Page(runtime="/srv/static/flot")
    page.plot()
    html = page.to_html()
    assert "file:///srv/static/flot/jquery.flot.min.js" in html
    assert "/opt/flot" not in html
