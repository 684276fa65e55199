"""Shared fixtures for the flot_viz_engine tests."""

from __future__ import annotations
import json
import re

import pytest

from flot_viz_engine.config import FLOT_ENV_VAR


@pytest.fixture(autouse=True)
def _no_flot_env(monkeypatch):
    """Every test starts from the CDN defaults unless it sets $FLOT itself."""
    monkeypatch.delenv(FLOT_ENV_VAR, raising=False)


@pytest.fixture
def embedded():
    """Return a helper extracting (series, options) JSON for a plot id from a page."""

    def _extract(html: str, plot_id: str = "plot1"):
        series = re.search(rf"^var {plot_id}_series = (.*);$", html, re.M)
        options = re.search(rf"^var {plot_id}_options = (.*);$", html, re.M)
        assert series and options, f"no embedded configuration for {plot_id}"
        return json.loads(series.group(1)), json.loads(options.group(1))

    return _extract
