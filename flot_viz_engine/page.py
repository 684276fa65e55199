from __future__ import annotations
from typing import List, Optional
import logging

from .config import resolve_runtime
from .encoder import encode_page
from .io_utils import Destination, write_html
from .plot import Plot

logger = logging.getLogger(__name__)


class Page:
    """
    Top-level document: an ordered list of plots rendered into one HTML file.

    `runtime` names a local Flot/jQuery location (absolute path, relative
    path or URL). Left empty, the FLOT environment variable is consulted at
    render time, then the pinned CDN copies.
    """

    def __init__(self, title: str = "", runtime: Optional[str] = None):
        self.title = title
        self.runtime = runtime
        self.plots: List[Plot] = []

    def plot(self, title: str = "") -> Plot:
        """Append a new plot; plots render in creation order."""
        plot = Plot(f"plot{len(self.plots) + 1}", title)
        self.plots.append(plot)
        logger.debug("Added %r to page %r", plot, self.title)
        return plot

    def to_html(self) -> str:
        return encode_page(self, resolve_runtime(self.runtime))

    def render(self, destination: Destination) -> None:
        """
        Encode the page and write it out.

        The page is left untouched and can be rendered again. I/O failures
        raise WriteError; nothing is retried.
        """
        write_html(self.to_html(), destination)

    def __repr__(self) -> str:
        return f"Page({self.title!r}, plots={len(self.plots)})"
