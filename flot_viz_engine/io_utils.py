from __future__ import annotations
from typing import IO, Union
import logging
import os

from .errors import WriteError

logger = logging.getLogger(__name__)

Destination = Union[str, "os.PathLike[str]", IO[str]]


def write_html(html: str, destination: Destination) -> None:
    """Write a rendered page to a path or an open text sink."""
    try:
        if hasattr(destination, "write"):
            destination.write(html)
        else:
            with open(destination, "w", encoding="utf-8") as f:
                f.write(html)
    except OSError as e:
        logger.error("Failed to write page to %s: %s", destination, e)
        raise WriteError(f"cannot write page to {destination}: {e}", destination=destination) from e
    logger.info("Wrote page to %s (%d chars)", destination, len(html))
