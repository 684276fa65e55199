"""
Runtime location settings.

Pages load jQuery and Flot from pinned CDN versions unless a local copy is
named, either per page or through the FLOT environment variable.
"""

from __future__ import annotations
from pathlib import Path
from typing import Final, Optional
import logging
import os

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

FLOT_ENV_VAR: Final = "FLOT"
JQUERY_CDN: Final = "https://cdnjs.cloudflare.com/ajax/libs/jquery/3.2.1"
FLOT_CDN: Final = "https://cdnjs.cloudflare.com/ajax/libs/flot/0.8.3"


class RuntimeLocation(BaseModel):
    jquery_base: str = JQUERY_CDN
    flot_base: str = FLOT_CDN

    model_config = ConfigDict(frozen=True)

    @staticmethod
    def script_url(base: str, name: str) -> str:
        return f"{base.rstrip('/')}/{name}"

    def jquery(self, name: str = "jquery.min.js") -> str:
        return self.script_url(self.jquery_base, name)

    def flot(self, name: str = "jquery.flot.min.js") -> str:
        return self.script_url(self.flot_base, name)


def resolve_runtime(override: Optional[str] = None) -> RuntimeLocation:
    """
    Explicit override first, then $FLOT, then the CDN pair.

    A local copy must hold jquery.min.js next to the Flot scripts.
    Absolute paths become file:// URLs; URLs and relative paths are kept.
    """
    source = "override"
    location = override
    if not location:
        source = FLOT_ENV_VAR
        location = os.environ.get(FLOT_ENV_VAR, "")
    if not location:
        logger.debug("Flot runtime: CDN defaults")
        return RuntimeLocation()

    base = _local_base(location)
    logger.debug("Flot runtime from %s: %s", source, base)
    return RuntimeLocation(jquery_base=base, flot_base=base)


def _local_base(location: str) -> str:
    if "://" in location:
        return location
    path = Path(location)
    if path.is_absolute():
        return path.as_uri()
    return location
