"""
slidekit configuration — environment variables and slide defaults.

Read from environment at import time. Nothing here is required.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from slidekit.kernel.merge import merge_dicts


class Settings:
    """Library settings from environment variables."""

    # Logging
    LOG_LEVEL: str = os.environ.get("SLIDEKIT_LOG_LEVEL", "WARNING")

    # Covering hidden content
    COVER: str = os.environ.get("SLIDEKIT_COVER", "rect")
    COVER_FILL: str = os.environ.get("SLIDEKIT_COVER_FILL", "#ffffff")
    COVER_ALPHA: float = float(os.environ.get("SLIDEKIT_COVER_ALPHA", "0.85"))

    # Alternatives are aligned in their shared box
    ALIGN: str = os.environ.get("SLIDEKIT_ALIGN", "bottom + left")

    # Default markup dialect for serialize()
    DIALECT: str = os.environ.get("SLIDEKIT_DIALECT", "native")

    # Font size FlowLayoutHost resolves em lengths with (pt)
    EM_SIZE: float = float(os.environ.get("SLIDEKIT_EM_SIZE", "20"))


# Singleton instance
settings = Settings()


DEFAULT_CONFIG: dict[str, Any] = {
    "reveal": {
        "cover": settings.COVER,
        "position": settings.ALIGN,
    },
    "cover": {
        "fill": settings.COVER_FILL,
        "inline": True,
        "alpha": settings.COVER_ALPHA,
    },
}


def build_config(*overlays: dict[str, Any]) -> dict[str, Any]:
    """Layer `overlays` on top of DEFAULT_CONFIG, rightmost wins."""
    return merge_dicts(DEFAULT_CONFIG, *overlays)


def configure_logging(level: str | None = None) -> None:
    """Attach a basic handler to the `slidekit` logger (for scripts)."""
    logger = logging.getLogger("slidekit")
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
