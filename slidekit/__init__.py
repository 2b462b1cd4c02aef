"""
slidekit — progressive-reveal slide utilities on top of a host layout engine.

The pure pieces live in slidekit.kernel. Settings live in slidekit.config.
"""

from slidekit.kernel import (  # noqa: F401
    SlideContext,
    alternatives,
    fit_to_height,
    fit_to_width,
    only,
    serialize,
    uncover,
)

__version__ = "0.3.0"
