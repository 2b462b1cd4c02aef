"""
Kernel test configuration.

Geometry comes from FlowLayoutHost: 5pt-wide glyphs, 10pt lines, 10pt em.
So "hello" measures 25 x 10 and a 20-character string measures 100 x 10.
"""

import pytest

from slidekit.kernel.flow_host import FlowLayoutHost
from slidekit.kernel.reveal import SlideContext
from slidekit.kernel.types import Region


@pytest.fixture
def host():
    return FlowLayoutHost(char_width=5.0, line_height=10.0, em_size=10.0)


@pytest.fixture
def region():
    return Region(width=800.0, height=600.0)


@pytest.fixture
def make_ctx(host, region):
    """Build a SlideContext for a given subslide, measuring with the flow host."""

    def _make(subslide=1, **kwargs):
        kwargs.setdefault("host", host)
        kwargs.setdefault("region", region)
        return SlideContext(subslide=subslide, **kwargs)

    return _make
