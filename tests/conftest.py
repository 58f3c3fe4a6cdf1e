"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from influxline import Point


@pytest.fixture
def mem_point():
    """Point from the line protocol reference example."""
    return Point("mem").tag("host", "host1").field("used_percent", 23.43234543).timestamp(1556896326)
