"""This module provides utility fixtures for testing."""
from _pytest.fixtures import FixtureRequest
import pytest

from htmluna.formatter import Forest, read_html

from .helpers import SAMPLE_HTML


@pytest.fixture(params=[True, False])
def boolean(request: FixtureRequest) -> bool:
    return request.param


@pytest.fixture
def sample_forest() -> Forest:
    """Returns the parsed form of :data:`SAMPLE_HTML`."""
    return read_html(SAMPLE_HTML)
