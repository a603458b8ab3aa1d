from unittest.mock import MagicMock

import pytest
import urllib3

from ogparser.config import Settings
from ogparser.parser import OpenGraphParser


@pytest.fixture
def mock_http():
    """A PoolManager stand-in; tests set request.return_value / side_effect."""
    return MagicMock(spec=urllib3.PoolManager)


@pytest.fixture
def test_settings():
    return Settings(
        user_agent="ogparser-tests/1.0",
        connect_timeout=1,
        read_timeout=1,
        max_redirects=3,
    )


@pytest.fixture
def parser(mock_http, test_settings):
    return OpenGraphParser(http=mock_http, settings=test_settings)
