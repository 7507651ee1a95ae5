"""
Shared fixtures for Freesound client tests.
"""

from unittest.mock import Mock, patch

import pytest

from freesound_downloader import FreesoundClient


def _make_response(status_code=200, text='', content=b''):
    """Build a stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.iter_content = Mock(return_value=[content] if content else [])
    return response


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def mock_get():
    with patch('freesound_downloader.application.freesound.client.requests.get') as mocked:
        yield mocked


@pytest.fixture
def no_api_key_env(monkeypatch):
    monkeypatch.delenv('FREESOUND_API_KEY', raising=False)


@pytest.fixture
def client(no_api_key_env):
    return FreesoundClient('test_token')
