"""
Unit tests for FreesoundClient construction
"""

import pytest

from freesound_downloader import FreesoundClient, FreesoundConfigError, FreesoundSettings


def test_explicit_token(no_api_key_env):
    client = FreesoundClient('abc123')
    assert client.token == 'abc123'


def test_explicit_token_wins_over_environment(monkeypatch):
    monkeypatch.setenv('FREESOUND_API_KEY', 'from_env')
    client = FreesoundClient('explicit')
    assert client.token == 'explicit'


def test_empty_token_without_environment_fails(no_api_key_env):
    with pytest.raises(FreesoundConfigError) as exc_info:
        FreesoundClient('')
    assert 'FREESOUND_API_KEY' in str(exc_info.value)


def test_missing_token_without_environment_fails(no_api_key_env):
    with pytest.raises(FreesoundConfigError):
        FreesoundClient()


def test_whitespace_token_counts_as_empty(no_api_key_env):
    with pytest.raises(FreesoundConfigError):
        FreesoundClient('   ')


def test_empty_token_falls_back_to_environment(monkeypatch):
    monkeypatch.setenv('FREESOUND_API_KEY', 'test_api_key')
    client = FreesoundClient('')
    assert client.token == 'test_api_key'


def test_empty_environment_value_fails(monkeypatch):
    monkeypatch.setenv('FREESOUND_API_KEY', '')
    with pytest.raises(FreesoundConfigError):
        FreesoundClient()


def test_defaults(client):
    assert client.timeout == 10.0
    assert client.base_url == 'https://freesound.org/apiv2/'


def test_base_url_gets_trailing_slash(no_api_key_env):
    client = FreesoundClient('t', base_url='http://localhost:8000/apiv2')
    assert client.base_url == 'http://localhost:8000/apiv2/'


def test_non_positive_timeout_rejected(no_api_key_env):
    with pytest.raises(ValueError):
        FreesoundClient('t', timeout=0)


def test_repr_hides_token(client):
    assert 'test_token' not in repr(client)


def test_from_settings(no_api_key_env):
    settings = FreesoundSettings(api_key='k', base_url='http://example.test/', timeout=3.5)
    client = FreesoundClient.from_settings(settings)
    assert client.token == 'k'
    assert client.timeout == 3.5
    assert client.base_url == 'http://example.test/'


def test_from_settings_without_key_uses_environment(monkeypatch):
    monkeypatch.setenv('FREESOUND_API_KEY', 'env_key')
    client = FreesoundClient.from_settings(FreesoundSettings())
    assert client.token == 'env_key'
