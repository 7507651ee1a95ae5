"""
Live tests against freesound.org
"""

import json

import pytest

pytestmark = pytest.mark.integration


def _check_results(payload):
    data = json.loads(payload)
    assert 'count' in data
    assert isinstance(data['results'], list)
    assert data['count'] > 0
    assert data['results']
    first = data['results'][0]
    for key in ('id', 'name', 'username', 'duration'):
        assert key in first
    return first


def test_search_piano(live_client):
    result = live_client.advanced_search('piano', filter='duration:[0 TO 30]', sort='score', page=1, page_size=15)
    assert result, result.error
    _check_results(result.value)


def test_advanced_search_guitar(live_client):
    result = live_client.advanced_search(
        'guitar',
        filter='type:wav duration:[10 TO 60]',
        sort='num_downloads_desc',
        page=1,
        page_size=20,
        group_by_pack=True,
        weights='tag:4,description:3',
    )
    assert result, result.error
    first = _check_results(result.value)
    assert 10.0 <= first['duration'] <= 60.0


def test_simple_search(live_client):
    result = live_client.search_sounds('rain', page_size=5)
    assert result, result.error
    assert json.loads(result.value)['results']


def test_connection(live_client):
    assert live_client.test_connection()
