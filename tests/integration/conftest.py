"""
Fixtures for live Freesound API tests.

The API key comes from FREESOUND_API_KEY or from a FREESOUND_API_KEY=...
line in a .env.local file at the project root. Without a key the live
tests are skipped.
"""

import os
from pathlib import Path

import pytest

from freesound_downloader import FreesoundClient

ENV_FILE = Path(__file__).resolve().parents[2] / '.env.local'


def load_api_key_from_env_file(path=ENV_FILE):
    if not path.exists():
        return ''
    for line in path.read_text(encoding='utf-8').splitlines():
        if line.startswith('FREESOUND_API_KEY='):
            return line.split('=', 1)[1].strip().strip('"\'')
    return ''


@pytest.fixture(scope='session')
def live_client():
    api_key = os.environ.get('FREESOUND_API_KEY', '').strip() or load_api_key_from_env_file()
    if not api_key:
        pytest.skip('FREESOUND_API_KEY not set and no .env.local found')
    return FreesoundClient(api_key)
