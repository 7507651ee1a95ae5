"""
Core Module

Configuration shared by the client and the command line.
"""

from .config import (
    API_KEY_ENV,
    BASE_URL,
    DEFAULT_CONFIG,
    DEFAULT_TIMEOUT,
    FreesoundSettings,
)

__all__ = [
    'API_KEY_ENV',
    'BASE_URL',
    'DEFAULT_CONFIG',
    'DEFAULT_TIMEOUT',
    'FreesoundSettings',
]
