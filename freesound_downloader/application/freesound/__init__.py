"""
Freesound Integration Module

Provides the API client for Freesound.org integration.

Freesound.org is a Creative Commons licensed sound library.

Features:
- Text search with paging
- Advanced search with filter, sort, pack grouping and field weights
- Sound download to a local file
- Token authentication (explicit or FREESOUND_API_KEY)

API Documentation: https://freesound.org/docs/api/
"""

from .client import (
    FreesoundClient,
    ADVANCED_SEARCH_FIELDS,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
)

__all__ = [
    'FreesoundClient',
    'ADVANCED_SEARCH_FIELDS',
    'DEFAULT_PAGE',
    'DEFAULT_PAGE_SIZE',
]
