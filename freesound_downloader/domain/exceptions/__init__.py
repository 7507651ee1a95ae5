"""
Domain Exceptions Module

Contains the exceptions raised or returned by the Freesound client:
- FreesoundError: Base class for all client errors
- FreesoundConfigError: No usable API token
- FreesoundRemoteError: API answered with a non-200 status
- FreesoundIOError: Local file could not be written
- FreesoundTransportError: Network-level failure (DNS, reset, timeout)
"""

from __future__ import annotations

import os
from typing import Optional, Union


class FreesoundError(Exception):
    """Base exception for Freesound client errors."""
    pass


class FreesoundConfigError(FreesoundError):
    """Authentication configuration error (no token available)."""
    pass


class FreesoundRemoteError(FreesoundError):
    """The API rejected the request with a non-200 status."""

    def __init__(self, status_code: int, body: str = "", endpoint: str = ""):
        super().__init__(f"API error {status_code} on {endpoint or '?'}: {body}")
        self.status_code = status_code
        self.body = body
        self.endpoint = endpoint


class FreesoundIOError(FreesoundError):
    """Downloaded content could not be written to the destination."""

    def __init__(self, path: Union[str, os.PathLike], cause: Optional[OSError] = None):
        super().__init__(f"Cannot write {os.fspath(path)}: {cause}")
        self.path = path
        self.cause = cause


class FreesoundTransportError(FreesoundError):
    """Network error while talking to the API."""
    pass


__all__ = [
    'FreesoundError',
    'FreesoundConfigError',
    'FreesoundRemoteError',
    'FreesoundIOError',
    'FreesoundTransportError',
]
