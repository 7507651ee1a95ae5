"""
freesound-downloader

Search and download sounds from Freesound.org.
"""

__version__ = "1.0.0"

from .core.config import FreesoundSettings
from .domain import (
    FreesoundError,
    FreesoundConfigError,
    FreesoundRemoteError,
    FreesoundIOError,
    FreesoundTransportError,
    FreesoundResult,
)
from .application.freesound import FreesoundClient

__all__ = [
    '__version__',
    'FreesoundClient',
    'FreesoundSettings',
    'FreesoundResult',
    'FreesoundError',
    'FreesoundConfigError',
    'FreesoundRemoteError',
    'FreesoundIOError',
    'FreesoundTransportError',
]
