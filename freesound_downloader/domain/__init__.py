"""
Domain Layer

Result type and exceptions shared by the Freesound client.
"""

from .exceptions import (
    FreesoundError,
    FreesoundConfigError,
    FreesoundRemoteError,
    FreesoundIOError,
    FreesoundTransportError,
)
from .models import FreesoundResult

__all__ = [
    'FreesoundError',
    'FreesoundConfigError',
    'FreesoundRemoteError',
    'FreesoundIOError',
    'FreesoundTransportError',
    'FreesoundResult',
]
