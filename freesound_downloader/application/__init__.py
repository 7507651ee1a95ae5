"""
Application Layer

Service clients built on the domain layer.

Modules:
- freesound: Freesound.org API client
"""

from .freesound import FreesoundClient

__all__ = [
    'FreesoundClient',
]
