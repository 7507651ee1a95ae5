"""
Domain Models Module

Contains the domain models for the Freesound client.
"""

from .result import FreesoundResult

__all__ = [
    "FreesoundResult",
]
