"""
Runtime Module

Process-level setup for command line use.
"""

from .bootstrap import configure_logging, LOG_FORMAT

__all__ = [
    'configure_logging',
    'LOG_FORMAT',
]
