"""
Result Domain Model

Outcome of a Freesound API operation: a success payload or a typed failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..exceptions import FreesoundError

T = TypeVar('T')


@dataclass(frozen=True)
class FreesoundResult(Generic[T]):
    """
    Success payload or typed failure of a network operation.

    A result is truthy exactly when the operation succeeded, so callers
    that only care about success can keep writing ``if client.download_sound(...)``.
    Callers that need the cause inspect ``error``:

    - FreesoundRemoteError: the API answered with a non-200 status
    - FreesoundIOError: the download could not be written locally
    - FreesoundTransportError: the request never completed

    Download failures are falsy in both the remote and the
    local case; only the error type tells them apart.
    """

    value: Optional[T] = None
    error: Optional[FreesoundError] = None

    @classmethod
    def success(cls, value: T) -> 'FreesoundResult[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: FreesoundError) -> 'FreesoundResult[T]':
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """
        Return the payload or raise the stored error.

        Raises:
            FreesoundError: The failure this result carries
        """
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: T) -> T:
        """Return the payload, or ``default`` on failure."""
        return self.value if self.error is None else default
