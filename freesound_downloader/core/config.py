"""
Configuration Management Module

Provides Freesound client settings with JSON storage and environment overrides.

Environment variables:
- FREESOUND_API_KEY: API token used when none is passed explicitly
- FREESOUND_BASE_URL: API root (defaults to https://freesound.org/apiv2/)
- FREESOUND_TIMEOUT: Request timeout in seconds
"""

from __future__ import annotations

import json
import logging
import os
from copy import deepcopy
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)

API_KEY_ENV = "FREESOUND_API_KEY"
BASE_URL_ENV = "FREESOUND_BASE_URL"
TIMEOUT_ENV = "FREESOUND_TIMEOUT"

BASE_URL = "https://freesound.org/apiv2/"
DEFAULT_TIMEOUT = 10.0


# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "api_key": "",
    "base_url": BASE_URL,
    "timeout": DEFAULT_TIMEOUT,  # seconds, applied to every request
}


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid timeout {value!r}, using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning(f"Timeout must be positive, got {timeout}; using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    return timeout


@dataclass(frozen=True)
class FreesoundSettings:
    """
    Freesound client settings.

    Only ``api_key`` is required to talk to the API; ``base_url`` and
    ``timeout`` have working defaults.
    """

    api_key: str = ""
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'FreesoundSettings':
        """Create from dictionary. Missing keys fall back to defaults, unknown keys are ignored."""
        merged = deepcopy(DEFAULT_CONFIG)
        merged.update({k: v for k, v in data.items() if k in DEFAULT_CONFIG and v is not None})
        return cls(
            api_key=str(merged["api_key"] or "").strip(),
            base_url=str(merged["base_url"] or BASE_URL),
            timeout=_parse_timeout(merged["timeout"]),
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        base: Optional['FreesoundSettings'] = None,
    ) -> 'FreesoundSettings':
        """
        Create from FREESOUND_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ
            base: Settings that unset variables fall back to (defaults if None)
        """
        env = os.environ if environ is None else environ
        return (base or cls()).merged_with(
            api_key=env.get(API_KEY_ENV),
            base_url=env.get(BASE_URL_ENV),
            timeout=env.get(TIMEOUT_ENV),
        )

    def merged_with(self, **overrides: Any) -> 'FreesoundSettings':
        """Return a copy where every non-empty override replaces the stored value."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v not in (None, "")})
        return self.from_dict(data)

    def save(self, path: Union[str, Path]) -> None:
        """Save settings to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.debug(f"Settings saved to {path}")

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'FreesoundSettings':
        """
        Load settings from a JSON file.

        Args:
            path: Settings file path

        Returns:
            FreesoundSettings; defaults when the file does not exist
        """
        path = Path(path)
        if not path.exists():
            logger.debug(f"No settings file at {path}, using defaults")
            return cls()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a JSON object")
        return cls.from_dict(data)
