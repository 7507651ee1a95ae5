"""
Freesound API Client

Synchronous client for Freesound.org API v2.
Implements text search, advanced search and sound download.

Every request goes through ``FreesoundClient._request``: one timeout,
``Authorization: Token`` header auth, and network failures converted into
failed ``FreesoundResult`` values instead of exceptions.

API Documentation: https://freesound.org/docs/api/
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union

import requests

from ... import __version__
from ...core.config import API_KEY_ENV, BASE_URL, DEFAULT_TIMEOUT, FreesoundSettings
from ...domain.exceptions import (
    FreesoundConfigError,
    FreesoundIOError,
    FreesoundRemoteError,
    FreesoundTransportError,
)
from ...domain.models import FreesoundResult

logger = logging.getLogger(__name__)

SEARCH_ENDPOINT = "search/text/"
DOWNLOAD_ENDPOINT = "sounds/{sound_id}/download/"

# Fields requested by advanced search to keep payloads small
ADVANCED_SEARCH_FIELDS = [
    'id', 'name', 'username', 'description', 'tags', 'preview-hq-mp3', 'duration',
]

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 15
CHUNK_SIZE = 8192

PathLike = Union[str, os.PathLike]


def _check_positive_int(name: str, value: Any) -> None:
    # bool is an int subclass but never a valid id or page number
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def _check_query(query: Any) -> None:
    if not isinstance(query, str) or not query.strip():
        raise ValueError("query must be a non-empty string")


class FreesoundClient:
    """
    Client for the Freesound API.

    Usage:
        client = FreesoundClient()          # token from FREESOUND_API_KEY
        result = client.search_sounds("wind chimes")
        if result:
            data = json.loads(result.value)

    Network operations never raise for remote, local I/O or transport
    failures; they return a falsy ``FreesoundResult`` whose ``error``
    names the cause. Only construction (FreesoundConfigError) and invalid
    arguments (ValueError) raise.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = BASE_URL,
    ):
        """
        Initialize Freesound client.

        Args:
            token: Freesound API token; falls back to FREESOUND_API_KEY
            timeout: Request timeout in seconds
            base_url: API root URL

        Raises:
            FreesoundConfigError: No non-empty token was found
        """
        resolved = (token or "").strip() or os.environ.get(API_KEY_ENV, "").strip()
        if not resolved:
            raise FreesoundConfigError(
                "Freesound API authentication failed. "
                f"Provide an API key via the constructor or the {API_KEY_ENV} environment variable."
            )
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout!r}")

        self._token = resolved
        self._timeout = float(timeout)
        self._base_url = base_url.rstrip('/') + '/'

    @classmethod
    def from_settings(cls, settings: FreesoundSettings) -> 'FreesoundClient':
        """Create a client from FreesoundSettings."""
        return cls(settings.api_key, timeout=settings.timeout, base_url=settings.base_url)

    @property
    def token(self) -> str:
        return self._token

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"FreesoundClient(base_url={self._base_url!r}, timeout={self._timeout})"

    def _headers(self) -> Dict[str, str]:
        """
        Headers sent with every request.

        Requests are body-less GETs, so the JSON response type is declared with
        Accept rather than Content-Type.
        """
        return {
            'Authorization': f"Token {self._token}",
            'Accept': 'application/json',
            'User-Agent': f"freesound-downloader/{__version__}",
        }

    def _request(
        self,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        *,
        stream: bool = False,
    ) -> FreesoundResult[requests.Response]:
        """
        Make an authenticated GET request.

        Args:
            endpoint: API endpoint relative to the base URL (e.g. 'search/text/')
            params: Query parameters
            stream: Defer reading the body (used for downloads)

        Returns:
            FreesoundResult holding the 200 response, or a FreesoundRemoteError /
            FreesoundTransportError failure
        """
        url = f"{self._base_url}{endpoint}"
        logger.debug(f"GET {url} params={params}")

        try:
            response = requests.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=self._timeout,
                stream=stream,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error during Freesound request to {endpoint}: {e}")
            return FreesoundResult.failure(FreesoundTransportError(f"Network error: {e}"))

        if response.status_code != 200:
            try:
                body = response.text
            except requests.exceptions.RequestException as e:
                logger.warning(f"Could not read error body from {endpoint}: {e}")
                body = ""
            finally:
                response.close()
            logger.error(
                f"Freesound API error on {endpoint}: status {response.status_code}, response: {body}"
            )
            return FreesoundResult.failure(
                FreesoundRemoteError(response.status_code, body, endpoint)
            )

        return FreesoundResult.success(response)

    def download_sound(self, sound_id: int, output_path: PathLike) -> FreesoundResult[Path]:
        """
        Download a sound file by its id.

        Nothing is written unless the API answers 200. The parent directory of
        ``output_path`` must already exist.

        Args:
            sound_id: Freesound sound ID
            output_path: Where to write the file

        Returns:
            FreesoundResult holding the written path. Both an API rejection and a
            local write failure give a falsy result; ``error`` is a
            FreesoundRemoteError or a FreesoundIOError respectively.
        """
        _check_positive_int("sound_id", sound_id)
        if not isinstance(output_path, (str, os.PathLike)) or not os.fspath(output_path):
            raise ValueError("output_path must be a non-empty path")
        save_path = Path(output_path)

        result = self._request(DOWNLOAD_ENDPOINT.format(sound_id=sound_id), stream=True)
        if not result:
            return FreesoundResult.failure(result.error)

        response = result.value
        try:
            return self._write_body(response, sound_id, save_path)
        finally:
            response.close()

    def _write_body(
        self,
        response: requests.Response,
        sound_id: int,
        save_path: Path,
    ) -> FreesoundResult[Path]:
        # stream into a sibling temp file so an existing save_path survives failures
        try:
            tmp = tempfile.NamedTemporaryFile(
                dir=save_path.parent, prefix=f".{save_path.name}.", suffix=".part", delete=False
            )
        except OSError as e:
            logger.error(f"Cannot open {save_path} for writing: {e}")
            return FreesoundResult.failure(FreesoundIOError(save_path, e))

        tmp_path = Path(tmp.name)
        try:
            with tmp:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        tmp.write(chunk)
            os.replace(tmp_path, save_path)
        # RequestException subclasses OSError, so it must be matched first
        except requests.exceptions.RequestException as e:
            logger.error(f"Download of sound {sound_id} interrupted: {e}")
            tmp_path.unlink(missing_ok=True)
            return FreesoundResult.failure(FreesoundTransportError(f"Network error: {e}"))
        except OSError as e:
            logger.error(f"Failed writing sound {sound_id} to {save_path}: {e}")
            tmp_path.unlink(missing_ok=True)
            return FreesoundResult.failure(FreesoundIOError(save_path, e))

        logger.info(f"Downloaded sound {sound_id} to {save_path}")
        return FreesoundResult.success(save_path)

    def search_sounds(
        self,
        query: str,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> FreesoundResult[str]:
        """
        Search for sounds by text query.

        Args:
            query: Search query string
            page: Page number (default 1)
            page_size: Results per page (default 15)

        Returns:
            FreesoundResult holding the raw JSON response text
        """
        _check_query(query)
        _check_positive_int("page", page)
        _check_positive_int("page_size", page_size)

        params = {
            'query': query,
            'page': str(page),
            'page_size': str(page_size),
        }
        return self._text_result(self._request(SEARCH_ENDPOINT, params=params))

    def advanced_search(
        self,
        query: str,
        filter: Optional[str] = None,
        sort: Optional[str] = None,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        group_by_pack: bool = False,
        weights: Optional[str] = None,
    ) -> FreesoundResult[str]:
        """
        Search for sounds with filtering, sorting and field weighting.

        Optional parameters left as None are not sent at all.

        Args:
            query: Search query string
            filter: Filter expression, e.g. "duration:[0 TO 30] type:wav"
            sort: Sort key, e.g. "score" or "num_downloads_desc"
            page: Page number (default 1)
            page_size: Results per page (default 15)
            group_by_pack: Collapse results from the same pack into one entry
            weights: Field weights, e.g. "tag:4,description:3"

        Returns:
            FreesoundResult holding the raw JSON response text
        """
        _check_query(query)
        _check_positive_int("page", page)
        _check_positive_int("page_size", page_size)

        params = {
            'query': query,
            'page': str(page),
            'page_size': str(page_size),
            'fields': ','.join(ADVANCED_SEARCH_FIELDS),
        }
        if filter is not None:
            params['filter'] = filter
        if sort is not None:
            params['sort'] = sort
        params['group_by_pack'] = '1' if group_by_pack else '0'
        if weights is not None:
            params['weights'] = weights

        return self._text_result(self._request(SEARCH_ENDPOINT, params=params))

    def test_connection(self) -> bool:
        """
        Test API connection and token validity.

        Returns:
            True if a minimal search succeeds, False otherwise
        """
        return bool(self.search_sounds('test', page_size=1))

    @staticmethod
    def _text_result(result: FreesoundResult[requests.Response]) -> FreesoundResult[str]:
        if not result:
            return FreesoundResult.failure(result.error)
        text = result.value.text
        logger.debug(f"Freesound search returned {len(text)} characters")
        return FreesoundResult.success(text)
