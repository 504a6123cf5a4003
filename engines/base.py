"""
papercite/engines/base.py

Abstract base class for all provider adapters.
Each engine must implement the get_by_id() method.
"""

from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, List, Callable, Any, Tuple
import requests

from models import SourceMetadata, SearchCandidate
from config import DEFAULT_HEADERS, DEFAULT_TIMEOUT


class SearchEngine(ABC):
    """
    Abstract base class for provider adapters.

    All engines must implement:
    - get_by_id(identifier) -> SourceMetadata or None

    Engines may optionally implement:
    - search_multiple(query, limit) -> List[SearchCandidate]

    None means "not found or provider error". Engines never raise for
    ordinary absence or transport faults.
    """

    # Override in subclasses
    name: str = "Base Engine"
    base_url: str = ""
    headers: dict = DEFAULT_HEADERS

    def __init__(self, timeout: int = DEFAULT_TIMEOUT):
        self.timeout = timeout
        self._session = None

    @property
    def session(self) -> requests.Session:
        """Lazy-loaded requests session with default headers."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update(self.headers)
        return self._session

    @abstractmethod
    def get_by_id(self, identifier: str) -> Optional[SourceMetadata]:
        """
        Fetch by direct identifier (DOI, ISBN, URL).

        Args:
            identifier: The identifier to look up

        Returns:
            SourceMetadata if found, None otherwise
        """
        pass

    def search_multiple(self, query: str, limit: int = 5) -> List[SearchCandidate]:
        """
        Search for candidates. Override for engines that support free-text search.

        Returns:
            List of SearchCandidate (may be empty)
        """
        return []

    def _make_request(
        self,
        url: str,
        params: Optional[dict] = None,
        headers: Optional[dict] = None,
    ) -> Optional[requests.Response]:
        """
        Make a GET request with error handling.

        Returns:
            Response object if successful, None on error
        """
        try:
            response = self.session.get(
                url,
                params=params,
                headers=headers,
                timeout=self.timeout
            )
            response.raise_for_status()
            return response

        except requests.RequestException as e:
            print(f"[{self.name}] Request error: {e}")
            return None

    def _get_json(self, url: str, params: Optional[dict] = None) -> Optional[Any]:
        """GET and decode JSON. None on transport or decode failure."""
        response = self._make_request(url, params=params)
        if response is None:
            return None
        try:
            return response.json()
        except ValueError as e:
            print(f"[{self.name}] Invalid JSON: {e}")
            return None


# =============================================================================
# CONCURRENT FAN-OUT
# =============================================================================

def fetch_concurrently(
    first: Tuple[Callable, tuple],
    second: Tuple[Callable, tuple],
) -> Tuple[Any, Any]:
    """
    Run two provider calls in parallel and wait for both.

    A branch that raises contributes None; it never cancels or fails the
    other branch.

    Args:
        first: (function, args) for the first branch
        second: (function, args) for the second branch

    Returns:
        (first_result, second_result)
    """
    with ThreadPoolExecutor(max_workers=2) as executor:
        futures = [executor.submit(fn, *args) for fn, args in (first, second)]
        results = []
        for future in futures:
            try:
                results.append(future.result())
            except Exception as e:
                print(f"[Parallel] Branch failed: {e}")
                results.append(None)
    return results[0], results[1]
