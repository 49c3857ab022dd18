"""
HTTP plumbing shared by the PokeAPI client.

BaseClient gives every client:

  - A requests.Session with a descriptive User-Agent
  - A connection pool large enough for one request per fetch thread
  - A single attempt per request (no retries) and a per-request timeout
  - get_json(), which turns transport and body problems into the
    exporter's NetworkError / DecodeError
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from configs.constants import Constants
from src.fetcher.errors import DecodeError, NetworkError

# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------


@dataclass
class ClientConfig:
    """
    Configuration for BaseClient subclasses.

    Parameters
    ----------
    base_url : str
        API root; relative endpoints are joined onto it.
    timeout : float
        Per-request timeout in seconds.
    pool_size : int
        Maximum number of pooled connections per host.  Fetch threads beyond
        this count still run but open throwaway connections.
    user_agent : str
        Value of the ``User-Agent`` header.
    """

    base_url: str = Constants.POKEAPI_BASE_URL
    timeout: float = Constants.REQUEST_TIMEOUT
    pool_size: int = Constants.POOL_SIZE
    user_agent: str = Constants.USER_AGENT

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient:
    """Thin wrapper around a requests.Session that speaks JSON."""

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig()
        self._session = self._build_session()
        self.logger = logging.getLogger(self.__class__.__name__)

    # ------------------------------------------------------------------
    # Session setup
    # ------------------------------------------------------------------

    def _build_session(self) -> requests.Session:
        """Build a requests.Session with one attempt per request and a sized pool."""
        session = requests.Session()
        retry = Retry(
            total=None,
            connect=0,
            read=0,
            status=0,
            other=0,
            redirect=5,
            raise_on_status=False,
        )
        adapter = HTTPAdapter(
            max_retries=retry,
            pool_connections=4,
            pool_maxsize=self.config.pool_size,
        )
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        session.headers["User-Agent"] = self.config.user_agent
        return session

    def close(self) -> None:
        self._session.close()

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def get_json(self, url: str, params: dict | None = None) -> Any:
        """
        Fetch *url* and return the parsed JSON body.

        Raises
        ------
        NetworkError
            Connection failure, timeout, or a non-2xx status.
        DecodeError
            The body is not valid JSON.
        """
        self.logger.debug(f"GET {url} {params or ''}")
        try:
            resp = self._session.get(url, params=params, timeout=self.config.timeout)
            resp.raise_for_status()
        except requests.HTTPError as exc:
            code = exc.response.status_code if exc.response is not None else "?"
            raise NetworkError(f"HTTP {code} fetching {url}", url=url) from exc
        except requests.RequestException as exc:
            raise NetworkError(f"Request failed for {url}: {exc}", url=url) from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise DecodeError(f"Invalid JSON from {url}: {exc}", url=url) from exc
