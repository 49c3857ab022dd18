"""
PokeAPI client for the CSV exporter.

Knows the two request shapes the exporter needs from https://pokeapi.co:

  - the paginated list endpoints (``/pokemon``, ``/move``, ``/ability``),
    which report the total ``count`` and one resource URL per entity
  - the per-entity detail endpoints those URLs point at
"""

from __future__ import annotations

from typing import Any, List, Tuple

from src.fetcher.base import BaseClient, ClientConfig
from src.fetcher.models import APIResourceList, decode


class PokeAPIClient(BaseClient):
    """
    Fetches raw PokeAPI JSON.

    Parameters
    ----------
    config : ClientConfig
        HTTP settings.  Defaults to the public PokeAPI with a 30 s timeout.
    """

    def __init__(self, config: ClientConfig | None = None) -> None:
        super().__init__(config)

    # ------------------------------------------------------------------
    # get() accepts relative paths and full URLs
    # ------------------------------------------------------------------

    def url_for(self, endpoint: str) -> str:
        if endpoint.startswith("http"):
            return endpoint
        return f"{self.config.base_url}/{endpoint.lstrip('/')}"

    def get(self, endpoint: str, params: dict | None = None) -> Any:
        """
        Fetch *endpoint* from PokeAPI.

        Parameters
        ----------
        endpoint : str
            Either a relative path (``"pokemon/1"``) or a full URL.
        """
        return self.get_json(self.url_for(endpoint), params=params)

    # ------------------------------------------------------------------
    # Paginated lister
    # ------------------------------------------------------------------

    def list_resources(self, limit: int, endpoint: str) -> Tuple[int, List[str]]:
        """
        Request the first *limit* entries of a list endpoint.

        Returns
        -------
        tuple
            ``(count, urls)`` where ``count`` is the total the API reports
            for the endpoint and ``urls`` the detail URLs on this page.
        """
        url = self.url_for(endpoint)
        payload = self.get_json(url, params={"limit": limit})
        page = decode(APIResourceList, payload, url)
        self.logger.info(
            f"{endpoint}: API reports {page.count} entries, {len(page.results)} listed"
        )
        return page.count, [resource.url for resource in page.results]
