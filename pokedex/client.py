"""HTTP client for the location and pokemon endpoints, backed by a cache."""

from __future__ import annotations

import json
from typing import Any

import requests

from pokedex.cache import Cache
from pokedex.models import LocationArea, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"
DEFAULT_TIMEOUT = 5.0
DEFAULT_CACHE_INTERVAL = 300.0


class Client:
    """Fetches API documents, remembering raw responses for a while.

    Network failures surface as ``requests`` exceptions; bodies that are not
    valid JSON raise ``ValueError``.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        cache_interval: float = DEFAULT_CACHE_INTERVAL,
        base_url: str = BASE_URL,
    ) -> None:
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self.cache = Cache(cache_interval)
        self._session = requests.Session()

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas; the first page when no URL is given."""
        url = page_url if page_url is not None else f"{self.base_url}/location-area"
        return LocationPage.from_dict(self._get(url, cache_before_decoding=True))

    def get_location(self, location: str) -> LocationArea:
        """Return the location area with the given name or id."""
        url = f"{self.base_url}/location-area/{location}"
        return LocationArea.from_dict(self._get(url, cache_before_decoding=True))

    def get_pokemon(self, name: str) -> Pokemon:
        """Return the pokemon with the given name or id."""
        url = f"{self.base_url}/pokemon/{name}"
        return Pokemon.from_dict(self._get(url, cache_before_decoding=False))

    def close(self) -> None:
        """Release the HTTP session and stop the cache reaper."""
        self._session.close()
        self.cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get(self, url: str, *, cache_before_decoding: bool) -> Any:
        cached = self.cache.get(url)
        if cached is not None:
            return json.loads(cached)

        response = self._session.get(url, timeout=self.timeout)
        body = response.content

        if cache_before_decoding:
            self.cache.add(url, body)
            return json.loads(body)

        decoded = json.loads(body)
        self.cache.add(url, body)
        return decoded