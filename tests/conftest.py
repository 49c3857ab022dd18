import copy
import json
import threading
from pathlib import Path

import pytest

from src.fetcher.errors import NetworkError

FIXTURES = Path(__file__).resolve().parent / "fixtures"
API = "https://pokeapi.co/api/v2"


def load_fixture_json(filename: str) -> dict:
    return json.loads((FIXTURES / filename).read_text(encoding="utf-8"))


def detail_url(endpoint: str, entity_id: int) -> str:
    return f"{API}/{endpoint}/{entity_id}/"


class FakeClient:
    """Stands in for PokeAPIClient: serves listings and detail payloads from memory."""

    def __init__(self, listings=None, details=None, failing=()):
        self.listings = listings or {}
        self.details = details or {}
        self.failing = set(failing)
        self.listed = []
        self.fetched = []
        self.closed = False
        self._lock = threading.Lock()

    def list_resources(self, limit, endpoint):
        self.listed.append(endpoint)
        listing = self.listings[endpoint]
        if isinstance(listing, Exception):
            raise listing
        count, urls = listing
        return count, list(urls)[:limit]

    def get(self, url):
        with self._lock:
            self.fetched.append(url)
        if url in self.failing:
            raise NetworkError(f"HTTP 500 fetching {url}", url=url)
        return copy.deepcopy(self.details[url])

    def close(self):
        self.closed = True


def build_api(count: int = 3) -> FakeClient:
    """Fake API with *count* pokémon, moves and abilities built from the fixtures."""
    templates = {
        "pokemon": load_fixture_json("pokemon_1.json"),
        "move": load_fixture_json("move_1.json"),
        "ability": load_fixture_json("ability_65.json"),
    }
    species = load_fixture_json("pokemon-species_1.json")
    listings, details = {}, {}
    for endpoint, template in templates.items():
        urls = []
        for entity_id in range(1, count + 1):
            url = detail_url(endpoint, entity_id)
            payload = copy.deepcopy(template)
            payload["id"] = entity_id
            payload["name"] = f"{template['name']}-{entity_id}"
            if endpoint == "pokemon":
                species_url = detail_url("pokemon-species", entity_id)
                payload["species"]["url"] = species_url
                details[species_url] = dict(copy.deepcopy(species), id=entity_id)
            details[url] = payload
            urls.append(url)
        listings[endpoint] = (count, urls)
    return FakeClient(listings=listings, details=details)


@pytest.fixture
def fake_api():
    return build_api()


@pytest.fixture
def make_api():
    return build_api


@pytest.fixture
def fake_client_cls():
    return FakeClient


@pytest.fixture
def pokemon_payload():
    return load_fixture_json("pokemon_1.json")


@pytest.fixture
def species_payload():
    return load_fixture_json("pokemon-species_1.json")


@pytest.fixture
def move_payload():
    return load_fixture_json("move_1.json")


@pytest.fixture
def ability_payload():
    return load_fixture_json("ability_65.json")
