"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from ddf_api.config import Settings
from ddf_api.main import create_app
from ddf_api.store import ListingStore
from tests.fixtures.sample_data import sample_listings, write_fixture


@pytest.fixture
def fixture_path(tmp_path):
    """Fixture file holding sample_listings()."""
    return write_fixture(tmp_path / "listings.json", sample_listings())


@pytest.fixture
def store(fixture_path):
    return ListingStore.load(fixture_path)


@pytest.fixture
def settings(fixture_path):
    return Settings(fixture_path=fixture_path)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c
