"""
Shared test fixtures.

MONGO_URL is set before any application module is imported because
settings are loaded at import time.
"""

import os

os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017")

import pytest

from vehicle_inventory.services.inventory_service import InventoryService

from fakes import FakeInventoryRepository, FakeJokeService


@pytest.fixture
def repository() -> FakeInventoryRepository:
    return FakeInventoryRepository()


@pytest.fixture
def jokes() -> FakeJokeService:
    return FakeJokeService()


@pytest.fixture
def service(repository: FakeInventoryRepository, jokes: FakeJokeService) -> InventoryService:
    return InventoryService(repository=repository, jokes=jokes, failure_policy="fail")
