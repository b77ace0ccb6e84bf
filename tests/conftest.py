"""Shared fixtures: an in-memory MongoDB and an app wired to it."""

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.infrastructure.database import MongoDatabase
from app.infrastructure.repositories.order_repository import MongoOrderRepository
from app.infrastructure.repositories.reservation_repository import MongoReservationRepository
from app.main import create_app


@pytest.fixture
def database() -> MongoDatabase:
    return MongoDatabase("mongodb://localhost:27017", client=AsyncMongoMockClient())


@pytest.fixture
def order_repo(database) -> MongoOrderRepository:
    return MongoOrderRepository(database.orders)


@pytest.fixture
def reservation_repo(database) -> MongoReservationRepository:
    return MongoReservationRepository(database.reservations)


@pytest.fixture
def client(order_repo, reservation_repo) -> TestClient:
    app = create_app(order_repo=order_repo, reservation_repo=reservation_repo)
    return TestClient(app)
