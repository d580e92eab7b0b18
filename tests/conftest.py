"""Shared fixtures: settings, an in-memory repository and an API client."""

import copy
import uuid
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pharmatrack.config import Settings
from pharmatrack.context import get_repository
from pharmatrack.exceptions import DuplicateRecordError, RecordNotFoundError
from pharmatrack.main import create_app
from pharmatrack.models import Credential, DistributionOrder, DrugImport
from pharmatrack.schemas import (
    DistributionOrderCreate,
    DistributionOrderUpdate,
    DrugImportCreate,
)
from pharmatrack.services.repository import order_column_values, validate_record

BASE_ORDER: dict[str, Any] = {
    "orderNumber": "ORD-1001",
    "trackingNumber": "TRK-55001",
    "customerName": "City General Hospital Pharmacy",
    "shippingAddress": "12 Harbor Road, Mumbai",
    "contactPhone": "+91-22-5550-0101",
    "contactEmail": "pharmacy@citygeneral.example",
    "productInfo": {
        "description": "Paracetamol 500mg tablets",
        "quantity": 120,
        "unitWeight": "2kg",
        "totalWeight": "240kg",
        "dimensions": {"length": 120, "width": 80, "height": 100, "unit": "cm"},
    },
    "analysis": {
        "weightDistribution": "Even",
        "shippingClass": "Class 55",
        "handlingRequirements": ["Keep Dry", "Fragile"],
        "specialInstructions": "Deliver before noon",
    },
    "deliveryTimeline": [
        {"event": "Order Placed", "date": "2025-02-01T09:00:00+00:00"},
    ],
    "location": {"latitude": 19.076, "longitude": 72.8777},
}


class InMemoryRepository:
    """Dict-backed stand-in for RecordRepository with the same error behaviour."""

    def __init__(self) -> None:
        self.credentials: dict[str, Credential] = {}
        self.imports: list[DrugImport] = []
        self.orders: dict[str, DistributionOrder] = {}
        self.writes: list[str] = []

    async def find_credential(self, username: str) -> Credential:
        if username not in self.credentials:
            raise RecordNotFoundError(f"Credential '{username}' not found")
        return self.credentials[username]

    async def insert_credential(self, username: str, password_hash: str) -> Credential:
        if username in self.credentials:
            raise DuplicateRecordError(f"User '{username}' already exists")
        credential = Credential(
            id=uuid.uuid4(), username=username, password_hash=password_hash
        )
        self.credentials[username] = credential
        self.writes.append("insert_credential")
        return credential

    async def list_import_records(self) -> Sequence[DrugImport]:
        return list(self.imports)

    async def insert_import_records(
        self, records: Iterable[DrugImportCreate | Mapping[str, Any]]
    ) -> list[DrugImport]:
        validated = [validate_record(DrugImportCreate, record) for record in records]
        rows = [DrugImport(id=uuid.uuid4(), **record.model_dump()) for record in validated]
        self.imports.extend(rows)
        self.writes.append("insert_import_records")
        return rows

    async def find_distribution_order(self, order_number: str) -> DistributionOrder:
        if order_number not in self.orders:
            raise RecordNotFoundError("Distribution order not found")
        return self.orders[order_number]

    async def list_distribution_orders(self) -> Sequence[DistributionOrder]:
        return list(self.orders.values())

    async def insert_distribution_order(
        self, data: DistributionOrderCreate | Mapping[str, Any]
    ) -> DistributionOrder:
        order_data = validate_record(DistributionOrderCreate, data)
        if order_data.order_number in self.orders:
            raise DuplicateRecordError(
                f"Distribution order '{order_data.order_number}' already exists"
            )
        values = order_column_values(order_data)
        values.setdefault("order_date", datetime.now(UTC))
        order = DistributionOrder(id=uuid.uuid4(), **values)
        self.orders[order.order_number] = order
        self.writes.append("insert_distribution_order")
        return order

    async def update_distribution_order(
        self,
        order_number: str,
        changes: DistributionOrderUpdate | Mapping[str, Any],
    ) -> DistributionOrder:
        update = validate_record(DistributionOrderUpdate, changes)
        order = await self.find_distribution_order(order_number)
        order.documents = update.model_dump(mode="json")["documents"]
        self.writes.append("update_distribution_order")
        return order


@pytest.fixture
def order_payload() -> Callable[..., dict[str, Any]]:
    """Factory for valid camelCase order payloads."""

    def make(**overrides: Any) -> dict[str, Any]:
        payload = copy.deepcopy(BASE_ORDER)
        payload.update(overrides)
        return payload

    return make


@pytest.fixture
def repository() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def settings(tmp_path: Path, upload_dir: Path) -> Settings:
    """Settings isolated from the environment, with cheap bcrypt hashing."""
    return Settings(
        _env_file=None,
        database_url="postgresql://localhost:5432/pharmatrack_test",
        upload_dir=upload_dir,
        log_dir=tmp_path / "logs",
        environment="production",
        bcrypt_rounds=4,
    )


@pytest.fixture
def app(settings: Settings, repository: InMemoryRepository) -> FastAPI:
    """Application with the database repository replaced by the in-memory one."""
    application = create_app(settings)
    application.dependency_overrides[get_repository] = lambda: repository
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
