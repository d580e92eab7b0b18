"""Tests for the distribution order lifecycle service."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest

from pharmatrack.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
    RecordValidationError,
)
from pharmatrack.models import DistributionStatus
from pharmatrack.schemas import DistributionOrderCreate, DistributionOrderResponse
from pharmatrack.services.document_store import DocumentStore
from pharmatrack.services.orders import OrderLifecycleService, UploadedFile
from tests.conftest import InMemoryRepository

OrderFactory = Callable[..., dict[str, Any]]


@pytest.fixture
def service(repository: InMemoryRepository, upload_dir: Path) -> OrderLifecycleService:
    return OrderLifecycleService(repository, DocumentStore(upload_dir))


class TestPlaceOrder:
    """Tests for place_order and get_order."""

    @pytest.mark.asyncio
    async def test_round_trip_applies_defaults(
        self, service: OrderLifecycleService, order_payload: OrderFactory
    ) -> None:
        """Test that a placed order reads back as the input plus defaults."""
        before = datetime.now(UTC)
        await service.place_order(order_payload())
        stored = await service.get_order("ORD-1001")

        expected = DistributionOrderCreate.model_validate(order_payload())
        response = DistributionOrderResponse.model_validate(stored)
        assert response.model_dump(exclude={"id", "order_date"}) == expected.model_dump(
            exclude={"order_date"}
        )
        assert response.status is DistributionStatus.PENDING
        assert before - timedelta(seconds=1) <= response.order_date <= datetime.now(UTC)

    @pytest.mark.asyncio
    async def test_explicit_status_kept(
        self, service: OrderLifecycleService, order_payload: OrderFactory
    ) -> None:
        """Test that a supplied status is not overridden."""
        order = await service.place_order(order_payload(status="Shipped"))
        assert order.status is DistributionStatus.SHIPPED

    @pytest.mark.asyncio
    async def test_duplicate_order_number(
        self, service: OrderLifecycleService, order_payload: OrderFactory
    ) -> None:
        """Test that the second order with the same number is rejected."""
        await service.place_order(order_payload())
        with pytest.raises(DuplicateRecordError):
            await service.place_order(order_payload(customerName="Another Customer"))

    @pytest.mark.asyncio
    async def test_get_missing_order(self, service: OrderLifecycleService) -> None:
        """Test that an unknown order number raises RecordNotFoundError."""
        with pytest.raises(RecordNotFoundError):
            await service.get_order("ORD-404")

    @pytest.mark.asyncio
    async def test_list_orders(
        self, service: OrderLifecycleService, order_payload: OrderFactory
    ) -> None:
        """Test that every placed order is listed."""
        await service.place_order(order_payload())
        await service.place_order(order_payload(orderNumber="ORD-1002"))
        numbers = {order.order_number for order in await service.list_orders()}
        assert numbers == {"ORD-1001", "ORD-1002"}


class TestPlaceOrderWithDocuments:
    """Tests for place_order_with_documents."""

    @pytest.mark.asyncio
    async def test_files_become_pending_documents(
        self,
        service: OrderLifecycleService,
        repository: InMemoryRepository,
        order_payload: OrderFactory,
        upload_dir: Path,
    ) -> None:
        """Test that N files yield N pending documents named after the files."""
        files = [
            UploadedFile("COA.pdf", b"coa"),
            UploadedFile("Invoice.pdf", b"invoice"),
            UploadedFile("label.png", b"label"),
        ]

        order = await service.place_order_with_documents(order_payload(), files)

        assert order.documents == [
            {"title": "COA.pdf", "status": "pending"},
            {"title": "Invoice.pdf", "status": "pending"},
            {"title": "label.png", "status": "pending"},
        ]
        assert (upload_dir / "ORD-1001" / "Invoice.pdf").read_bytes() == b"invoice"
        assert repository.writes == ["insert_distribution_order", "update_distribution_order"]

    @pytest.mark.asyncio
    async def test_documents_replace_submitted_list(
        self, service: OrderLifecycleService, order_payload: OrderFactory
    ) -> None:
        """Test that attached files overwrite documents sent with the order."""
        payload = order_payload(documents=[{"title": "old.pdf", "status": "approved"}])
        order = await service.place_order_with_documents(
            payload, [UploadedFile("new.pdf", b"new")]
        )
        assert order.documents == [{"title": "new.pdf", "status": "pending"}]

    @pytest.mark.asyncio
    async def test_no_files_single_write(
        self,
        service: OrderLifecycleService,
        repository: InMemoryRepository,
        order_payload: OrderFactory,
    ) -> None:
        """Test that without files the order is written once."""
        order = await service.place_order_with_documents(order_payload(), [])
        assert order.documents == []
        assert repository.writes == ["insert_distribution_order"]

    @pytest.mark.asyncio
    async def test_invalid_order_stores_no_files(
        self,
        service: OrderLifecycleService,
        order_payload: OrderFactory,
        upload_dir: Path,
    ) -> None:
        """Test that a rejected order leaves nothing on disk."""
        payload = order_payload()
        del payload["location"]
        with pytest.raises(RecordValidationError):
            await service.place_order_with_documents(payload, [UploadedFile("a.pdf", b"a")])
        assert not upload_dir.exists()

    @pytest.mark.asyncio
    async def test_duplicate_order_stores_no_files(
        self,
        service: OrderLifecycleService,
        order_payload: OrderFactory,
        upload_dir: Path,
    ) -> None:
        """Test that a duplicate order number does not touch the first order's files."""
        await service.place_order(order_payload())
        with pytest.raises(DuplicateRecordError):
            await service.place_order_with_documents(
                order_payload(), [UploadedFile("a.pdf", b"a")]
            )
        assert not (upload_dir / "ORD-1001").exists()


class TestOrderFiles:
    """Tests for store_files and list_order_files."""

    @pytest.mark.asyncio
    async def test_no_upload_not_found(self, service: OrderLifecycleService) -> None:
        """Test that an identifier without uploads raises RecordNotFoundError."""
        with pytest.raises(RecordNotFoundError):
            await service.list_order_files("ORD-1001")

    @pytest.mark.asyncio
    async def test_listed_after_upload(self, service: OrderLifecycleService) -> None:
        """Test that an uploaded file is listed for its identifier."""
        paths = await service.store_files("ORD-1001", [UploadedFile("a.pdf", b"a")])
        assert paths[0].endswith("a.pdf")
        assert "a.pdf" in await service.list_order_files("ORD-1001")

    @pytest.mark.asyncio
    async def test_upload_does_not_touch_order(
        self,
        service: OrderLifecycleService,
        order_payload: OrderFactory,
    ) -> None:
        """Test that plain uploads leave the order's documents unchanged."""
        await service.place_order(order_payload())
        await service.store_files("ORD-1001", [UploadedFile("a.pdf", b"a")])
        order = await service.get_order("ORD-1001")
        assert order.documents == []
