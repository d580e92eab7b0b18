"""Distribution order lifecycle: placing orders and attaching documents."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pharmatrack.models import DistributionOrder, DocumentStatus
from pharmatrack.schemas import (
    DistributionOrderCreate,
    DistributionOrderUpdate,
    OrderDocument,
)
from pharmatrack.services.document_store import DocumentStore
from pharmatrack.services.repository import RecordRepository, validate_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedFile:
    """A file received in a multipart request.

    Attributes:
        filename: Original filename sent by the client
        content: File bytes
    """

    filename: str | None
    content: bytes


class OrderLifecycleService:
    """Places distribution orders and links uploaded files to them.

    Orders are stored in the record repository; uploaded files go to the
    document store under the order number. The two are only connected when
    an order is placed together with files, at which point each stored file
    becomes a ``pending`` entry in the order's ``documents``.
    """

    def __init__(self, repository: RecordRepository, document_store: DocumentStore) -> None:
        self.repository = repository
        self.document_store = document_store

    async def place_order(
        self, order_data: DistributionOrderCreate | Mapping[str, Any]
    ) -> DistributionOrder:
        order = await self.repository.insert_distribution_order(order_data)
        logger.info("Placed distribution order %s", order.order_number)
        return order

    async def place_order_with_documents(
        self,
        order_data: DistributionOrderCreate | Mapping[str, Any],
        uploaded_files: Sequence[UploadedFile],
    ) -> DistributionOrder:
        """Place an order, then attach uploaded files as pending documents.

        This is two writes: the order is inserted first, the files are
        stored under its order number, and the order's ``documents`` list is
        then replaced with one pending entry per stored file. Between the two
        writes the order exists without those documents.

        Args:
            order_data: Order fields (validated schema or raw mapping).
            uploaded_files: Files to store; may be empty.

        Returns:
            The order as it stands after both writes.
        """
        order_data = validate_record(DistributionOrderCreate, order_data)
        order = await self.place_order(order_data)
        if not uploaded_files:
            return order

        stored_paths = [
            await self.document_store.store_file(
                order.order_number, upload.filename, upload.content
            )
            for upload in uploaded_files
        ]
        documents = [
            OrderDocument(title=path.name, status=DocumentStatus.PENDING)
            for path in stored_paths
        ]
        order = await self.repository.update_distribution_order(
            order.order_number, DistributionOrderUpdate(documents=documents)
        )
        logger.info(
            "Attached %d documents to order %s", len(documents), order.order_number
        )
        return order

    async def get_order(self, order_number: str) -> DistributionOrder:
        return await self.repository.find_distribution_order(order_number)

    async def list_orders(self) -> Sequence[DistributionOrder]:
        return await self.repository.list_distribution_orders()

    async def store_files(
        self, order_id: str, uploaded_files: Sequence[UploadedFile]
    ) -> list[str]:
        """Store files under an order identifier without touching any order record."""
        paths = [
            await self.document_store.store_file(order_id, upload.filename, upload.content)
            for upload in uploaded_files
        ]
        return [str(path) for path in paths]

    async def list_order_files(self, order_id: str) -> list[str]:
        return await self.document_store.list_files(order_id)
