"""Persistence for credentials, drug imports and distribution orders.

Every write commits immediately, so a two-step flow (insert an order, then
attach documents) produces two separate transactions.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pharmatrack.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
    RecordValidationError,
    StorageError,
)
from pharmatrack.models import Credential, DistributionOrder, DrugImport
from pharmatrack.schemas import (
    DistributionOrderCreate,
    DistributionOrderUpdate,
    DrugImportCreate,
)

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_record(schema: type[SchemaT], data: SchemaT | Mapping[str, Any]) -> SchemaT:
    """Validate raw input against a schema.

    Args:
        schema: Pydantic model class describing the record.
        data: An instance of ``schema`` or a mapping of raw field values.

    Returns:
        The validated schema instance.

    Raises:
        RecordValidationError: If a required field is missing or malformed.
    """
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise RecordValidationError(
            f"Invalid {schema.__name__} data",
            error=e.errors(include_url=False, include_context=False),
        ) from e


def order_column_values(order: DistributionOrderCreate) -> dict[str, Any]:
    """Map a validated order onto DistributionOrder column keyword arguments."""
    values = order.model_dump(mode="json", exclude={"status", "order_date"})
    values["status"] = order.status
    if order.order_date is not None:
        values["order_date"] = order.order_date
    return values


class RecordRepository:
    """Database access for the three record collections."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _commit(self, action: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateRecordError(f"Duplicate record while {action}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Database error while %s: %s", action, e)
            raise StorageError(f"Database error while {action}", error=str(e)) from e

    async def _fetch_one(self, statement: Any) -> Any:
        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            logger.error("Database query failed: %s", e)
            raise StorageError("Database query failed", error=str(e)) from e
        return result.scalar_one_or_none()

    async def _fetch_all(self, statement: Any) -> Sequence[Any]:
        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            logger.error("Database query failed: %s", e)
            raise StorageError("Database query failed", error=str(e)) from e
        return result.scalars().all()

    # --- Credentials ---

    async def find_credential(self, username: str) -> Credential:
        credential = await self._fetch_one(
            select(Credential).where(Credential.username == username)
        )
        if credential is None:
            raise RecordNotFoundError(f"Credential '{username}' not found")
        return credential

    async def insert_credential(self, username: str, password_hash: str) -> Credential:
        """Store a new credential.

        Raises:
            DuplicateRecordError: If the username is already taken.
        """
        existing = await self._fetch_one(
            select(Credential).where(Credential.username == username)
        )
        if existing is not None:
            raise DuplicateRecordError(f"User '{username}' already exists")

        credential = Credential(username=username, password_hash=password_hash)
        self.session.add(credential)
        await self._commit("inserting credential")
        return credential

    # --- Drug imports ---

    async def list_import_records(self) -> Sequence[DrugImport]:
        return await self._fetch_all(select(DrugImport).order_by(DrugImport.order_no))

    async def insert_import_records(
        self, records: Iterable[DrugImportCreate | Mapping[str, Any]]
    ) -> list[DrugImport]:
        """Insert several import records in one transaction.

        Every record is validated before anything is written, so an invalid
        record leaves the collection untouched.

        Raises:
            RecordValidationError: If any record is invalid.
        """
        validated = [validate_record(DrugImportCreate, record) for record in records]
        rows = [DrugImport(**record.model_dump()) for record in validated]
        self.session.add_all(rows)
        await self._commit("inserting import records")
        return rows

    # --- Distribution orders ---

    async def find_distribution_order(self, order_number: str) -> DistributionOrder:
        order = await self._fetch_one(
            select(DistributionOrder).where(DistributionOrder.order_number == order_number)
        )
        if order is None:
            raise RecordNotFoundError("Distribution order not found")
        return order

    async def list_distribution_orders(self) -> Sequence[DistributionOrder]:
        return await self._fetch_all(
            select(DistributionOrder).order_by(DistributionOrder.order_date)
        )

    async def insert_distribution_order(
        self, data: DistributionOrderCreate | Mapping[str, Any]
    ) -> DistributionOrder:
        """Validate and store a new distribution order.

        Status defaults to Pending and order date to the current time when
        they are not supplied.

        Raises:
            RecordValidationError: If a required field (nested included) is missing.
            DuplicateRecordError: If the order number already exists.
        """
        order_data = validate_record(DistributionOrderCreate, data)

        existing = await self._fetch_one(
            select(DistributionOrder).where(
                DistributionOrder.order_number == order_data.order_number
            )
        )
        if existing is not None:
            raise DuplicateRecordError(
                f"Distribution order '{order_data.order_number}' already exists"
            )

        order = DistributionOrder(**order_column_values(order_data))
        self.session.add(order)
        await self._commit("placing order")
        return order

    async def update_distribution_order(
        self,
        order_number: str,
        changes: DistributionOrderUpdate | Mapping[str, Any],
    ) -> DistributionOrder:
        """Replace the document list of an existing order.

        Raises:
            RecordValidationError: If the changes are malformed.
            RecordNotFoundError: If no order has this number.
        """
        update = validate_record(DistributionOrderUpdate, changes)
        order = await self.find_distribution_order(order_number)

        order.documents = update.model_dump(mode="json")["documents"]

        await self._commit("updating order")
        return order
