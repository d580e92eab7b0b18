"""Drug import record model."""

import uuid

from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from pharmatrack.database import Base


class DrugImport(Base):
    """An inbound pharmaceutical shipment from a supplier.

    Attributes:
        id: Unique identifier (UUID)
        order_no: Import order number (e.g., ORD001)
        drug_name: Name of the imported drug
        supplier: Supplier company name
        date: Import date as supplied (ISO date string)
        po_number: Purchase order number
        payment_method: How the import was paid for
        documents: Ordered list of document filenames
        status: Free-text shipment status (e.g., 'In Customs')
    """

    __tablename__ = "drug_imports"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    order_no: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    drug_name: Mapped[str] = mapped_column(String(255), nullable=False)
    supplier: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[str] = mapped_column(String(20), nullable=False)
    po_number: Mapped[str] = mapped_column(String(50), nullable=False)
    payment_method: Mapped[str] = mapped_column(String(50), nullable=False)
    documents: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    status: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<DrugImport(order_no={self.order_no!r}, drug_name={self.drug_name!r})>"
