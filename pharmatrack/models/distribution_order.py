"""Distribution order model with nested shipment documents."""

import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import JSON, DateTime, Enum, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from pharmatrack.database import Base


class DistributionStatus(str, enum.Enum):
    """Delivery state of a distribution order."""

    PENDING = "Pending"
    SHIPPED = "Shipped"
    IN_TRANSIT = "In Transit"
    OUT_FOR_DELIVERY = "Out for Delivery"
    DELIVERED = "Delivered"


class DocumentStatus(str, enum.Enum):
    """Review state of a document attached to an order."""

    APPROVED = "approved"
    PENDING = "pending"
    REJECTED = "rejected"


class DistributionOrder(Base):
    """An outbound order shipped to a customer.

    Nested records (product info, analysis, timeline, documents, location) are
    stored as JSON documents; their shape is enforced by the pydantic schemas
    in ``pharmatrack.schemas`` before they reach this model.

    Attributes:
        id: Unique identifier (UUID)
        order_number: Business key, unique across all orders
        tracking_number: Carrier tracking number
        customer_name: Receiving customer
        shipping_address: Delivery address
        contact_phone: Customer phone number
        contact_email: Customer email address
        status: Current DistributionStatus
        order_date: When the order was placed
        product_info: Description, quantity, weights and dimensions
        analysis: Shipping class and handling requirements
        delivery_timeline: Append-only list of {event, date, completed}
        documents: List of {title, status} review entries
        location: {latitude, longitude} of the shipment
        signature: Proof-of-delivery signature, if captured
    """

    __tablename__ = "distribution_orders"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    order_number: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )
    tracking_number: Mapped[str] = mapped_column(String(100), nullable=False)
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    shipping_address: Mapped[str] = mapped_column(Text, nullable=False)
    contact_phone: Mapped[str] = mapped_column(String(50), nullable=False)
    contact_email: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[DistributionStatus] = mapped_column(
        Enum(
            DistributionStatus,
            name="distribution_status",
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
        default=DistributionStatus.PENDING,
    )
    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    product_info: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    analysis: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    delivery_timeline: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    documents: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    location: Mapped[dict] = mapped_column(JSON, nullable=False)
    signature: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<DistributionOrder(order_number={self.order_number!r}, "
            f"status={self.status})>"
        )
