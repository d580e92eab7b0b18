"""Pydantic schemas shared by the API and service layers.

Field names are snake_case in Python and camelCase on the wire
(``order_number`` <-> ``orderNumber``). Nested order records are validated
here and stored as JSON by the repository.
"""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from pharmatrack.models import DistributionStatus, DocumentStatus


class CamelModel(BaseModel):
    """Base schema using camelCase aliases and accepting ORM objects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- Distribution orders ---


class Dimensions(CamelModel):
    """Package dimensions."""

    length: float = Field(description="Package length")
    width: float = Field(description="Package width")
    height: float = Field(description="Package height")
    unit: str = Field(min_length=1, description="Unit of length (e.g., cm)")


class ProductInfo(CamelModel):
    """What is being shipped."""

    description: str = Field(min_length=1, description="Product description")
    quantity: int = Field(ge=0, description="Number of units")
    unit_weight: str = Field(min_length=1, description="Weight per unit (e.g., 2kg)")
    total_weight: str = Field(min_length=1, description="Total shipment weight")
    dimensions: Dimensions = Field(description="Package dimensions")


class ShipmentAnalysis(CamelModel):
    """Shipping classification for an order."""

    weight_distribution: str = Field(min_length=1, description="Load distribution")
    shipping_class: str = Field(min_length=1, description="Carrier shipping class")
    handling_requirements: list[str] = Field(
        default_factory=list,
        description="Distinct handling requirements (e.g., Keep Refrigerated)",
    )
    special_instructions: str | None = Field(
        default=None, description="Free-text delivery instructions"
    )

    @field_validator("handling_requirements")
    @classmethod
    def dedupe_requirements(cls, value: list[str]) -> list[str]:
        # Set semantics, first occurrence wins.
        return list(dict.fromkeys(value))


class TimelineEvent(CamelModel):
    """One entry of the delivery timeline."""

    event: str = Field(min_length=1, description="What happened")
    date: datetime = Field(description="When it happened or is expected")
    completed: bool = Field(default=False, description="Whether the event is done")


class OrderDocument(CamelModel):
    """A document attached to an order together with its review state."""

    title: str = Field(min_length=1, description="Document title or filename")
    status: DocumentStatus = Field(description="approved, pending or rejected")


class GeoLocation(CamelModel):
    """Latitude/longitude of a shipment."""

    latitude: float = Field(ge=-90, le=90, description="Latitude in degrees")
    longitude: float = Field(ge=-180, le=180, description="Longitude in degrees")


class DistributionOrderCreate(CamelModel):
    """Request schema for placing a distribution order."""

    order_number: str = Field(min_length=1, description="Unique order number")
    tracking_number: str = Field(min_length=1, description="Carrier tracking number")
    customer_name: str = Field(min_length=1, description="Receiving customer")
    shipping_address: str = Field(min_length=1, description="Delivery address")
    contact_phone: str = Field(min_length=1, description="Customer phone number")
    contact_email: str = Field(min_length=1, description="Customer email address")
    status: DistributionStatus = Field(
        default=DistributionStatus.PENDING, description="Delivery status"
    )
    order_date: datetime | None = Field(
        default=None, description="Order timestamp, defaults to now"
    )
    product_info: ProductInfo | None = Field(
        default=None, description="Shipped product details"
    )
    analysis: ShipmentAnalysis | None = Field(
        default=None, description="Shipping classification"
    )
    delivery_timeline: list[TimelineEvent] = Field(
        default_factory=list, description="Lifecycle events in order"
    )
    documents: list[OrderDocument] = Field(
        default_factory=list, description="Attached documents"
    )
    location: GeoLocation = Field(description="Shipment geocoordinate")
    signature: str | None = Field(default=None, description="Proof of delivery")


class DistributionOrderResponse(DistributionOrderCreate):
    """Response schema for a stored distribution order."""

    id: UUID = Field(description="Order UUID")
    order_date: datetime = Field(description="Order timestamp")


# --- Drug imports ---


class DrugImportCreate(CamelModel):
    """Request schema for a drug import record."""

    order_no: str = Field(min_length=1, description="Import order number")
    drug_name: str = Field(min_length=1, description="Drug name")
    supplier: str = Field(min_length=1, description="Supplier name")
    date: str = Field(min_length=1, description="Import date (YYYY-MM-DD)")
    po_number: str = Field(min_length=1, description="Purchase order number")
    payment_method: str = Field(min_length=1, description="Payment method")
    documents: list[str] = Field(description="Document filenames")
    status: str = Field(min_length=1, description="Shipment status")


class DrugImportResponse(DrugImportCreate):
    """Response schema for a stored drug import record."""

    id: UUID = Field(description="Import record UUID")


# --- Credentials ---


class LoginRequest(BaseModel):
    """Request schema for login."""

    username: str = Field(
        min_length=1,
        validation_alias=AliasChoices("username", "identifier"),
        description="Login identifier",
    )
    password: str = Field(
        min_length=1,
        validation_alias=AliasChoices("password", "secret"),
        description="Plain-text secret",
    )


class DistributionOrderUpdate(CamelModel):
    """Replacement of a stored order's document list after file attachment."""

    documents: list[OrderDocument] = Field(description="Replacement document list")
