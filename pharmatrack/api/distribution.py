"""FastAPI routes for distribution orders."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import BaseModel, Field

from pharmatrack.context import get_order_service
from pharmatrack.exceptions import DuplicateRecordError, RecordValidationError
from pharmatrack.schemas import DistributionOrderCreate, DistributionOrderResponse
from pharmatrack.services.orders import OrderLifecycleService, UploadedFile

router = APIRouter(tags=["distribution"])

PLACE_ORDER_ERROR = "Error placing order"


# --- Pydantic Schemas ---


class OrderPlacedResponse(BaseModel):
    """Response schema for a newly placed order."""

    message: str = Field(description="Status message")
    order: DistributionOrderResponse = Field(description="The stored order")


async def read_uploads(files: list[UploadFile] | None) -> list[UploadedFile]:
    """Read multipart uploads into memory.

    Browsers submit an unnamed empty part when no file was chosen; such parts
    are skipped.
    """
    return [
        UploadedFile(filename=upload.filename, content=await upload.read())
        for upload in files or []
        if upload.filename
    ]


# --- API Endpoints ---


@router.get("/distribution", response_model=list[DistributionOrderResponse])
async def list_distributions(
    service: Annotated[OrderLifecycleService, Depends(get_order_service)],
) -> list[DistributionOrderResponse]:
    """List every distribution order."""
    orders = await service.list_orders()
    return [DistributionOrderResponse.model_validate(order) for order in orders]


@router.get("/distribution/{order_id}", response_model=DistributionOrderResponse)
async def get_distribution(
    order_id: str,
    service: Annotated[OrderLifecycleService, Depends(get_order_service)],
) -> DistributionOrderResponse:
    """Fetch one distribution order by its order number."""
    order = await service.get_order(order_id)
    return DistributionOrderResponse.model_validate(order)


@router.post("/distributionadd", response_model=OrderPlacedResponse)
async def place_distribution_order(
    order_data: DistributionOrderCreate,
    service: Annotated[OrderLifecycleService, Depends(get_order_service)],
) -> OrderPlacedResponse:
    """Place a distribution order without documents.

    Status defaults to Pending and orderDate to the current time.
    """
    try:
        order = await service.place_order(order_data)
    except DuplicateRecordError as e:
        raise DuplicateRecordError(PLACE_ORDER_ERROR, error=e.message) from e
    return OrderPlacedResponse(
        message="Order placed successfully",
        order=DistributionOrderResponse.model_validate(order),
    )


@router.post("/distributionadd1", response_model=OrderPlacedResponse)
async def place_distribution_order_with_files(
    order: Annotated[str, Form(description="Order fields as a JSON document")],
    service: Annotated[OrderLifecycleService, Depends(get_order_service)],
    files: Annotated[
        list[UploadFile] | None,
        File(description="Documents to attach as pending"),
    ] = None,
) -> OrderPlacedResponse:
    """Place a distribution order and attach uploaded files to it.

    Files are stored under the new order number and each becomes a
    ``pending`` entry in the order's documents.
    """
    try:
        order_data = json.loads(order)
    except json.JSONDecodeError as e:
        raise RecordValidationError("Order field is not valid JSON", error=str(e)) from e
    if not isinstance(order_data, dict):
        raise RecordValidationError("Order field must be a JSON object")

    try:
        placed = await service.place_order_with_documents(
            order_data, await read_uploads(files)
        )
    except DuplicateRecordError as e:
        raise DuplicateRecordError(PLACE_ORDER_ERROR, error=e.message) from e
    return OrderPlacedResponse(
        message="Order placed successfully",
        order=DistributionOrderResponse.model_validate(placed),
    )
