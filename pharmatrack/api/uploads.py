"""FastAPI routes for document uploads and the QR-code upload page."""

import html
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from pharmatrack.api.distribution import read_uploads
from pharmatrack.context import ServiceContext, get_context, get_order_service
from pharmatrack.exceptions import RecordValidationError
from pharmatrack.services.orders import OrderLifecycleService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["uploads"])

UPLOAD_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>Upload Documents for Order {order_id}</title>
  <style>
    body {{ background: #1C1C1C; color: #fff; font-family: Arial, sans-serif; padding: 20px; }}
    .container {{ max-width: 600px; margin: auto; }}
    input[type="file"] {{ width: 100%; padding: 10px; margin: 20px 0; }}
    button {{ background: #00796B; color: #fff; border: none; padding: 10px 20px; font-size: 16px; cursor: pointer; }}
  </style>
</head>
<body>
  <div class="container">
    <h1>Upload Documents for Order {order_id}</h1>
    <p>Tracking ID: {tracking_id}</p>
    <form id="uploadForm" enctype="multipart/form-data" method="POST" action="/upload">
      <input type="hidden" name="orderId" value="{order_id}" />
      <input type="hidden" name="trackingId" value="{tracking_id}" />
      <input type="file" name="files" multiple />
      <button type="submit">Upload Files</button>
    </form>
  </div>
</body>
</html>
"""


# --- Pydantic Schemas ---


class UploadResponse(BaseModel):
    """Response schema for stored uploads."""

    message: str = Field(description="Status message")
    files: list[str] = Field(description="Paths of the stored files")


class FileListResponse(BaseModel):
    """Response schema for the files stored under an order."""

    files: list[str] = Field(description="Stored filenames")


def render_upload_page(order_id: str, tracking_id: str) -> str:
    """Render the upload form bound to an order and tracking identifier."""
    return UPLOAD_PAGE_TEMPLATE.format(
        order_id=html.escape(order_id, quote=True),
        tracking_id=html.escape(tracking_id, quote=True),
    )


# --- API Endpoints ---


@router.post("/upload", response_model=UploadResponse)
async def upload_files(
    service: Annotated[OrderLifecycleService, Depends(get_order_service)],
    context: Annotated[ServiceContext, Depends(get_context)],
    files: Annotated[
        list[UploadFile] | None,
        File(description="Documents to store"),
    ] = None,
    order_id: Annotated[str | None, Form(alias="orderId")] = None,
    tracking_id: Annotated[str | None, Form(alias="trackingId")] = None,
) -> UploadResponse:
    """Store uploaded files under the order's namespace.

    Files without an orderId go to the default namespace. The order record
    itself is not modified.
    """
    uploads = await read_uploads(files)
    if not uploads:
        logger.error("No files uploaded")
        raise RecordValidationError("No files uploaded")

    namespace = order_id or context.settings.default_upload_namespace
    paths = await service.store_files(namespace, uploads)

    message = (
        f"Files uploaded successfully for Order ID: {namespace} "
        f"& Tracking ID: {tracking_id}"
    )
    logger.info(message)
    return UploadResponse(message=message, files=paths)


@router.get("/upload/{order_id}/{tracking_id}", response_class=HTMLResponse)
async def upload_page(order_id: str, tracking_id: str) -> HTMLResponse:
    """Serve the upload form linked from a shipment's QR code."""
    return HTMLResponse(render_upload_page(order_id, tracking_id))


@router.get("/files/{order_id}", response_model=FileListResponse)
async def list_files(
    order_id: str,
    service: Annotated[OrderLifecycleService, Depends(get_order_service)],
) -> FileListResponse:
    """List the filenames uploaded for an order; 404 if there are none."""
    return FileListResponse(files=await service.list_order_files(order_id))
