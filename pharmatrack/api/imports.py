"""FastAPI routes for drug import records."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from pharmatrack.api.auth import MessageResponse
from pharmatrack.context import get_repository
from pharmatrack.schemas import DrugImportCreate, DrugImportResponse
from pharmatrack.services.imports import list_imports, seed_demo_imports
from pharmatrack.services.repository import RecordRepository

router = APIRouter(tags=["imports"])


@router.get("/import", response_model=list[DrugImportResponse])
async def get_imports(
    repository: Annotated[RecordRepository, Depends(get_repository)],
) -> list[DrugImportResponse]:
    """List every drug import record."""
    records = await list_imports(repository)
    return [DrugImportResponse.model_validate(record) for record in records]


@router.post(
    "/new_import",
    response_model=DrugImportCreate,
    status_code=status.HTTP_201_CREATED,
)
async def new_import(payload: DrugImportCreate) -> DrugImportCreate:
    """Validate an import record and echo it back.

    Nothing is persisted; use /seed1 to load import records.
    """
    return payload


@router.get(
    "/seed1",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def seed_imports(
    repository: Annotated[RecordRepository, Depends(get_repository)],
) -> MessageResponse:
    """Insert the three demo drug import records."""
    await seed_demo_imports(repository)
    return MessageResponse(message="Demo drug data seeded successfully")
