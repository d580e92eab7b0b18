"""FastAPI routes for login and demo credential seeding."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from pharmatrack.context import ServiceContext, get_context, get_credential_service
from pharmatrack.exceptions import DuplicateRecordError, StorageError
from pharmatrack.schemas import LoginRequest
from pharmatrack.services.auth import CredentialService

router = APIRouter(tags=["auth"])


# --- Pydantic Schemas ---


class MessageResponse(BaseModel):
    """Response schema carrying a status message."""

    message: str = Field(description="Status message")


# --- API Endpoints ---


@router.post("/login", response_model=MessageResponse)
async def login(
    credentials: LoginRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> MessageResponse:
    """Verify a username and password.

    Returns 200 when the pair matches a seeded credential and 400 otherwise;
    an unknown user and a wrong password are reported identically.
    """
    try:
        await service.authenticate(credentials.username, credentials.password)
    except StorageError as e:
        raise StorageError("Server error", error=e.error) from e
    return MessageResponse(message="Login successful")


@router.get(
    "/seed",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def seed_user(
    service: Annotated[CredentialService, Depends(get_credential_service)],
    context: Annotated[ServiceContext, Depends(get_context)],
) -> MessageResponse:
    """Create the demo login configured in settings."""
    settings = context.settings
    try:
        await service.seed_credential(settings.demo_username, settings.demo_password)
    except DuplicateRecordError as e:
        raise DuplicateRecordError("Error seeding user", error=e.message) from e
    return MessageResponse(message="User seeded successfully")
