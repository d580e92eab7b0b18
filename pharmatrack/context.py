"""Per-process service context and the FastAPI dependencies built on it.

``create_app`` builds one ServiceContext and stores it on ``app.state``;
request handlers reach storage only through the dependencies below.
"""

from collections.abc import AsyncGenerator
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pharmatrack.config import Settings
from pharmatrack.database import create_engine, create_session_factory
from pharmatrack.services.auth import CredentialService
from pharmatrack.services.document_store import DocumentStore
from pharmatrack.services.orders import OrderLifecycleService
from pharmatrack.services.repository import RecordRepository


@dataclass
class ServiceContext:
    """Shared resources created once at startup.

    Attributes:
        settings: Application settings
        engine: Async database engine
        session_factory: Factory for per-request sessions
        document_store: Upload storage rooted at ``settings.upload_dir``
    """

    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    document_store: DocumentStore


def build_context(settings: Settings) -> ServiceContext:
    engine = create_engine(settings)
    return ServiceContext(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        document_store=DocumentStore(settings.upload_dir),
    )


def get_context(request: Request) -> ServiceContext:
    return request.app.state.context


async def get_db(
    context: Annotated[ServiceContext, Depends(get_context)],
) -> AsyncGenerator[AsyncSession, None]:
    """Dependency that provides a database session."""
    async with context.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RecordRepository:
    return RecordRepository(db)


def get_document_store(
    context: Annotated[ServiceContext, Depends(get_context)],
) -> DocumentStore:
    return context.document_store


def get_order_service(
    repository: Annotated[RecordRepository, Depends(get_repository)],
    document_store: Annotated[DocumentStore, Depends(get_document_store)],
) -> OrderLifecycleService:
    return OrderLifecycleService(repository, document_store)


def get_credential_service(
    repository: Annotated[RecordRepository, Depends(get_repository)],
    context: Annotated[ServiceContext, Depends(get_context)],
) -> CredentialService:
    return CredentialService(repository, rounds=context.settings.bcrypt_rounds)
