"""Credential model for API login."""

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from pharmatrack.database import Base


class Credential(Base):
    """A username with its bcrypt password hash.

    Credentials are created by seeding and never mutated afterwards.

    Attributes:
        id: Unique identifier (UUID)
        username: Login identifier, unique across all credentials
        password_hash: bcrypt hash of the secret
        created_at: Timestamp when the record was created
    """

    __tablename__ = "credentials"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(150),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Credential(username={self.username!r})>"
