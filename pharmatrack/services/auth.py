"""Credential hashing and verification."""

import logging

import bcrypt

from pharmatrack.exceptions import AuthenticationError, RecordNotFoundError
from pharmatrack.models import Credential
from pharmatrack.services.repository import RecordRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


def hash_secret(secret: str, rounds: int = 10) -> str:
    """Hash a plain-text secret with bcrypt."""
    return bcrypt.hashpw(secret.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_secret(secret: str, hashed: str) -> bool:
    """Check a plain-text secret against a bcrypt hash.

    A malformed stored hash never verifies.
    """
    try:
        return bcrypt.checkpw(secret.encode(), hashed.encode())
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


class CredentialService:
    """Verifies logins and seeds the demo credential."""

    def __init__(self, repository: RecordRepository, rounds: int = 10) -> None:
        self.repository = repository
        self.rounds = rounds

    async def authenticate(self, username: str, password: str) -> Credential:
        """Verify a username/password pair.

        Unknown users and wrong passwords fail the same way so callers
        cannot tell them apart.

        Raises:
            AuthenticationError: If the pair does not verify.
        """
        try:
            credential = await self.repository.find_credential(username)
        except RecordNotFoundError:
            logger.error("Login failed for unknown user %r", username)
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE) from None

        if not verify_secret(password, credential.password_hash):
            logger.error("Login failed for user %r", username)
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        logger.info("Login successful for user %r", username)
        return credential

    async def seed_credential(self, username: str, password: str) -> Credential:
        """Hash ``password`` and store it for ``username``."""
        credential = await self.repository.insert_credential(
            username, hash_secret(password, self.rounds)
        )
        logger.info("Seeded credential for user %r", username)
        return credential
