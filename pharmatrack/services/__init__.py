"""Business logic services for the order tracking backend."""

from pharmatrack.services.auth import CredentialService, hash_secret, verify_secret
from pharmatrack.services.document_store import DocumentStore
from pharmatrack.services.orders import OrderLifecycleService, UploadedFile
from pharmatrack.services.repository import RecordRepository

__all__ = [
    "CredentialService",
    "DocumentStore",
    "OrderLifecycleService",
    "RecordRepository",
    "UploadedFile",
    "hash_secret",
    "verify_secret",
]
