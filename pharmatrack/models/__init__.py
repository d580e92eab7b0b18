"""SQLAlchemy models for the pharmaceutical order tracking backend."""

from pharmatrack.models.credential import Credential
from pharmatrack.models.distribution_order import (
    DistributionOrder,
    DistributionStatus,
    DocumentStatus,
)
from pharmatrack.models.drug_import import DrugImport

__all__ = [
    "Credential",
    "DrugImport",
    "DistributionOrder",
    "DistributionStatus",
    "DocumentStatus",
]
