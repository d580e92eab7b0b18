"""Drug import records: listing and demo seeding."""

import logging
from collections.abc import Sequence

from pharmatrack.models import DrugImport
from pharmatrack.schemas import DrugImportCreate
from pharmatrack.services.repository import RecordRepository

logger = logging.getLogger(__name__)

# Demo shipments loaded by GET /seed1
DEMO_IMPORTS = [
    DrugImportCreate(
        order_no="ORD001",
        drug_name="Paracetamol",
        supplier="PharmaCorp",
        date="2025-01-10",
        po_number="PO12345",
        payment_method="Credit",
        documents=["COA.pdf", "Invoice.pdf"],
        status="Shipped",
    ),
    DrugImportCreate(
        order_no="ORD002",
        drug_name="Ibuprofen",
        supplier="HealthCare Supplies",
        date="2025-01-12",
        po_number="PO12346",
        payment_method="Bank Transfer",
        documents=["COA.pdf", "Invoice.pdf"],
        status="In Customs",
    ),
    DrugImportCreate(
        order_no="ORD003",
        drug_name="Amoxicillin",
        supplier="MedLife Ltd",
        date="2025-01-15",
        po_number="PO12347",
        payment_method="Cash",
        documents=["COA.pdf", "Invoice.pdf", "Shipping Label.pdf"],
        status="Delivered",
    ),
]


async def list_imports(repository: RecordRepository) -> Sequence[DrugImport]:
    return await repository.list_import_records()


async def seed_demo_imports(repository: RecordRepository) -> list[DrugImport]:
    """Insert the three demo import records."""
    rows = await repository.insert_import_records(DEMO_IMPORTS)
    logger.info("Seeded %d demo drug imports", len(rows))
    return rows
