# estate_http_api/db/seed.py

"""
Sample back-office data for local development and demos.

Only runs against an empty ``properties`` table, so restarting the app with
ESTATE_SEED_SAMPLE_DATA=true does not duplicate rows.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from estate_http_api.db.models import (
    Client,
    ClientStatus,
    ClientType,
    Contract,
    ContractStatus,
    ContractType,
    Property,
    PropertyStatus,
    PropertyType,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from estate_http_api.logging import get_logger

log = get_logger(__name__)


def seed_sample_data(session: Session) -> bool:
    """
    Insert a small, related data set. Returns False when data already exists.
    """
    existing = session.execute(select(func.count(Property.id))).scalar_one()
    if existing:
        log.info("seed_skipped", properties=existing)
        return False

    tower = Property(
        name="Harbour View Apartment",
        address="12 Quay Street, Floor 8",
        description="Two-bedroom apartment with a balcony facing the harbour.",
        type=PropertyType.APARTMENT,
        status=PropertyStatus.RENTED,
        price=Decimal("420000.00"),
        area=Decimal("78.50"),
        rooms=3,
        bathrooms=1,
        parking_spaces=1,
        year_built=2012,
    )
    cottage = Property(
        name="Maple Lane House",
        address="4 Maple Lane",
        description="Detached family house with garden.",
        type=PropertyType.HOUSE,
        status=PropertyStatus.UNDER_CONTRACT,
        price=Decimal("685000.00"),
        area=Decimal("165.00"),
        rooms=6,
        bathrooms=2,
        parking_spaces=2,
        year_built=1998,
    )
    office = Property(
        name="Central Office Suite",
        address="200 Market Avenue, Suite 5B",
        type=PropertyType.OFFICE,
        status=PropertyStatus.AVAILABLE,
        price=Decimal("950000.00"),
        area=Decimal("240.00"),
        parking_spaces=4,
        year_built=2005,
    )

    tenant = Client(
        first_name="Hana",
        last_name="Sato",
        email="hana.sato@example.com",
        phone="+81-90-1234-5678",
        address="12 Quay Street, Floor 8",
        type=ClientType.TENANT,
    )
    buyer = Client(
        first_name="Marco",
        last_name="Rossi",
        email="marco.rossi@example.com",
        phone="+39-333-555-0101",
        type=ClientType.BUYER,
    )

    lease = Contract(
        contract_number="RENT-2024-0001",
        estate_property=tower,
        client=tenant,
        type=ContractType.RENTAL,
        status=ContractStatus.ACTIVE,
        amount=Decimal("21600.00"),
        monthly_rent=Decimal("1800.00"),
        start_date=datetime(2024, 4, 1),
        end_date=datetime(2025, 3, 31),
        terms="Twelve months, renewable. Deposit of two months' rent.",
    )
    sale = Contract(
        contract_number="SALE-2024-0002",
        estate_property=cottage,
        client=buyer,
        type=ContractType.SALE,
        status=ContractStatus.PENDING,
        amount=Decimal("685000.00"),
        start_date=datetime(2024, 9, 15),
    )

    lease.transactions = [
        Transaction(
            type=TransactionType.PAYMENT,
            amount=Decimal("1800.00"),
            transaction_date=datetime(2024, 4, 1),
            description="April rent",
            status=TransactionStatus.COMPLETED,
        ),
        Transaction(
            type=TransactionType.PAYMENT,
            amount=Decimal("1800.00"),
            transaction_date=datetime(2024, 5, 1),
            description="May rent",
            status=TransactionStatus.COMPLETED,
        ),
    ]
    sale.transactions = [
        Transaction(
            type=TransactionType.COMMISSION,
            amount=Decimal("20550.00"),
            transaction_date=datetime(2024, 9, 15),
            description="Agency commission (3%)",
            status=TransactionStatus.PENDING,
        ),
    ]

    session.add_all([tower, cottage, office, tenant, buyer, lease, sale])
    session.flush()

    log.info("seed_inserted", properties=3, clients=2, contracts=2, transactions=3)
    return True


__all__ = ["seed_sample_data"]
