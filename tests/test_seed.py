# tests/test_seed.py
from sqlalchemy import func, select

from estate_http_api.db.models import Client, Contract, Property, Transaction
from estate_http_api.db.seed import seed_sample_data


def _count(session, model) -> int:
    return session.execute(select(func.count(model.id))).scalar_one()


def test_seed_inserts_related_rows_once(session) -> None:
    assert seed_sample_data(session) is True
    session.commit()

    assert _count(session, Property) == 3
    assert _count(session, Client) == 2
    assert _count(session, Contract) == 2
    assert _count(session, Transaction) == 3

    lease = session.execute(
        select(Contract).where(Contract.contract_number == "RENT-2024-0001")
    ).scalar_one()
    assert lease.property_name == "Harbour View Apartment"
    assert lease.client_name == "Hana Sato"

    assert seed_sample_data(session) is False
    assert _count(session, Property) == 3
