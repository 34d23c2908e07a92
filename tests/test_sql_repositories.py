"""
Smoke tests for the SQL repositories against a temporary SQLite database.
"""
from __future__ import annotations

import pytest

from app.core.exceptions import ConflictError
from app.repositories.card_repository import CardRepository
from app.repositories.company_repository import (
    BusinessRepository,
    CompanyRepository,
    EmployeeRepository,
)
from app.repositories.ledger_repository import PaymentRepository, RechargeRepository


def _card_data(employee_id, card_type="groceries", number="5500-0000-0000-0004"):
    return {
        "EmployeeID": employee_id,
        "Number": number,
        "CardholderName": "ANA M S OLIVEIRA",
        "SecurityCode": "digest",
        "ExpirationDate": "10/31",
        "IsVirtual": False,
        "IsBlocked": False,
        "Type": card_type,
    }


def test_card_insert_and_lookups(db_session, seeded):
    repo = CardRepository(db_session)
    card_id = repo.insert(_card_data(seeded.employee_id))

    card = repo.find_by_id(card_id)
    assert card.Password is None
    assert repo.find_by_details("5500-0000-0000-0004", "ANA M S OLIVEIRA", "10/31").CardID == card_id
    assert repo.find_by_details("5500-0000-0000-0004", "ANA M S OLIVEIRA", "11/31") is None
    assert repo.find_by_type_and_employee_id("groceries", seeded.employee_id).CardID == card_id
    assert repo.find_by_type_and_employee_id("health", seeded.employee_id) is None

    repo.update(card_id, {"Password": "pw-digest"})
    assert repo.find_by_id(card_id).Password == "pw-digest"


def test_duplicate_employee_type_insert_conflicts(db_session, seeded):
    repo = CardRepository(db_session)
    repo.insert(_card_data(seeded.employee_id))

    with pytest.raises(ConflictError):
        repo.insert(_card_data(seeded.employee_id, number="5500-0000-0000-0012"))

    # the session stays usable after the rollback
    repo.insert(_card_data(seeded.employee_id, "health", number="5500-0000-0000-0020"))


def test_ledgers_are_scoped_to_card(db_session, seeded):
    cards = CardRepository(db_session)
    first = cards.insert(_card_data(seeded.employee_id))
    second = cards.insert(_card_data(seeded.employee_id, "health", number="5500-0000-0000-0020"))

    recharges = RechargeRepository(db_session)
    payments = PaymentRepository(db_session)
    recharges.insert(first, 100)
    recharges.insert(second, 70)
    payments.insert(first, seeded.market_id, 30)

    assert [r.Amount for r in recharges.find_by_card_id(first)] == [100]
    assert [p.Amount for p in payments.find_by_card_id(first)] == [30]
    assert payments.find_by_card_id(second) == []


def test_company_employee_and_business_lookups(db_session, seeded):
    assert CompanyRepository(db_session).find_by_api_key("acme-key").CompanyID == seeded.acme_id
    assert CompanyRepository(db_session).find_by_api_key("missing") is None
    assert EmployeeRepository(db_session).find_by_id(seeded.employee_id).CompanyID == seeded.acme_id
    assert BusinessRepository(db_session).find_by_id(seeded.diner_id).Type == "restaurant"
    assert BusinessRepository(db_session).find_by_id(999) is None


def test_duplicate_number_insert_conflicts(db_session, seeded):
    repo = CardRepository(db_session)
    repo.insert(_card_data(seeded.employee_id))

    with pytest.raises(ConflictError):
        repo.insert(_card_data(seeded.employee_id, "health"))
