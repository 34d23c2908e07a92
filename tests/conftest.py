from __future__ import annotations

import os
import tempfile
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

# Settings are read at import time, so the test database and limits go first
_TMP_DIR = Path(tempfile.mkdtemp(prefix="benefit-cards-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"

from app.core.database import Base, SessionLocal, create_tables, engine  # noqa: E402
from app.models.business import Business  # noqa: E402
from app.models.company import Company  # noqa: E402
from app.models.employee import Employee  # noqa: E402
from app.services.card_service import CardService  # noqa: E402

NOW = datetime(2026, 10, 19, 12, 0, 0)


# <========== Fakes ==========>
class FakeCardRepository:
    def __init__(self):
        self.rows = {}
        self.next_id = 1

    def insert(self, card_data):
        card_id = self.next_id
        self.next_id += 1
        self.rows[card_id] = SimpleNamespace(
            CardID=card_id, Password=None, OriginalCardID=None, **card_data
        )
        return card_id

    def find_by_id(self, card_id):
        return self.rows.get(card_id)

    def find_by_details(self, number, cardholder_name, expiration_date):
        for card in self.rows.values():
            if (card.Number, card.CardholderName, card.ExpirationDate) == (
                number,
                cardholder_name,
                expiration_date,
            ):
                return card
        return None

    def find_by_type_and_employee_id(self, card_type, employee_id):
        for card in self.rows.values():
            if card.Type == card_type and card.EmployeeID == employee_id:
                return card
        return None

    def update(self, card_id, card_data):
        for key, value in card_data.items():
            setattr(self.rows[card_id], key, value)


class FakeEmployeeRepository:
    def __init__(self, employees=None):
        self.employees = {e.EmployeeID: e for e in employees or []}

    def find_by_id(self, employee_id):
        return self.employees.get(employee_id)


class FakeLedgerRepository:
    def __init__(self):
        self.entries = []

    def add(self, card_id, amount, **extra):
        entry = SimpleNamespace(CardID=card_id, Amount=amount, **extra)
        self.entries.append(entry)
        return entry

    def insert(self, card_id, *args):
        # recharges: (card_id, amount); payments: (card_id, business_id, amount)
        if len(args) == 2:
            return self.add(card_id, args[1], BusinessID=args[0])
        return self.add(card_id, args[0])

    def find_by_card_id(self, card_id):
        return [e for e in self.entries if e.CardID == card_id]


class FakeHasher:
    def __init__(self):
        self.hashed = []

    def hash(self, plaintext):
        self.hashed.append(plaintext)
        return f"hashed:{plaintext}"

    def verify(self, plaintext, digest):
        return digest == f"hashed:{plaintext}"


class FakeGenerator:
    def card_number(self):
        return "5500-0000-0000-0004"

    def security_code(self):
        return "123"


def make_employee(employee_id=1, full_name="Ana Maria Souza Oliveira", company_id=1):
    return SimpleNamespace(EmployeeID=employee_id, FullName=full_name, CompanyID=company_id)


@pytest.fixture()
def fake_repos():
    return SimpleNamespace(
        cards=FakeCardRepository(),
        employees=FakeEmployeeRepository(
            [make_employee(), make_employee(2, "Ana Souza"), make_employee(3, "Bruno Lima", 2)]
        ),
        recharges=FakeLedgerRepository(),
        payments=FakeLedgerRepository(),
        hasher=FakeHasher(),
    )


@pytest.fixture()
def card_service(fake_repos):
    return CardService(
        cards=fake_repos.cards,
        employees=fake_repos.employees,
        recharges=fake_repos.recharges,
        payments=fake_repos.payments,
        hasher=fake_repos.hasher,
        generator=FakeGenerator(),
        clock=lambda: NOW,
    )


@pytest.fixture()
def active_card(card_service, fake_repos):
    """An activated groceries card with password 1234."""
    card_id = card_service.create_new_card(card_service.build_card_data("groceries", 1))
    card_service.activate_card(card_id, "123", "1234")
    return fake_repos.cards.find_by_id(card_id)


# <========== Database ==========>
@pytest.fixture()
def db_session():
    """Fresh schema on the temporary SQLite database for each test."""
    Base.metadata.drop_all(bind=engine)
    create_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def seeded(db_session):
    acme = Company(Name="Acme", ApiKey="acme-key")
    globex = Company(Name="Globex", ApiKey="globex-key")
    db_session.add_all([acme, globex])
    db_session.flush()
    ana = Employee(
        FullName="Ana Maria Souza Oliveira",
        CPF="12345678901",
        Email="ana@acme.test",
        CompanyID=acme.CompanyID,
    )
    market = Business(Name="Green Market", Type="groceries")
    diner = Business(Name="Corner Diner", Type="restaurant")
    db_session.add_all([ana, market, diner])
    db_session.commit()
    return SimpleNamespace(
        acme_id=acme.CompanyID,
        globex_id=globex.CompanyID,
        employee_id=ana.EmployeeID,
        market_id=market.BusinessID,
        diner_id=diner.BusinessID,
    )
