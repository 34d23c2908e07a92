"""
Card lifecycle: issuing cards to employees, activating them and computing
their balance from the recharge and payment ledgers.

Collaborators (repositories, hasher, generator) are injected so the
service runs unchanged against the SQL repositories or in-memory fakes.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.core.utils import (
    BcryptHasher,
    CardDataGenerator,
    build_expiration_date,
    format_cardholder_name,
)
from app.repositories.card_repository import CardRepository
from app.repositories.company_repository import EmployeeRepository
from app.repositories.ledger_repository import PaymentRepository, RechargeRepository
from app.services.card_guards import (
    activation_checks,
    ensure_card_exists,
    ensure_employee_belongs_to_company,
    ensure_employee_exists,
    ensure_employee_has_no_card,
    run_checks,
)

logger = logging.getLogger(__name__)


class CardService:
    def __init__(
        self,
        cards,
        employees,
        recharges,
        payments,
        hasher=None,
        generator=None,
        clock=datetime.now,
    ):
        self.cards = cards
        self.employees = employees
        self.recharges = recharges
        self.payments = payments
        self.hasher = hasher or BcryptHasher()
        self.generator = generator or CardDataGenerator()
        self.clock = clock

    @classmethod
    def from_session(cls, db: Session) -> "CardService":
        return cls(
            cards=CardRepository(db),
            employees=EmployeeRepository(db),
            recharges=RechargeRepository(db),
            payments=PaymentRepository(db),
        )

    # <========== Creation ==========>
    def build_card_data(
        self, card_type: str, employee_id: int, company_id: Optional[int] = None
    ) -> Dict[str, Any]:
        employee = ensure_employee_exists(self.employees.find_by_id(employee_id))
        ensure_employee_belongs_to_company(employee, company_id)
        ensure_employee_has_no_card(
            self.find_by_type_and_employee_id(card_type, employee_id)
        )

        return {
            "EmployeeID": employee_id,
            "Number": self.generator.card_number(),
            "CardholderName": format_cardholder_name(employee.FullName),
            "SecurityCode": self.generator.security_code(),
            "ExpirationDate": build_expiration_date(self.clock()),
            "IsVirtual": False,
            "IsBlocked": False,
            "Type": card_type,
        }

    def create_new_card(self, card_data: Dict[str, Any]) -> int:
        stored = dict(card_data)
        stored["SecurityCode"] = self.hasher.hash(card_data["SecurityCode"])
        card_id = self.cards.insert(stored)
        logger.info(
            "Issued %s card %s for employee %s",
            card_data["Type"],
            card_id,
            card_data["EmployeeID"],
        )
        return card_id

    def issue_card(self, card_type: str, employee_id: int, company_id: Optional[int] = None):
        card_data = self.build_card_data(card_type, employee_id, company_id)
        card_id = self.create_new_card(card_data)
        return self.find_by_id(card_id)

    # <========== Activation ==========>
    def ensure_card_exists(self, card_id: int):
        return ensure_card_exists(self.find_by_id(card_id))

    def activate_card(self, card_id: int, security_code: str, password: str) -> None:
        card = self.ensure_card_exists(card_id)
        run_checks(activation_checks(card, security_code, self.hasher, self.clock()))

        self.cards.update(card_id, {"Password": self.hasher.hash(password)})
        logger.info("Activated card %s", card_id)

    # <========== Balance ==========>
    def calculate_balance(self, card_id: int) -> Dict[str, Any]:
        self.ensure_card_exists(card_id)

        recharges = self.recharges.find_by_card_id(card_id)
        transactions = self.payments.find_by_card_id(card_id)

        balance = 0
        for recharge in recharges:
            balance += recharge.Amount
        for transaction in transactions:
            balance -= transaction.Amount

        return {
            "balance": balance,
            "transactions": transactions,
            "recharges": recharges,
        }

    # <========== Lookups ==========>
    def find_by_id(self, card_id: int):
        return self.cards.find_by_id(card_id)

    def find_by_details(self, number: str, cardholder_name: str, expiration_date: str):
        return self.cards.find_by_details(number, cardholder_name, expiration_date)

    def find_by_type_and_employee_id(self, card_type: str, employee_id: int):
        return self.cards.find_by_type_and_employee_id(card_type, employee_id)
