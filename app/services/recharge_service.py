"""Company-initiated recharges of employee cards."""
import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.repositories.card_repository import CardRepository
from app.repositories.company_repository import EmployeeRepository
from app.repositories.ledger_repository import RechargeRepository
from app.services.card_guards import (
    ensure_card_exists,
    ensure_employee_belongs_to_company,
    ensure_employee_exists,
    run_checks,
    spending_checks,
)

logger = logging.getLogger(__name__)


class RechargeService:
    def __init__(self, cards, employees, recharges, clock=datetime.now):
        self.cards = cards
        self.employees = employees
        self.recharges = recharges
        self.clock = clock

    @classmethod
    def from_session(cls, db: Session) -> "RechargeService":
        return cls(
            cards=CardRepository(db),
            employees=EmployeeRepository(db),
            recharges=RechargeRepository(db),
        )

    def recharge_card(self, company_id: int, card_id: int, amount: int):
        card = ensure_card_exists(self.cards.find_by_id(card_id))
        employee = ensure_employee_exists(self.employees.find_by_id(card.EmployeeID))
        ensure_employee_belongs_to_company(employee, company_id)
        run_checks(spending_checks(card, self.clock()))

        recharge = self.recharges.insert(card_id, amount)
        logger.info("Company %s recharged card %s with %s", company_id, card_id, amount)
        return recharge
