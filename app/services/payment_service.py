"""Point-of-sale purchases charged against a card balance."""
import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.core.utils import BcryptHasher
from app.repositories.company_repository import BusinessRepository
from app.repositories.ledger_repository import PaymentRepository
from app.services.card_guards import (
    ensure_business_accepts_card,
    ensure_business_exists,
    ensure_card_has_balance,
    ensure_card_is_not_blocked,
    ensure_password_is_valid,
    run_checks,
    spending_checks,
)
from app.services.card_service import CardService

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, card_service: CardService, businesses, payments, hasher=None):
        self.card_service = card_service
        self.businesses = businesses
        self.payments = payments
        self.hasher = hasher or BcryptHasher()

    @classmethod
    def from_session(cls, db: Session) -> "PaymentService":
        return cls(
            card_service=CardService.from_session(db),
            businesses=BusinessRepository(db),
            payments=PaymentRepository(db),
        )

    def purchase(self, card_id: int, password: str, business_id: int, amount: int):
        card = self.card_service.ensure_card_exists(card_id)
        run_checks(
            spending_checks(card, self.card_service.clock())
            + [
                lambda: ensure_card_is_not_blocked(card),
                lambda: ensure_password_is_valid(card, password, self.hasher),
            ]
        )

        business = ensure_business_exists(self.businesses.find_by_id(business_id))
        ensure_business_accepts_card(business, card)

        balance = self.card_service.calculate_balance(card_id)["balance"]
        ensure_card_has_balance(balance, amount)

        payment = self.payments.insert(card_id, business_id, amount)
        logger.info("Card %s paid %s at business %s", card_id, amount, business_id)
        return payment
