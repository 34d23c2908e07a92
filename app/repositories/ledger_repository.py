"""Append-only recharge and payment ledgers."""
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import DatabaseError
from app.models.payment import Payment
from app.models.recharge import Recharge


def _append(db: Session, entry, label: str):
    try:
        db.add(entry)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise DatabaseError(f"Failed to record {label}")
    db.refresh(entry)
    return entry


class RechargeRepository:
    def __init__(self, db: Session):
        self.db = db

    def insert(self, card_id: int, amount: int) -> Recharge:
        return _append(self.db, Recharge(CardID=card_id, Amount=amount), "recharge")

    def find_by_card_id(self, card_id: int) -> List[Recharge]:
        stmt = select(Recharge).where(Recharge.CardID == card_id).order_by(Recharge.RechargeID)
        return list(self.db.execute(stmt).scalars().all())


class PaymentRepository:
    def __init__(self, db: Session):
        self.db = db

    def insert(self, card_id: int, business_id: int, amount: int) -> Payment:
        payment = Payment(CardID=card_id, BusinessID=business_id, Amount=amount)
        return _append(self.db, payment, "payment")

    def find_by_card_id(self, card_id: int) -> List[Payment]:
        stmt = select(Payment).where(Payment.CardID == card_id).order_by(Payment.PaymentID)
        return list(self.db.execute(stmt).scalars().all())
