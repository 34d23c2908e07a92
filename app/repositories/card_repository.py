"""Card persistence helpers backed by a SQLAlchemy session."""
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, DatabaseError
from app.models.card import Card


class CardRepository:
    def __init__(self, db: Session):
        self.db = db

    def insert(self, card_data: Dict[str, Any]) -> int:
        card = Card(**card_data)
        try:
            self.db.add(card)
            self.db.commit()
        except IntegrityError:
            # Either unique constraint tripped: a repeated Number, or a concurrent
            # request issuing the same (EmployeeID, Type) card first
            self.db.rollback()
            raise ConflictError("Card")
        except SQLAlchemyError:
            self.db.rollback()
            raise DatabaseError("Failed to create card")
        self.db.refresh(card)
        return card.CardID

    def find_by_id(self, card_id: int) -> Optional[Card]:
        return self.db.get(Card, card_id)

    def find_by_details(
        self, number: str, cardholder_name: str, expiration_date: str
    ) -> Optional[Card]:
        stmt = select(Card).where(
            Card.Number == number,
            Card.CardholderName == cardholder_name,
            Card.ExpirationDate == expiration_date,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_type_and_employee_id(
        self, card_type: str, employee_id: int
    ) -> Optional[Card]:
        stmt = select(Card).where(Card.Type == card_type, Card.EmployeeID == employee_id)
        return self.db.execute(stmt).scalars().first()

    def update(self, card_id: int, card_data: Dict[str, Any]) -> None:
        card = self.db.get(Card, card_id)
        if card is None:
            return
        for key, value in card_data.items():
            setattr(card, key, value)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise DatabaseError("Failed to update card")
