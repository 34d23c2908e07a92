from sqlalchemy.orm import Session
from app.core.responses import success_response
from app.schemas.card_schema import BalanceResponse, CardActivate
from app.services.card_service import CardService


def activate_card(card_id: int, activation: CardActivate, db: Session):
    service = CardService.from_session(db)
    service.activate_card(card_id, activation.SecurityCode, activation.Password)

    return success_response(
        message="Card activated successfully", data={"CardID": card_id}
    )


def get_card_balance(card_id: int, db: Session):
    service = CardService.from_session(db)
    card_balance = service.calculate_balance(card_id)

    return success_response(
        message="Balance retrieved successfully",
        data=BalanceResponse.model_validate(card_balance, from_attributes=True).model_dump(),
    )
