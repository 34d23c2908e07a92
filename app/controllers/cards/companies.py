from sqlalchemy.orm import Session
from app.core.responses import created_response
from app.models.company import Company
from app.schemas.card_schema import CardCreate, CardResponse
from app.services.card_service import CardService


def create_card(company: Company, card: CardCreate, db: Session):
    service = CardService.from_session(db)
    new_card = service.issue_card(card.Type.value, card.EmployeeID, company.CompanyID)

    return created_response(
        message="Card created successfully",
        data=CardResponse.model_validate(new_card).model_dump(),
    )
