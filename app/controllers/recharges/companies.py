from sqlalchemy.orm import Session
from app.core.responses import created_response
from app.models.company import Company
from app.schemas.recharge_schema import RechargeCreate, RechargeResponse
from app.services.recharge_service import RechargeService


def create_recharge(company: Company, recharge: RechargeCreate, db: Session):
    service = RechargeService.from_session(db)
    new_recharge = service.recharge_card(company.CompanyID, recharge.CardID, recharge.Amount)

    return created_response(
        message="Card recharged successfully",
        data=RechargeResponse.model_validate(new_recharge).model_dump(),
    )
