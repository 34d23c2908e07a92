from sqlalchemy.orm import Session
from app.core.responses import created_response
from app.schemas.payment_schema import PaymentCreate, PaymentResponse
from app.services.payment_service import PaymentService


def create_payment(payment: PaymentCreate, db: Session):
    service = PaymentService.from_session(db)
    new_payment = service.purchase(
        payment.CardID, payment.Password, payment.BusinessID, payment.Amount
    )

    return created_response(
        message="Purchase completed successfully",
        data=PaymentResponse.model_validate(new_payment).model_dump(),
    )
