# app/routes/payments.py
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
from app.controllers.payments.pos import create_payment
from app.schemas.payment_schema import PaymentCreate
from app.core.database import get_db
from app.core.schemas import BaseResponse
from app.core.rate_limiter import limiter, RATE_LIMIT_DEFAULT

router = APIRouter()


@router.post("", response_model=BaseResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_LIMIT_DEFAULT)
def create_payment_route(
    request: Request, payment: PaymentCreate, db: Session = Depends(get_db)
):
    return create_payment(payment, db)
