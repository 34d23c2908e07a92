# app/routes/recharges.py
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
from app.controllers.recharges.companies import create_recharge
from app.schemas.recharge_schema import RechargeCreate
from app.models.company import Company
from app.core.auth import get_current_company
from app.core.database import get_db
from app.core.schemas import BaseResponse
from app.core.rate_limiter import limiter, RATE_LIMIT_COMPANY

router = APIRouter()


@router.post("", response_model=BaseResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_LIMIT_COMPANY)
def create_recharge_route(
    request: Request,
    recharge: RechargeCreate,
    company: Company = Depends(get_current_company),
    db: Session = Depends(get_db),
):
    return create_recharge(company, recharge, db)
