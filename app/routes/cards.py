# app/routes/cards.py
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

# Controllers
from app.controllers.cards.companies import create_card
from app.controllers.cards.employees import activate_card, get_card_balance

# Schemas
from app.schemas.card_schema import CardActivate, CardCreate

# Models
from app.models.company import Company

# Core
from app.core.auth import get_current_company
from app.core.database import get_db
from app.core.schemas import BaseResponse
from app.core.rate_limiter import (
    limiter,
    RATE_LIMIT_ACTIVATION,
    RATE_LIMIT_COMPANY,
    RATE_LIMIT_PUBLIC,
)

router = APIRouter()


@router.post("", response_model=BaseResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_LIMIT_COMPANY)
def create_card_route(
    request: Request,
    card: CardCreate,
    company: Company = Depends(get_current_company),
    db: Session = Depends(get_db),
):
    return create_card(company, card, db)


@router.post("/{card_id}/activate", response_model=BaseResponse)
@limiter.limit(RATE_LIMIT_ACTIVATION)
def activate_card_route(
    request: Request,
    card_id: int,
    activation: CardActivate,
    db: Session = Depends(get_db),
):
    return activate_card(card_id, activation, db)


@router.get("/{card_id}/balance", response_model=BaseResponse)
@limiter.limit(RATE_LIMIT_PUBLIC)
def get_card_balance_route(
    request: Request, card_id: int, db: Session = Depends(get_db)
):
    return get_card_balance(card_id, db)
