from pydantic import BaseModel, ConfigDict, constr
from datetime import datetime
from typing import List, Optional

from app.models.card import CardType
from app.schemas.payment_schema import PaymentResponse
from app.schemas.recharge_schema import RechargeResponse


class CardCreate(BaseModel):
    EmployeeID: int
    Type: CardType


class CardActivate(BaseModel):
    SecurityCode: constr(min_length=3, max_length=3, pattern=r"^\d{3}$")  # type: ignore
    Password: constr(min_length=4, max_length=4, pattern=r"^\d{4}$")  # type: ignore


class CardResponse(BaseModel):
    CardID: int
    EmployeeID: int
    Number: str
    CardholderName: str
    ExpirationDate: str
    IsVirtual: bool
    IsBlocked: bool
    Type: str
    CreatedAt: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class BalanceResponse(BaseModel):
    balance: int
    transactions: List[PaymentResponse]
    recharges: List[RechargeResponse]
