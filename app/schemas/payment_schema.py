from datetime import datetime
from pydantic import BaseModel, ConfigDict, conint, constr
from typing import Optional


class PaymentCreate(BaseModel):
    CardID: int
    Password: constr(min_length=4, max_length=4, pattern=r"^\d{4}$")  # type: ignore
    BusinessID: int
    Amount: conint(gt=0)  # type: ignore


class PaymentResponse(BaseModel):
    PaymentID: int
    CardID: int
    BusinessID: int
    Amount: int
    Timestamp: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)
