from datetime import datetime
from pydantic import BaseModel, ConfigDict, conint
from typing import Optional


class RechargeCreate(BaseModel):
    CardID: int
    Amount: conint(gt=0)  # type: ignore


class RechargeResponse(BaseModel):
    RechargeID: int
    CardID: int
    Amount: int
    Timestamp: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)
