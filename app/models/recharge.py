from sqlalchemy import CheckConstraint, Column, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.core.database import Base


class Recharge(Base):
    __tablename__ = "Recharges"

    RechargeID = Column(Integer, primary_key=True, index=True)
    CardID = Column(Integer, ForeignKey("Cards.CardID"), nullable=False, index=True)
    Amount = Column(Integer, CheckConstraint("Amount > 0"), nullable=False)  # cents
    Timestamp = Column(DateTime, server_default=func.now())
