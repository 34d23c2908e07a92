from sqlalchemy import CheckConstraint, Column, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.core.database import Base


class Payment(Base):
    __tablename__ = "Payments"

    PaymentID = Column(Integer, primary_key=True, index=True)
    CardID = Column(Integer, ForeignKey("Cards.CardID"), nullable=False, index=True)
    BusinessID = Column(Integer, ForeignKey("Businesses.BusinessID"), nullable=False)
    Amount = Column(Integer, CheckConstraint("Amount > 0"), nullable=False)  # cents
    Timestamp = Column(DateTime, server_default=func.now())
