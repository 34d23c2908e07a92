from sqlalchemy import Column, Integer, String, Enum as SQLEnum
from app.core.database import Base
from app.models.card import CARD_TYPES


class Business(Base):
    __tablename__ = "Businesses"

    BusinessID = Column(Integer, primary_key=True, index=True)
    Name = Column(String(100), unique=True, nullable=False)
    Type = Column(SQLEnum(*CARD_TYPES, name="card_type"), nullable=False)
