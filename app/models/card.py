import enum
from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    String,
    ForeignKey,
    UniqueConstraint,
    Enum as SQLEnum,
)
from sqlalchemy.sql import func
from app.core.database import Base


class CardType(str, enum.Enum):
    GROCERIES = "groceries"
    RESTAURANT = "restaurant"
    TRANSPORT = "transport"
    EDUCATION = "education"
    HEALTH = "health"


CARD_TYPES = tuple(t.value for t in CardType)


class Card(Base):
    __tablename__ = "Cards"
    __table_args__ = (
        UniqueConstraint("EmployeeID", "Type", name="uq_cards_employee_type"),
    )

    CardID = Column(Integer, primary_key=True, index=True)
    EmployeeID = Column(Integer, ForeignKey("Employees.EmployeeID"), nullable=False)
    Number = Column(String(19), unique=True, nullable=False)
    CardholderName = Column(String(100), nullable=False)
    SecurityCode = Column(String(255), nullable=False)
    ExpirationDate = Column(String(5), nullable=False)  # MM/YY
    Password = Column(String(255), nullable=True)
    IsVirtual = Column(Boolean, nullable=False, default=False)
    OriginalCardID = Column(Integer, ForeignKey("Cards.CardID"), nullable=True)
    IsBlocked = Column(Boolean, nullable=False, default=False)
    Type = Column(SQLEnum(*CARD_TYPES, name="card_type"), nullable=False)
    CreatedAt = Column(DateTime, server_default=func.now())
