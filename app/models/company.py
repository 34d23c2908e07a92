from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Company(Base):
    __tablename__ = "Companies"

    CompanyID = Column(Integer, primary_key=True, index=True)
    Name = Column(String(100), unique=True, nullable=False)
    ApiKey = Column(String(255), unique=True, nullable=True, index=True)
