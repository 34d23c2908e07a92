from sqlalchemy import Column, Integer, String, ForeignKey
from app.core.database import Base


class Employee(Base):
    __tablename__ = "Employees"

    EmployeeID = Column(Integer, primary_key=True, index=True)
    FullName = Column(String(255), nullable=False)
    CPF = Column(String(11), unique=True, nullable=False)
    Email = Column(String(255), unique=True, nullable=False)
    CompanyID = Column(Integer, ForeignKey("Companies.CompanyID"), nullable=False)
