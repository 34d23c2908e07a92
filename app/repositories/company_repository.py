from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.business import Business
from app.models.company import Company
from app.models.employee import Employee


class CompanyRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_api_key(self, api_key: str) -> Optional[Company]:
        stmt = select(Company).where(Company.ApiKey == api_key)
        return self.db.execute(stmt).scalar_one_or_none()


class EmployeeRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.db.get(Employee, employee_id)


class BusinessRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, business_id: int) -> Optional[Business]:
        return self.db.get(Business, business_id)
