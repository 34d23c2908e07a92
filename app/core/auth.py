from typing import Optional
from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.exceptions import UnauthorizedError
from app.models.company import Company
from app.repositories.company_repository import CompanyRepository

API_KEY_HEADER = "x-api-key"

company_api_key_scheme = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def get_current_company(
    api_key: Optional[str] = Depends(company_api_key_scheme),
    db: Session = Depends(get_db),
) -> Company:
    if not api_key:
        raise UnauthorizedError("API Key")

    company = CompanyRepository(db).find_by_api_key(api_key)
    if company is None:
        raise UnauthorizedError("API Key")

    return company
