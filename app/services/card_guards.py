"""
Guard predicates shared by the card, recharge and payment flows.

Every guard raises exactly one typed failure. Flows compose them with
``run_checks`` so the order in which they fire is explicit: existence,
then state, then secrets.
"""
from typing import Callable, Iterable, List, Optional

from app.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)
from app.core.utils import months_until_expiration

Check = Callable[[], None]


def run_checks(checks: Iterable[Check]) -> None:
    """Run each check in order; the first failure propagates."""
    for check in checks:
        check()


def ensure_card_exists(card):
    if not card:
        raise NotFoundError("Card")
    return card


def ensure_card_is_not_active(card) -> None:
    if card.Password:
        raise ConflictError("Password")


def ensure_card_is_active(card) -> None:
    if not card.Password:
        raise ForbiddenError("Card")


def ensure_card_is_not_expired(card, now=None) -> None:
    if months_until_expiration(card.ExpirationDate, now) < 0:
        raise ForbiddenError("Card")


def ensure_card_is_not_blocked(card) -> None:
    if card.IsBlocked:
        raise ForbiddenError("Card")


def ensure_security_code_is_valid(card, security_code: str, hasher) -> None:
    if not hasher.verify(security_code, card.SecurityCode):
        raise UnauthorizedError("CVC")


def ensure_password_is_valid(card, password: str, hasher) -> None:
    if not hasher.verify(password, card.Password):
        raise UnauthorizedError("Password")


def ensure_card_has_balance(balance: int, amount: int) -> None:
    if balance < amount:
        raise ForbiddenError("Balance")


def ensure_employee_exists(employee):
    if not employee:
        raise NotFoundError("Employee")
    return employee


def ensure_employee_has_no_card(existing_card) -> None:
    if existing_card is not None:
        raise ConflictError("Card")


def ensure_employee_belongs_to_company(employee, company_id: Optional[int]) -> None:
    if company_id is not None and employee.CompanyID != company_id:
        raise ForbiddenError("Employee")


def ensure_business_exists(business):
    if not business:
        raise NotFoundError("Business")
    return business


def ensure_business_accepts_card(business, card) -> None:
    if business.Type != card.Type:
        raise ForbiddenError("Business")


def activation_checks(card, security_code: str, hasher, now=None) -> List[Check]:
    """Checks run against an existing card before it can be activated."""
    return [
        lambda: ensure_card_is_not_active(card),
        lambda: ensure_card_is_not_expired(card, now),
        lambda: ensure_security_code_is_valid(card, security_code, hasher),
    ]


def spending_checks(card, now=None) -> List[Check]:
    """State checks shared by every flow that moves money on a card."""
    return [
        lambda: ensure_card_is_active(card),
        lambda: ensure_card_is_not_expired(card, now),
    ]
