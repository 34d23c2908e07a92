# app/core/utils.py
import os
import secrets
from datetime import datetime
from typing import Optional
from dateutil.relativedelta import relativedelta
from passlib.context import CryptContext

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 10))
CARD_VALIDITY_YEARS = int(os.getenv("CARD_VALIDITY_YEARS", 5))
EXPIRATION_FORMAT = "%m/%y"

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__default_rounds=BCRYPT_ROUNDS
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: Optional[str]) -> bool:
    if not hashed:
        return False
    return pwd_context.verify(plain, hashed)


class BcryptHasher:
    """One-way hash and verify for security codes and passwords."""

    def hash(self, plaintext: str) -> str:
        return hash_password(plaintext)

    def verify(self, plaintext: str, digest: Optional[str]) -> bool:
        return verify_password(plaintext, digest)


# <========== Card data generation ==========>
MASTERCARD_PREFIXES = ("51", "52", "53", "54", "55")


def luhn_check_digit(partial: str) -> int:
    digits = [int(d) for d in partial[::-1]]
    # The check digit is appended on the right, so doubling starts at the last digit
    for i in range(0, len(digits), 2):
        doubled = digits[i] * 2
        digits[i] = doubled - 9 if doubled > 9 else doubled
    return (10 - sum(digits) % 10) % 10


def is_luhn_valid(number: str) -> bool:
    digits = number.replace("-", "")
    return digits.isdigit() and luhn_check_digit(digits[:-1]) == int(digits[-1])


class CardDataGenerator:
    """Random Mastercard-style numbers and three digit security codes."""

    def card_number(self) -> str:
        prefix = secrets.choice(MASTERCARD_PREFIXES)
        body = "".join(str(secrets.randbelow(10)) for _ in range(13))
        partial = prefix + body
        digits = partial + str(luhn_check_digit(partial))
        return "-".join(digits[i : i + 4] for i in range(0, 16, 4))

    def security_code(self) -> str:
        return f"{secrets.randbelow(1000):03d}"


# <========== Card naming and expiration ==========>
def format_cardholder_name(full_name: str) -> str:
    names = full_name.split()
    if len(names) <= 2:
        return full_name

    kept = [names[0]]
    for name in names[1:-1]:
        if len(name) < 3:
            continue
        kept.append(name[0])
    kept.append(names[-1])
    return " ".join(kept).upper()


def build_expiration_date(now: Optional[datetime] = None, years: int = CARD_VALIDITY_YEARS) -> str:
    now = now or datetime.now()
    return (now + relativedelta(years=years)).strftime(EXPIRATION_FORMAT)


def months_until_expiration(expiration_date: str, now: Optional[datetime] = None) -> int:
    """Whole months from now until the first day of the expiration month.

    Partial months are truncated toward zero, so a card stays valid through
    its whole expiration month and turns negative on the month after.
    """
    now = now or datetime.now()
    expires = datetime.strptime(expiration_date, EXPIRATION_FORMAT)
    delta = relativedelta(expires, now)
    return delta.years * 12 + delta.months
