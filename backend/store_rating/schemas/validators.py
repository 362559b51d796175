"""Field rules shared by the user-facing request bodies.

Each checker returns the cleaned value or raises ``ValueError`` with the
message that ends up in the 400 response's ``errors`` list.
"""
from __future__ import annotations

import re

from email_validator import EmailNotValidError, validate_email

NAME_MIN_LEN = 20
NAME_MAX_LEN = 60
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 16
ADDRESS_MAX_LEN = 400
PASSWORD_SPECIALS = "!@#$&*"

NAME_MSG = f"Name must be between {NAME_MIN_LEN} and {NAME_MAX_LEN} characters."
EMAIL_MSG = "Please include a valid email."
PASSWORD_MSG = (
    f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters and include "
    "one uppercase letter and one special character."
)
ADDRESS_MSG = f"Address must not exceed {ADDRESS_MAX_LEN} characters."

_PASSWORD_RE = re.compile(r"^(?=.*[A-Z])(?=.*[" + re.escape(PASSWORD_SPECIALS) + r"]).*$")


def check_name(v: str, *, min_len: int = NAME_MIN_LEN, max_len: int = NAME_MAX_LEN, msg: str = NAME_MSG) -> str:
    v = (v or "").strip()
    if not (min_len <= len(v) <= max_len):
        raise ValueError(msg)
    return v


def check_email(v: str) -> str:
    try:
        validate_email(v or "", check_deliverability=False)
    except EmailNotValidError:
        raise ValueError(EMAIL_MSG)
    return v.strip().lower()


def check_password(v: str) -> str:
    if not (PASSWORD_MIN_LEN <= len(v or "") <= PASSWORD_MAX_LEN) or not _PASSWORD_RE.match(v):
        raise ValueError(PASSWORD_MSG)
    return v


def check_address(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    if len(v) > ADDRESS_MAX_LEN:
        raise ValueError(ADDRESS_MSG)
    return v
