"""
Development-mode demo accounts.

Three hard-coded identities that log in without touching the backend.
Only wired in when ``settings.enable_demo_accounts`` is true; this is a
local convenience, not a security boundary.
"""

import time
from typing import Optional

from .models import DemoAccount

DEMO_TOKEN_PREFIX = "demo_token_"

DEMO_ACCOUNTS: dict[str, DemoAccount] = {
    account.email: account
    for account in (
        DemoAccount(
            id="1",
            email="admin@fleet.com",
            password="admin123",
            first_name="Admin",
            last_name="User",
            role="admin",
        ),
        DemoAccount(
            id="2",
            email="user@fleet.com",
            password="user123",
            first_name="Regular",
            last_name="User",
            role="user",
        ),
        DemoAccount(
            id="3",
            email="warehouse@fleet.com",
            password="warehouse123",
            first_name="Warehouse",
            last_name="Manager",
            role="warehouse",
        ),
    )
}


def match_demo_account(
    accounts: dict[str, DemoAccount], email: str, password: str
) -> Optional[DemoAccount]:
    """Return the demo account only when both email and password match."""
    account = accounts.get(email)
    if account is not None and account.password == password:
        return account
    return None


def make_demo_token(role: str, now_ms: Optional[int] = None) -> str:
    """Synthetic token in the form ``demo_token_<role>_<epoch-ms>``."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{DEMO_TOKEN_PREFIX}{role}_{now_ms}"


def is_demo_token(token: Optional[str]) -> bool:
    return bool(token) and token.startswith(DEMO_TOKEN_PREFIX)
