"""Currency helpers shared by carts and orders."""

import os

FALLBACK_CURRENCY = "UGX"


def default_currency() -> str:
    """Currency that cart totals and orders are denominated in."""
    return os.getenv("SMARTSHOP_CURRENCY", FALLBACK_CURRENCY).upper()


def format_money(amount: float, currency: str | None = None) -> str:
    return f"{currency or default_currency()} {amount:.2f}"
