from __future__ import annotations


def round_money(value: float) -> float:
    return round(float(value), 2)


def round_balance(value: float) -> float:
    """Leave balances are shown with one decimal."""
    return round(float(value), 1)
