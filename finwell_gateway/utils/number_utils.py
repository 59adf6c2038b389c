"""Numeric helpers shared by the domain calculators"""

from typing import Optional


def coalesce(value: Optional[float], default: float = 0.0) -> float:
    """Missing numeric fields count as the default (0) rather than an error"""
    return default if value is None else value


def safe_ratio(numerator: float, denominator: float) -> float:
    """
    Ratio with the max-risk fallback.

    A non-positive denominator (no income) resolves to 1.0 instead of raising,
    which the risk rules read as "fully consumed".
    """
    return numerator / denominator if denominator > 0 else 1.0


def round_money(amount: float) -> float:
    """Round to cents for presentation"""
    return round(amount, 2)
