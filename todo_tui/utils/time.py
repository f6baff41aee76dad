"""
time.py - time utilities
Single responsibility: common time and date helpers.
"""
from datetime import datetime


def now_iso() -> str:
    return datetime.now().isoformat(sep=" ", timespec="seconds")


def is_valid_date(value: str) -> bool:
    """True for a real calendar date written as YYYY-MM-DD."""
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except (ValueError, TypeError):
        return False
    return True
