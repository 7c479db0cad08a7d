"""Date manipulation utilities"""

from datetime import date


def count_days_inclusive(start: date, end: date) -> int:
    """Number of calendar days from start to end, both included"""
    return (end - start).days + 1
