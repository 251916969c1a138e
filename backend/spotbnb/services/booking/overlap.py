# backend/spotbnb/services/booking/overlap.py
from __future__ import annotations
from datetime import date


def _within(d: date, start: date, end: date) -> bool:
    return start <= d <= end


def ranges_overlap(start: date, end: date, other_start: date, other_end: date) -> bool:
    # 両端を含む区間の交差
    return start <= other_end and end >= other_start


def conflict_errors(start: date, end: date, other_start: date, other_end: date) -> dict[str, str]:
    """Field messages describing how [start, end] collides with an existing booking."""
    errors: dict[str, str] = {}
    if _within(start, other_start, other_end):
        errors["startDate"] = "Start date conflicts with an existing booking"
    if _within(end, other_start, other_end):
        errors["endDate"] = "End date conflicts with an existing booking"
    if not errors and ranges_overlap(start, end, other_start, other_end):
        # 既存予約を丸ごと包含
        errors["startDate"] = "Start date conflicts with an existing booking"
        errors["endDate"] = "End date conflicts with an existing booking"
    return errors
