"""Recurrence patterns for event templates."""

from enum import StrEnum


class RecurrencePattern(StrEnum):
    """How often a recurring event repeats."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
