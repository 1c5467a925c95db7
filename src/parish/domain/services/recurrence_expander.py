"""Recurrence expander - turns an event template into dated instances."""

from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from parish.domain.entities import EventInstance, EventTemplate
from parish.domain.exceptions import ValidationError
from parish.domain.value_objects import RecurrencePattern

_ONE_DAY = timedelta(days=1)
_ONE_WEEK = timedelta(days=7)


def _is_plain_date(value: object) -> bool:
    return isinstance(value, date) and not isinstance(value, datetime)


class RecurrenceExpander:
    """Expands templates eagerly and in date order. Never persists anything.

    Monthly steps are computed from the start date (start + n months) and
    clamped to the last day of shorter months, so 31 Jan gives 29 Feb,
    31 Mar, 30 Apr.
    """

    def validate(self, template: EventTemplate) -> None:
        """Raise ValidationError naming the first invalid field."""
        if not _is_plain_date(template.start_date):
            raise ValidationError("date", "must be a calendar date")
        if not template.is_recurring:
            return

        if template.recurring_pattern is None:
            raise ValidationError("recurringPattern", "is required for recurring events")
        if not isinstance(template.recurring_pattern, RecurrencePattern):
            raise ValidationError(
                "recurringPattern", f"unsupported pattern: {template.recurring_pattern}"
            )
        if template.recurring_end_date is None:
            raise ValidationError("recurringEndDate", "is required for recurring events")
        if not _is_plain_date(template.recurring_end_date):
            raise ValidationError("recurringEndDate", "must be a calendar date")

        seen: set[int] = set()
        for day in template.recurring_days:
            if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 6:
                raise ValidationError(
                    "recurringDays", f"weekday must be between 0 and 6, got {day!r}"
                )
            if day in seen:
                raise ValidationError("recurringDays", f"duplicate weekday {day}")
            seen.add(day)

    def expand(self, template: EventTemplate) -> list[EventInstance]:
        """Produce every instance between start date and end date inclusive."""
        self.validate(template)
        if not template.is_recurring:
            return [self._instance(template, template.start_date)]

        pattern = template.recurring_pattern
        if pattern is RecurrencePattern.DAILY:
            dates = self._stepped(template, _ONE_DAY)
        elif pattern is RecurrencePattern.WEEKLY and not template.recurring_days:
            dates = self._stepped(template, _ONE_WEEK)
        elif pattern is RecurrencePattern.WEEKLY:
            dates = self._weekdays(template)
        else:
            dates = self._monthly(template)
        return [self._instance(template, d) for d in dates]

    def _stepped(self, template: EventTemplate, step: timedelta) -> list[date]:
        dates = []
        current = template.start_date
        while current <= template.recurring_end_date:
            dates.append(current)
            try:
                current += step
            except OverflowError:
                break
        return dates

    def _weekdays(self, template: EventTemplate) -> list[date]:
        # date.weekday() is Monday=0; recurring days use Sunday=0.
        days = set(template.recurring_days)
        dates = []
        current = template.start_date
        while current <= template.recurring_end_date:
            if (current.weekday() + 1) % 7 in days:
                dates.append(current)
            try:
                current += _ONE_DAY
            except OverflowError:
                break
        return dates

    def _monthly(self, template: EventTemplate) -> list[date]:
        dates = []
        step = 0
        current = template.start_date
        while current <= template.recurring_end_date:
            dates.append(current)
            step += 1
            try:
                current = template.start_date + relativedelta(months=step)
            except ValueError:
                # past year 9999
                break
        return dates

    @staticmethod
    def _instance(template: EventTemplate, on: date) -> EventInstance:
        return EventInstance(
            title=template.title,
            date=on,
            description=template.description,
            time=template.time,
            location=template.location,
            type=template.type,
            zoom_link=template.zoom_link,
            is_recurring=False,
        )
