"""Dashboard aggregations over donation and member records."""

from collections.abc import Iterable
from datetime import date

from dateutil.relativedelta import relativedelta

from parish.domain.value_objects.dates import parse_date

CHART_MONTHS = 6


def _amount(record: dict) -> float:
    try:
        return float(record.get("amount") or 0)
    except (TypeError, ValueError):
        return 0.0


def recent_months(today: date, count: int = CHART_MONTHS) -> list[date]:
    """First day of each of the last count months, oldest first, ending with today's."""
    first = today.replace(day=1)
    return [first - relativedelta(months=offset) for offset in range(count - 1, -1, -1)]


def monthly_donation_totals(
    donations: Iterable[dict], today: date, count: int = CHART_MONTHS
) -> list[dict]:
    """Donation totals per calendar month for the chart."""
    months = recent_months(today, count)
    totals = {(m.year, m.month): 0.0 for m in months}
    for record in donations:
        donated_on = parse_date(record.get("date"))
        if donated_on is None:
            continue
        key = (donated_on.year, donated_on.month)
        if key in totals:
            totals[key] += _amount(record)
    return [
        {"label": m.strftime("%b"), "year": m.year, "month": m.month, "total": totals[(m.year, m.month)]}
        for m in months
    ]


def member_growth(
    members: Iterable[dict], today: date, count: int = CHART_MONTHS
) -> list[dict]:
    """Cumulative member count at the end of each recent month."""
    join_dates = [parse_date(m.get("joinDate")) for m in members]
    join_dates = [d for d in join_dates if d is not None]
    growth = []
    for month in recent_months(today, count):
        month_end = month + relativedelta(months=1, days=-1)
        growth.append(
            {
                "label": month.strftime("%b"),
                "year": month.year,
                "month": month.month,
                "members": sum(1 for d in join_dates if d <= month_end),
            }
        )
    return growth


def donation_summary(donations: Iterable[dict], today: date) -> dict:
    items = list(donations)
    this_month = []
    by_category: dict[str, float] = {}
    for record in items:
        category = record.get("category") or "other"
        by_category[category] = by_category.get(category, 0.0) + _amount(record)
        donated_on = parse_date(record.get("date"))
        if donated_on and (donated_on.year, donated_on.month) == (today.year, today.month):
            this_month.append(record)
    return {
        "total": sum(_amount(r) for r in items),
        "count": len(items),
        "monthly_total": sum(_amount(r) for r in this_month),
        "monthly_count": len(this_month),
        "by_category": by_category,
    }


def member_summary(members: Iterable[dict]) -> dict:
    items = list(members)
    return {
        "total": len(items),
        "active": sum(1 for m in items if m.get("status", "active") == "active"),
        "inactive": sum(1 for m in items if m.get("status") == "inactive"),
    }
