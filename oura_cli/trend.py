"""Joining per-day metric series by date."""

from datetime import date
from typing import Optional, Sequence, TypeVar

from oura_cli.models import (
    DailyActivity,
    DailyReadiness,
    DailySleep,
    OuraModel,
    SleepPeriod,
    TrendRow,
    TrendTable,
)

RecordT = TypeVar("RecordT", bound=OuraModel)


def for_day(records: Sequence[RecordT], day: date) -> Optional[RecordT]:
    """Return the record for `day` from an over-fetched collection, if any."""
    return next((r for r in records if r.day == day), None)


def periods_for_day(periods: Sequence[SleepPeriod], day: date) -> list[SleepPeriod]:
    """Sleep periods belonging to `day`, in fetched order."""
    return [p for p in periods if p.day == day]


def _scores_by_day(records: Sequence[OuraModel]) -> dict[date, Optional[int]]:
    return {r.day: r.score for r in records}


def _average(total: int, count: int) -> Optional[int]:
    return total // count if count else None


def join_scores(
    days: Sequence[date],
    sleep: Sequence[DailySleep],
    readiness: Sequence[DailyReadiness],
    activity: Sequence[DailyActivity],
) -> TrendTable:
    """
    Align sleep, readiness and activity scores against a list of days.

    Series are sparse: a day missing from a series gets no score for that
    family. Averages are integer means over present scores only, and None for
    a family with no scores in the window.

    Args:
        days: Days to report, in display order
        sleep: Daily sleep records (may include days outside `days`)
        readiness: Daily readiness records
        activity: Daily activity records

    Returns:
        TrendTable with one row per day and the trailing averages
    """
    series = {
        "sleep": _scores_by_day(sleep),
        "readiness": _scores_by_day(readiness),
        "activity": _scores_by_day(activity),
    }
    totals = {name: 0 for name in series}
    counts = {name: 0 for name in series}

    rows = []
    for day in days:
        scores = {name: by_day.get(day) for name, by_day in series.items()}
        for name, score in scores.items():
            if score is not None:
                totals[name] += score
                counts[name] += 1
        rows.append(TrendRow(day=day, **scores))

    average = TrendRow(**{name: _average(totals[name], counts[name]) for name in series})
    return TrendTable(rows=rows, average=average)
