"""Terminal rendering of Oura reports."""

import math
from datetime import datetime
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from oura_cli.models import (
    DailyActivity,
    DailyReadiness,
    DailySleep,
    DailyStress,
    SleepPeriod,
    TrendTable,
)

console = Console()

PLACEHOLDER = "[dim]--[/dim]"

# Contributor key tokens shown as acronyms
UPPERCASE_TOKENS = {"hrv", "hr", "spo2"}

STRESS_STYLES = {
    "restored": "green",
    "normal": "yellow",
    "stressful": "red",
}


def score_style(score: int) -> str:
    """Style for a 0-100 score: green >= 85, yellow >= 70, red below."""
    if score >= 85:
        return "green"
    if score >= 70:
        return "yellow"
    return "red"


def colored_score(score: int) -> str:
    style = score_style(score)
    return f"[{style}]{score}[/{style}]"


def format_score(score: Optional[int]) -> str:
    """Colored score, or a dim placeholder when absent."""
    return PLACEHOLDER if score is None else colored_score(score)


def format_duration(seconds: int) -> str:
    """Format seconds as '7h 05m', or '45m' under an hour."""
    if seconds <= 0:
        return "0m"
    hours = seconds // 3600
    mins = (seconds % 3600) // 60
    if hours > 0:
        return f"{hours}h {mins:02d}m"
    return f"{mins}m"


def format_percent(part: int, total: int) -> str:
    """Format part as a percentage of total, rounding halves up."""
    if total == 0:
        return "0%"
    return f"{math.floor(part / total * 100 + 0.5)}%"


def format_contributor_key(key: str) -> str:
    """'hrv_balance' -> 'HRV Balance'."""
    return " ".join(
        word.upper() if word in UPPERCASE_TOKENS else word[:1].upper() + word[1:]
        for word in key.split("_")
    )


def format_number(n: int) -> str:
    return f"{n:,}"


def format_temperature(deviation: float) -> str:
    return f"{deviation:+.1f}°C"


def format_time(ts: datetime) -> str:
    """Wall-clock HH:MM in the timestamp's own offset."""
    return ts.strftime("%H:%M")


def make_table(title: str, columns: list[tuple[str, str | None, str | None]]) -> Table:
    """Create a Rich table from column definitions."""
    table = Table(title=title)
    for name, style, justify in columns:
        table.add_column(name, style=style, justify=justify)
    return table


def select_sleep_period(periods: Sequence[SleepPeriod]) -> Optional[SleepPeriod]:
    """Prefer the long_sleep period, else the first one."""
    for period in periods:
        if period.sleep_type == "long_sleep":
            return period
    return periods[0] if periods else None


def display_contributors(contributors: Optional[dict[str, Optional[int]]]):
    """Print contributor scores in payload order, skipping missing values."""
    if not contributors:
        return
    for key, value in contributors.items():
        if value is not None:
            console.print(f"  {format_contributor_key(key):<24}{colored_score(value)}")


def display_scores(
    daily_sleep: Optional[DailySleep],
    daily_readiness: Optional[DailyReadiness],
    daily_activity: Optional[DailyActivity],
):
    """Display the three daily scores with readiness contributors."""
    s = format_score(daily_sleep.score if daily_sleep else None)
    r = format_score(daily_readiness.score if daily_readiness else None)
    a = format_score(daily_activity.score if daily_activity else None)
    console.print(f"  Sleep {s}  Readiness {r}  Activity {a}")

    if daily_readiness is None:
        return

    # Readiness contributors are the most actionable breakdown
    if daily_readiness.contributors:
        console.print()
        console.print("  [dim]Readiness contributors:[/dim]")
        display_contributors(daily_readiness.contributors)

    temp = daily_readiness.temperature_deviation
    if temp is not None and abs(temp) >= 0.5:
        console.print(f"  Temp Deviation:  {format_temperature(temp)}")


def display_sleep(daily: Optional[DailySleep], periods: Sequence[SleepPeriod]):
    """Display detailed sleep for the main sleep period of a day."""
    sleep = select_sleep_period(periods)
    score = daily.score if daily else None

    if sleep is None:
        # No period data yet; fall back to the daily score
        if daily is None:
            console.print("  No sleep data")
            return
        if score is not None:
            console.print(f"  Sleep Score: {colored_score(score)}")
        display_contributors(daily.contributors)
        console.print("  [dim](detailed breakdown not yet synced)[/dim]")
        return

    if score is not None:
        console.print(f"  Sleep Score: {colored_score(score)}")

    total = sleep.total_sleep_duration or 0
    if sleep.total_sleep_duration is None:
        console.print(f"  Total Sleep: {PLACEHOLDER}")
    else:
        console.print(f"  Total Sleep: {format_duration(total)}")

    if sleep.efficiency is not None:
        console.print(f"  Efficiency:  {sleep.efficiency}%")

    for label, duration in (
        ("Deep:", sleep.deep_sleep_duration),
        ("REM:", sleep.rem_sleep_duration),
        ("Light:", sleep.light_sleep_duration),
    ):
        if duration is not None:
            console.print(f"  {label:<13}{format_duration(duration)} ({format_percent(duration, total)})")

    if sleep.average_hrv is not None:
        console.print(f"  Avg HRV:     {sleep.average_hrv} ms")
    if sleep.average_heart_rate is not None:
        console.print(f"  Avg HR:      {round(sleep.average_heart_rate)} bpm")
    if sleep.lowest_heart_rate is not None:
        console.print(f"  Lowest HR:   {sleep.lowest_heart_rate} bpm")

    if sleep.bedtime_start and sleep.bedtime_end:
        console.print(
            f"  Bedtime:     {format_time(sleep.bedtime_start)} → {format_time(sleep.bedtime_end)}"
        )


def display_readiness(record: Optional[DailyReadiness]):
    """Display readiness score, temperature and contributors."""
    if record is None:
        console.print("  No readiness data")
        return

    if record.score is not None:
        console.print(f"  Readiness Score: {colored_score(record.score)}")

    if record.temperature_deviation is not None:
        console.print(f"  Temp Deviation:  {format_temperature(record.temperature_deviation)}")

    display_contributors(record.contributors)


def display_activity(record: Optional[DailyActivity]):
    """Display activity score, steps, calories and movement time."""
    if record is None:
        console.print("  No activity data")
        return

    if record.score is not None:
        console.print(f"  Activity Score: {colored_score(record.score)}")

    if record.steps is not None:
        console.print(f"  Steps:          {format_number(record.steps)}")

    if record.total_calories is not None:
        active = record.active_calories or 0
        console.print(
            f"  Calories:       {format_number(record.total_calories)} (active: {format_number(active)})"
        )

    if record.equivalent_walking_distance is not None:
        console.print(f"  Walking Dist:   {record.equivalent_walking_distance / 1000:.1f} km")

    if record.high_activity_time is not None:
        console.print(f"  High Activity:  {format_duration(record.high_activity_time)}")
    if record.medium_activity_time is not None:
        console.print(f"  Med Activity:   {format_duration(record.medium_activity_time)}")
    if record.low_activity_time is not None:
        console.print(f"  Low Activity:   {format_duration(record.low_activity_time)}")


def display_hrv(daily: Optional[DailySleep], periods: Sequence[SleepPeriod]):
    """Display heart rate variability from the main sleep period."""
    sleep = select_sleep_period(periods)

    if sleep is None:
        if daily is None:
            console.print("  No sleep data for HRV")
        elif daily.score is not None:
            console.print(f"  Sleep Score: {colored_score(daily.score)} [dim](HRV requires detailed sync)[/dim]")
        else:
            console.print("  [dim](HRV requires detailed sync)[/dim]")
        return

    console.print("  [dim]HRV (from sleep)[/dim]")
    if sleep.average_hrv is not None:
        console.print(f"  Avg HRV:     {sleep.average_hrv} ms")
    else:
        console.print(f"  Avg HRV:     {PLACEHOLDER}")

    if sleep.average_heart_rate is not None:
        console.print(f"  Avg HR:      {round(sleep.average_heart_rate)} bpm")
    if sleep.lowest_heart_rate is not None:
        console.print(f"  Lowest HR:   {sleep.lowest_heart_rate} bpm")
    if sleep.average_breath is not None:
        console.print(f"  Avg Breath:  {sleep.average_breath:.1f} rpm")


def display_stress(record: Optional[DailyStress]):
    """Display the daily stress summary."""
    if record is None:
        console.print("  No stress data")
        return

    if record.day_summary is not None:
        summary = escape(record.day_summary)
        style = STRESS_STYLES.get(record.day_summary)
        if style:
            summary = f"[{style}]{summary}[/{style}]"
        console.print(f"  Stress Summary: {summary}")

    if record.stress_high is not None:
        console.print(f"  Stress High:    {format_duration(record.stress_high)}")
    if record.recovery_high is not None:
        console.print(f"  Recovery High:  {format_duration(record.recovery_high)}")


def display_trend(trend: TrendTable):
    """Display joined daily scores as a table with a trailing average row."""
    if not trend.rows:
        console.print("[yellow]No days in the trend window.[/yellow]")
        return

    table = make_table(
        "Score Trend",
        [
            ("Date", "cyan", None),
            ("Sleep", None, "right"),
            ("Readiness", None, "right"),
            ("Activity", None, "right"),
        ],
    )

    for row in trend.rows:
        table.add_row(
            f"{row.day:%a %b %d}",
            format_score(row.sleep),
            format_score(row.readiness),
            format_score(row.activity),
        )

    table.add_section()
    table.add_row(
        "[dim]Average[/dim]",
        format_score(trend.average.sleep),
        format_score(trend.average.readiness),
        format_score(trend.average.activity),
    )

    console.print(table)
