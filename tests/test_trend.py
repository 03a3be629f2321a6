"""Tests for joining per-day score series."""
from datetime import date

from oura_cli.models import DailyActivity, DailyReadiness, DailySleep, SleepPeriod
from oura_cli.trend import for_day, join_scores, periods_for_day

FEB_9 = date(2024, 2, 9)
FEB_10 = date(2024, 2, 10)
FEB_11 = date(2024, 2, 11)


class TestJoinScores:
    def test_sparse_series(self):
        sleep = [DailySleep(day=FEB_10, score=80)]
        trend = join_scores([FEB_9, FEB_10], sleep, [], [])

        first, second = trend.rows
        assert first.day == FEB_9
        assert (first.sleep, first.readiness, first.activity) == (None, None, None)
        assert second.day == FEB_10
        assert (second.sleep, second.readiness, second.activity) == (80, None, None)

        assert trend.average.sleep == 80
        assert trend.average.readiness is None
        assert trend.average.activity is None

    def test_rows_follow_day_order_not_series_order(self):
        sleep = [DailySleep(day=FEB_11, score=90), DailySleep(day=FEB_9, score=60)]
        trend = join_scores([FEB_9, FEB_10, FEB_11], sleep, [], [])
        assert [r.day for r in trend.rows] == [FEB_9, FEB_10, FEB_11]
        assert [r.sleep for r in trend.rows] == [60, None, 90]

    def test_average_truncates(self):
        readiness = [
            DailyReadiness(day=FEB_9, score=70),
            DailyReadiness(day=FEB_10, score=71),
            DailyReadiness(day=FEB_11, score=71),
        ]
        trend = join_scores([FEB_9, FEB_10, FEB_11], [], readiness, [])
        # 212 / 3 = 70.67
        assert trend.average.readiness == 70

    def test_missing_scores_do_not_count(self):
        activity = [
            DailyActivity(day=FEB_9, score=60),
            DailyActivity(day=FEB_10),
            DailyActivity(day=FEB_11, score=90),
        ]
        trend = join_scores([FEB_9, FEB_10, FEB_11], [], [], activity)
        assert trend.rows[1].activity is None
        assert trend.average.activity == 75

    def test_extra_days_outside_window_ignored(self):
        # end_date is over-fetched by a day; that day must not leak into the table
        sleep = [DailySleep(day=FEB_10, score=80), DailySleep(day=FEB_11, score=20)]
        trend = join_scores([FEB_10], sleep, [], [])
        assert len(trend.rows) == 1
        assert trend.average.sleep == 80

    def test_empty_window(self):
        trend = join_scores([], [DailySleep(day=FEB_10, score=80)], [], [])
        assert trend.rows == []
        assert trend.average.sleep is None


class TestForDay:
    def test_picks_matching_day(self):
        records = [DailySleep(day=FEB_9, score=1), DailySleep(day=FEB_10, score=2)]
        assert for_day(records, FEB_10).score == 2

    def test_absent_day(self):
        assert for_day([DailySleep(day=FEB_11, score=1)], FEB_10) is None

    def test_empty(self):
        assert for_day([], FEB_10) is None


class TestPeriodsForDay:
    def test_filters_and_keeps_order(self):
        periods = [
            SleepPeriod(day=FEB_10, type="late_nap"),
            SleepPeriod(day=FEB_11, type="long_sleep"),
            SleepPeriod(day=FEB_10, type="long_sleep"),
        ]
        assert [p.sleep_type for p in periods_for_day(periods, FEB_10)] == ["late_nap", "long_sleep"]
