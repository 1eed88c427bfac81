from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, DivisionByZero
import unittest

from lp_analytics.domain.entities.lp_statistics import DailySnapshot, PoolSummary
from lp_analytics.domain.services.lp_statistics import compute_lp_statistics


BASE_TS = 1609459200  # 2021-01-01T00:00:00Z
DAY = 86400
LP_DATE = datetime(2021, 1, 1, tzinfo=timezone.utc)
POOL = PoolSummary(
    id="0xpair",
    volume_usd=Decimal("5000000"),
    reserve_usd=Decimal("100000"),
    fees_usd=Decimal("15000"),
)


def _snapshot(
    day: int,
    *,
    reserve0: str = "100",
    reserve1: str = "100",
    reserve_usd: str = "100000",
    volume: str = "1000",
) -> DailySnapshot:
    return DailySnapshot(
        date=BASE_TS + day * DAY,
        reserve0=Decimal(reserve0),
        reserve1=Decimal(reserve1),
        reserve_usd=Decimal(reserve_usd),
        daily_volume_usd=Decimal(volume),
    )


def _history(days: int, **kwargs) -> list[DailySnapshot]:
    return [_snapshot(day, **kwargs) for day in range(days)]


def _compute(snapshots, *, lp_share: str = "10000", lp_date: datetime = LP_DATE, **kwargs):
    return compute_lp_statistics(POOL, snapshots, Decimal(lp_share), lp_date, **kwargs)


class LpStatisticsEngineTests(unittest.TestCase):
    def test_empty_history_returns_none(self):
        self.assertIsNone(_compute([]))

    def test_all_snapshots_before_lp_date_returns_none(self):
        lp_date = datetime(2022, 1, 1, tzinfo=timezone.utc)
        self.assertIsNone(_compute(_history(5), lp_date=lp_date))

    def test_three_flat_days_accrue_fees_without_impermanent_loss(self):
        report = _compute(_history(3), fee_ratio=Decimal("0.003"))

        assert report is not None
        self.assertEqual(list(report.running_fees), [Decimal("0.3"), Decimal("0.6")])
        self.assertEqual(list(report.running_volume), [Decimal("1000"), Decimal("2000")])
        self.assertEqual(list(report.running_pool_fees), [Decimal("3"), Decimal("6")])
        self.assertEqual(list(report.running_impermanent_loss), [Decimal("0"), Decimal("0")])
        self.assertEqual(list(report.running_return), [Decimal("0.3"), Decimal("0.6")])
        self.assertEqual(list(report.daily_liquidity), [Decimal("100000"), Decimal("100000")])
        self.assertEqual(report.days, ("Jan 2", "Jan 3"))
        self.assertEqual(report.total_fees, Decimal("0.6"))
        self.assertEqual(report.impermanent_loss, Decimal("0"))
        self.assertEqual(report.total_return, Decimal("0.6"))

    def test_total_stats_come_from_pool_summary(self):
        report = _compute(_history(3))

        assert report is not None
        self.assertEqual(report.total_stats.volume_usd, Decimal("5000000"))
        self.assertEqual(report.total_stats.liquidity_usd, Decimal("100000"))
        self.assertEqual(report.total_stats.fees_usd, Decimal("15000"))

    def test_snapshots_before_lp_date_are_skipped_and_baseline_moves(self):
        snapshots = [
            _snapshot(0, reserve0="400"),
            _snapshot(1, reserve0="100"),
            _snapshot(2, reserve0="100"),
            _snapshot(3, reserve0="100"),
        ]
        report = _compute(snapshots, lp_date=datetime(2021, 1, 2, tzinfo=timezone.utc))

        assert report is not None
        self.assertEqual(report.days, ("Jan 3", "Jan 4"))
        self.assertEqual(list(report.running_impermanent_loss), [Decimal("0"), Decimal("0")])
        self.assertEqual(report.impermanent_loss, Decimal("0"))

    def test_naive_lp_date_is_read_as_utc(self):
        aware = _compute(_history(4), lp_date=datetime(2021, 1, 2, tzinfo=timezone.utc))
        naive = _compute(_history(4), lp_date=datetime(2021, 1, 2))

        self.assertEqual(aware, naive)

    def test_price_divergence_produces_impermanent_loss(self):
        snapshots = [
            _snapshot(0, reserve0="100", reserve1="100"),
            _snapshot(1, reserve0="400", reserve1="100"),
        ]
        report = _compute(snapshots)

        assert report is not None
        # r = 4 -> 2 * 2 / 5 - 1 = -0.2
        self.assertEqual(report.running_impermanent_loss[0], Decimal("-2000"))
        self.assertEqual(report.impermanent_loss, Decimal("-2000"))
        self.assertEqual(report.total_return, report.total_fees + Decimal("-2000"))
        self.assertEqual(report.running_return[0], report.running_fees[0] + Decimal("-2000"))

    def test_impermanent_loss_is_never_positive(self):
        reserves = ["50", "90", "99.5", "100", "101", "250", "1000"]
        snapshots = [_snapshot(0)] + [
            _snapshot(day + 1, reserve0=value) for day, value in enumerate(reserves)
        ]
        report = _compute(snapshots)

        assert report is not None
        for value, loss in zip(reserves, report.running_impermanent_loss):
            if value == "100":
                self.assertEqual(loss, Decimal("0"))
            else:
                self.assertLess(loss, Decimal("0"))

    def test_total_impermanent_loss_uses_last_snapshot_overall(self):
        snapshots = [
            _snapshot(0),
            _snapshot(1, reserve0="400"),
            _snapshot(2, reserve0="100"),
        ]
        report = _compute(snapshots)

        assert report is not None
        self.assertEqual(report.running_impermanent_loss[0], Decimal("-2000"))
        self.assertEqual(report.impermanent_loss, Decimal("0"))

    def test_pool_share_is_recomputed_from_daily_liquidity(self):
        snapshots = [
            _snapshot(0),
            _snapshot(1, reserve_usd="100000"),
            _snapshot(2, reserve_usd="50000"),
        ]
        report = _compute(snapshots)

        assert report is not None
        # 0.3 on day one, then 3 * (10000 / 50000) = 0.6 on day two.
        self.assertEqual(list(report.running_fees), [Decimal("0.3"), Decimal("0.9")])

    def test_running_fees_are_non_decreasing(self):
        volumes = ["0", "1500", "20", "0", "999999.99", "3"]
        snapshots = [_snapshot(0)] + [
            _snapshot(day + 1, volume=value) for day, value in enumerate(volumes)
        ]
        report = _compute(snapshots)

        assert report is not None
        fees = list(report.running_fees)
        self.assertEqual(fees, sorted(fees))

    def test_only_baseline_yields_zero_totals_and_no_rows(self):
        report = _compute(_history(1))

        assert report is not None
        self.assertEqual(report.days, ())
        self.assertEqual(report.total_fees, Decimal("0"))
        self.assertEqual(report.impermanent_loss, Decimal("0"))
        self.assertIsNone(report.last_day)

    def test_repeated_calls_are_identical(self):
        snapshots = [_snapshot(day, reserve0=str(100 + day * 7), volume=str(1000 + day)) for day in range(20)]

        self.assertEqual(_compute(snapshots), _compute(snapshots))

    def test_zero_reserve1_propagates_decimal_fault(self):
        snapshots = [_snapshot(0), _snapshot(1, reserve1="0")]

        with self.assertRaises(DivisionByZero):
            _compute(snapshots)

    def test_trace_callback_receives_checkpoints(self):
        calls: list[tuple[str, dict]] = []
        _compute(_history(3), trace=lambda checkpoint, payload: calls.append((checkpoint, payload)))

        self.assertEqual([name for name, _ in calls], ["baseline", "row", "row", "totals", "windows"])
        self.assertEqual(calls[0][1]["date"], BASE_TS)
        self.assertEqual(calls[1][1]["pool_share"], Decimal("0.1"))
        self.assertEqual(calls[3][1]["rows"], 2)


class LpStatisticsWindowTests(unittest.TestCase):
    def test_one_row_has_no_window_stats(self):
        report = _compute(_history(2))

        assert report is not None
        self.assertIsNone(report.last_day)
        self.assertIsNone(report.prev_day)
        self.assertIsNone(report.last_week)
        self.assertIsNone(report.prev_week)

    def test_two_rows_have_last_day_without_changes(self):
        report = _compute(_history(3))

        assert report is not None
        assert report.last_day is not None
        self.assertEqual(report.last_day.volume_usd, Decimal("1000"))
        self.assertEqual(report.last_day.fees_usd, Decimal("3"))
        self.assertEqual(report.last_day.liquidity_usd, Decimal("100000"))
        self.assertIsNone(report.last_day.volume_usd_change)
        self.assertIsNone(report.last_day.liquidity_usd_change)
        self.assertIsNone(report.last_day.fees_usd_change)
        self.assertIsNone(report.prev_day)

    def test_three_rows_fill_day_over_day_changes(self):
        snapshots = [
            _snapshot(0),
            _snapshot(1, volume="1000"),
            _snapshot(2, volume="1000", reserve_usd="80000"),
            _snapshot(3, volume="1500", reserve_usd="100000"),
        ]
        report = _compute(snapshots)

        assert report is not None
        assert report.last_day is not None
        assert report.prev_day is not None
        self.assertEqual(report.prev_day.volume_usd, Decimal("1000"))
        self.assertEqual(report.prev_day.liquidity_usd, Decimal("80000"))
        self.assertEqual(report.last_day.volume_usd, Decimal("1500"))
        self.assertEqual(report.last_day.volume_usd_change, Decimal("0.5"))
        self.assertEqual(report.last_day.fees_usd_change, Decimal("0.5"))
        self.assertEqual(report.last_day.liquidity_usd_change, Decimal("0.25"))
        self.assertIsNone(report.prev_day.volume_usd_change)

    def test_zero_previous_day_gives_non_finite_change(self):
        snapshots = [
            _snapshot(0),
            _snapshot(1, volume="0"),
            _snapshot(2, volume="0"),
            _snapshot(3, volume="1000"),
        ]
        report = _compute(snapshots)

        assert report is not None
        assert report.last_day is not None
        self.assertTrue(report.last_day.volume_usd_change.is_infinite())
        self.assertTrue(report.last_day.fees_usd_change.is_infinite())
        self.assertEqual(report.last_day.liquidity_usd_change, Decimal("0"))

    def test_zero_over_zero_change_is_nan(self):
        report = _compute(_history(4, volume="0"))

        assert report is not None
        assert report.last_day is not None
        self.assertTrue(report.last_day.volume_usd_change.is_nan())

    def test_seven_rows_have_no_last_week(self):
        report = _compute(_history(8))

        assert report is not None
        self.assertIsNotNone(report.prev_day)
        self.assertIsNone(report.last_week)

    def test_eight_rows_have_last_week_without_changes(self):
        report = _compute(_history(9))

        assert report is not None
        assert report.last_week is not None
        self.assertEqual(report.last_week.volume_usd, Decimal("7000"))
        self.assertEqual(report.last_week.fees_usd, Decimal("21"))
        self.assertIsNone(report.last_week.volume_usd_change)
        self.assertIsNone(report.prev_week)

    def test_fourteen_rows_have_no_prev_week(self):
        report = _compute(_history(15))

        assert report is not None
        self.assertIsNotNone(report.last_week)
        self.assertIsNone(report.prev_week)

    def test_fifteen_rows_fill_week_over_week_changes(self):
        snapshots = [_snapshot(0)] + [
            _snapshot(day, volume="1000" if day <= 8 else "2000") for day in range(1, 16)
        ]
        report = _compute(snapshots)

        assert report is not None
        assert report.last_week is not None
        assert report.prev_week is not None
        self.assertEqual(report.prev_week.volume_usd, Decimal("7000"))
        self.assertEqual(report.last_week.volume_usd, Decimal("14000"))
        self.assertEqual(report.last_week.volume_usd_change, Decimal("1"))
        self.assertEqual(report.last_week.fees_usd_change, Decimal("1"))
        self.assertEqual(report.last_week.liquidity_usd_change, Decimal("0"))


if __name__ == "__main__":
    unittest.main()
