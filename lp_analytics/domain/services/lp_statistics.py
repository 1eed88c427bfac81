from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from decimal import Decimal, DivisionByZero, InvalidOperation, localcontext
from typing import Any

from lp_analytics.domain.entities.lp_statistics import (
    DailySnapshot,
    PoolSummary,
    StatisticsReport,
    TotalStats,
    WindowStats,
)
from lp_analytics.domain.services.impermanent_loss import calculate_impermanent_loss
from lp_analytics.domain.services.univ3_fees import FEE_RATIO


STATS_PRECISION = 40
DAYS_IN_WEEK = 7

TraceCallback = Callable[[str, dict[str, Any]], None]


def snapshot_datetime(snapshot: DailySnapshot) -> datetime:
    return datetime.fromtimestamp(snapshot.date, tz=timezone.utc)


def format_day_label(value: datetime) -> str:
    return f"{value:%b} {value.day}"


def relative_change(current: Decimal, previous: Decimal) -> Decimal:
    """Signed relative delta (current - previous) / previous.

    A zero ``previous`` gives Infinity (or NaN for 0/0) instead of raising.
    Callers check ``Decimal.is_finite()`` before display.
    """
    with localcontext() as ctx:
        ctx.traps[DivisionByZero] = False
        ctx.traps[InvalidOperation] = False
        return (current - previous) / previous


def compute_lp_statistics(
    pool_summary: PoolSummary,
    daily_snapshots: Sequence[DailySnapshot],
    lp_share_usd: Decimal,
    lp_date: datetime,
    *,
    fee_ratio: Decimal = FEE_RATIO,
    trace: TraceCallback | None = None,
) -> StatisticsReport | None:
    """Running LP performance series and window stats for a pool.

    ``daily_snapshots`` must be sorted ascending by date. The first snapshot at
    or after ``lp_date`` is the impermanent-loss baseline and emits no row.
    Returns None when there is no history (or none after ``lp_date``).
    """
    if not daily_snapshots:
        return None

    if lp_date.tzinfo is None:
        lp_date = lp_date.replace(tzinfo=timezone.utc)

    emit = trace if trace is not None else _noop_trace

    with localcontext() as ctx:
        ctx.prec = STATS_PRECISION

        days: list[str] = []
        daily_liquidity: list[Decimal] = []
        running_volume: list[Decimal] = []
        running_pool_fees: list[Decimal] = []
        running_fees: list[Decimal] = []
        running_impermanent_loss: list[Decimal] = []
        running_return: list[Decimal] = []

        baseline: DailySnapshot | None = None
        for snapshot in daily_snapshots:
            current_date = snapshot_datetime(snapshot)
            if current_date < lp_date:
                continue
            if baseline is None:
                baseline = snapshot
                emit(
                    "baseline",
                    {"date": snapshot.date, "reserve0": snapshot.reserve0, "reserve1": snapshot.reserve1},
                )
                continue

            pool_share = lp_share_usd / snapshot.reserve_usd
            daily_pool_fees = snapshot.daily_volume_usd * fee_ratio
            daily_fees = daily_pool_fees * pool_share
            new_running_fees = _last_or_zero(running_fees) + daily_fees
            impermanent_loss = calculate_impermanent_loss(
                baseline=baseline,
                current=snapshot,
                lp_share_usd=lp_share_usd,
            )
            daily_return = new_running_fees + impermanent_loss

            daily_liquidity.append(snapshot.reserve_usd)
            running_volume.append(_last_or_zero(running_volume) + snapshot.daily_volume_usd)
            running_pool_fees.append(_last_or_zero(running_pool_fees) + daily_pool_fees)
            running_fees.append(new_running_fees)
            running_impermanent_loss.append(impermanent_loss)
            running_return.append(daily_return)
            days.append(format_day_label(current_date))

            emit(
                "row",
                {
                    "date": snapshot.date,
                    "pool_share": pool_share,
                    "daily_pool_fees": daily_pool_fees,
                    "daily_fees": daily_fees,
                    "running_fees": new_running_fees,
                    "impermanent_loss": impermanent_loss,
                },
            )

        if baseline is None:
            return None

        total_fees = _last_or_zero(running_fees)
        total_impermanent_loss = calculate_impermanent_loss(
            baseline=baseline,
            current=daily_snapshots[-1],
            lp_share_usd=lp_share_usd,
        )
        total_return = total_fees + total_impermanent_loss
        emit(
            "totals",
            {
                "rows": len(running_volume),
                "total_fees": total_fees,
                "impermanent_loss": total_impermanent_loss,
                "total_return": total_return,
            },
        )

        last_day, prev_day, last_week, prev_week = _window_stats(
            daily_liquidity=daily_liquidity,
            running_volume=running_volume,
            running_pool_fees=running_pool_fees,
        )
        emit(
            "windows",
            {
                "last_day": last_day is not None,
                "prev_day": prev_day is not None,
                "last_week": last_week is not None,
                "prev_week": prev_week is not None,
            },
        )

    return StatisticsReport(
        total_stats=TotalStats(
            volume_usd=pool_summary.volume_usd,
            liquidity_usd=pool_summary.reserve_usd,
            fees_usd=pool_summary.fees_usd,
        ),
        last_day=last_day,
        prev_day=prev_day,
        last_week=last_week,
        prev_week=prev_week,
        total_fees=total_fees,
        impermanent_loss=total_impermanent_loss,
        total_return=total_return,
        days=tuple(days),
        daily_liquidity=tuple(daily_liquidity),
        running_volume=tuple(running_volume),
        running_pool_fees=tuple(running_pool_fees),
        running_fees=tuple(running_fees),
        running_impermanent_loss=tuple(running_impermanent_loss),
        running_return=tuple(running_return),
    )


def _window_stats(
    *,
    daily_liquidity: list[Decimal],
    running_volume: list[Decimal],
    running_pool_fees: list[Decimal],
) -> tuple[WindowStats | None, WindowStats | None, WindowStats | None, WindowStats | None]:
    rows = len(running_volume)
    last_index = rows - 1

    def window(end: int, start: int) -> WindowStats:
        return WindowStats(
            volume_usd=running_volume[end] - running_volume[start],
            liquidity_usd=daily_liquidity[end],
            fees_usd=running_pool_fees[end] - running_pool_fees[start],
        )

    last_day = window(last_index, last_index - 1) if rows >= 2 else None
    prev_day = window(last_index - 1, last_index - 2) if rows >= 3 else None
    if last_day is not None and prev_day is not None:
        last_day = _with_changes(last_day, prev_day)

    last_week = window(last_index, last_index - DAYS_IN_WEEK) if rows >= DAYS_IN_WEEK + 1 else None
    prev_week = (
        window(last_index - DAYS_IN_WEEK, last_index - 2 * DAYS_IN_WEEK)
        if rows >= 2 * DAYS_IN_WEEK + 1
        else None
    )
    if last_week is not None and prev_week is not None:
        last_week = _with_changes(last_week, prev_week)

    return last_day, prev_day, last_week, prev_week


def _with_changes(current: WindowStats, previous: WindowStats) -> WindowStats:
    return WindowStats(
        volume_usd=current.volume_usd,
        liquidity_usd=current.liquidity_usd,
        fees_usd=current.fees_usd,
        volume_usd_change=relative_change(current.volume_usd, previous.volume_usd),
        liquidity_usd_change=relative_change(current.liquidity_usd, previous.liquidity_usd),
        fees_usd_change=relative_change(current.fees_usd, previous.fees_usd),
    )


def _last_or_zero(values: list[Decimal]) -> Decimal:
    return values[-1] if values else Decimal("0")


def _noop_trace(_checkpoint: str, _payload: dict[str, Any]) -> None:
    return None
