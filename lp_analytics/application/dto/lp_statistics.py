from __future__ import annotations

from dataclasses import dataclass

from lp_analytics.domain.entities.lp_statistics import (
    DailySnapshot,
    LpPosition,
    PoolSummary,
    StatisticsReport,
)


@dataclass(frozen=True)
class ComputeLpStatisticsInput:
    pool_summary: PoolSummary
    daily_snapshots: list[DailySnapshot]
    position: LpPosition
    fee_tier: int | None = None


@dataclass(frozen=True)
class ComputeLpStatisticsOutput:
    report: StatisticsReport | None
