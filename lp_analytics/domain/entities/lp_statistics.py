from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class DailySnapshot:
    date: int
    reserve0: Decimal
    reserve1: Decimal
    reserve_usd: Decimal
    daily_volume_usd: Decimal


@dataclass(frozen=True)
class PoolSummary:
    id: str
    volume_usd: Decimal
    reserve_usd: Decimal
    fees_usd: Decimal
    token0_symbol: str | None = None
    token1_symbol: str | None = None
    fee_tier: int | None = None


@dataclass(frozen=True)
class LpPosition:
    lp_share_usd: Decimal
    lp_date: datetime


@dataclass(frozen=True)
class TotalStats:
    volume_usd: Decimal
    liquidity_usd: Decimal
    fees_usd: Decimal


@dataclass(frozen=True)
class WindowStats:
    volume_usd: Decimal
    liquidity_usd: Decimal
    fees_usd: Decimal
    volume_usd_change: Decimal | None = None
    liquidity_usd_change: Decimal | None = None
    fees_usd_change: Decimal | None = None


@dataclass(frozen=True)
class StatisticsReport:
    total_stats: TotalStats
    last_day: WindowStats | None
    prev_day: WindowStats | None
    last_week: WindowStats | None
    prev_week: WindowStats | None
    total_fees: Decimal
    impermanent_loss: Decimal
    total_return: Decimal
    days: tuple[str, ...]
    daily_liquidity: tuple[Decimal, ...]
    running_volume: tuple[Decimal, ...]
    running_pool_fees: tuple[Decimal, ...]
    running_fees: tuple[Decimal, ...]
    running_impermanent_loss: tuple[Decimal, ...]
    running_return: tuple[Decimal, ...]
