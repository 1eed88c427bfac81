from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PoolSummaryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Pool identity (pair address).")
    volume_usd: Decimal = Field(..., alias="volumeUSD", description="Lifetime volume in USD.")
    reserve_usd: Decimal = Field(..., alias="reserveUSD", description="Current liquidity in USD.")
    fees_usd: Decimal = Field(..., alias="feesUSD", description="Lifetime fees in USD.")
    token0_symbol: str | None = Field(None, alias="token0Symbol")
    token1_symbol: str | None = Field(None, alias="token1Symbol")
    fee_tier: int | None = Field(None, alias="feeTier")


class DailySnapshotRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: int = Field(..., description="Day start as unix seconds.")
    reserve0: Decimal
    reserve1: Decimal
    reserve_usd: Decimal = Field(..., alias="reserveUSD")
    daily_volume_usd: Decimal = Field(..., alias="dailyVolumeUSD")


class LpStatisticsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pair: PoolSummaryRequest
    historical_data: list[DailySnapshotRequest] = Field(..., alias="historicalData")
    lp_share: Decimal = Field(..., alias="lpShare", description="USD value contributed by the LP.")
    lp_date: datetime = Field(..., alias="lpDate", description="Date the position became active.")
    fee_tier: int | None = Field(None, alias="feeTier", description="Fee tier in hundredths of a bip.")


class TotalStatsResponse(BaseModel):
    volume_usd: Decimal
    liquidity_usd: Decimal
    fees_usd: Decimal


class WindowStatsResponse(BaseModel):
    volume_usd: Decimal
    liquidity_usd: Decimal
    fees_usd: Decimal
    volume_usd_change: str | None = Field(
        None,
        description='Relative change, "NaN" or "Infinity" when the previous period is zero.',
    )
    liquidity_usd_change: str | None = None
    fees_usd_change: str | None = None


class LpStatisticsResponse(BaseModel):
    total_stats: TotalStatsResponse
    last_day_stats: WindowStatsResponse | None
    prev_day_stats: WindowStatsResponse | None
    last_week_stats: WindowStatsResponse | None
    prev_week_stats: WindowStatsResponse | None
    total_fees: Decimal
    impermanent_loss: Decimal
    total_return: Decimal
    days: list[str]
    daily_liquidity: list[Decimal]
    running_volume: list[Decimal]
    running_pool_fees: list[Decimal]
    running_fees: list[Decimal]
    running_impermanent_loss: list[Decimal]
    running_return: list[Decimal]


class LpStatisticsEnvelope(BaseModel):
    data: LpStatisticsResponse | None
