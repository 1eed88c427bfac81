from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from lp_analytics.api.schemas.lp_statistics import PoolSummaryRequest


class PoolRankingRequest(BaseModel):
    pairs: list[PoolSummaryRequest] = Field(..., description="Pools to rank, in indexer order.")


class PoolSummaryResponse(BaseModel):
    id: str
    volume_usd: Decimal
    reserve_usd: Decimal
    fees_usd: Decimal
    token0_symbol: str | None = None
    token1_symbol: str | None = None
    fee_tier: int | None = None


class RankedPoolResponse(PoolSummaryResponse):
    volume_ranking: int
    liquidity_ranking: int


class PoolRankingResponse(BaseModel):
    by_volume: list[PoolSummaryResponse]
    by_liquidity: list[PoolSummaryResponse]
    pair_lookups: dict[str, RankedPoolResponse]


class PoolRankingEnvelope(BaseModel):
    data: PoolRankingResponse
