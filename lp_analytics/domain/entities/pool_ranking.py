from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from lp_analytics.domain.entities.lp_statistics import PoolSummary


@dataclass(frozen=True)
class RankedPool:
    id: str
    volume_usd: Decimal
    reserve_usd: Decimal
    fees_usd: Decimal
    token0_symbol: str | None
    token1_symbol: str | None
    fee_tier: int | None
    volume_ranking: int
    liquidity_ranking: int


@dataclass(frozen=True)
class RankingReport:
    by_volume: tuple[PoolSummary, ...]
    by_liquidity: tuple[PoolSummary, ...]
    pair_lookups: dict[str, RankedPool]
