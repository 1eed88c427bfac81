from __future__ import annotations

from collections.abc import Sequence

from lp_analytics.domain.entities.lp_statistics import PoolSummary
from lp_analytics.domain.entities.pool_ranking import RankedPool, RankingReport


def rank_pools(pools: Sequence[PoolSummary]) -> RankingReport:
    by_volume = tuple(sorted(pools, key=lambda pool: pool.volume_usd))
    by_liquidity = tuple(sorted(pools, key=lambda pool: pool.reserve_usd, reverse=True))
    liquidity_lookup = {pool.id: index + 1 for index, pool in enumerate(by_liquidity)}

    # volume_ranking is the position in the input order, not in by_volume.
    pair_lookups = {
        pool.id: RankedPool(
            id=pool.id,
            volume_usd=pool.volume_usd,
            reserve_usd=pool.reserve_usd,
            fees_usd=pool.fees_usd,
            token0_symbol=pool.token0_symbol,
            token1_symbol=pool.token1_symbol,
            fee_tier=pool.fee_tier,
            volume_ranking=index + 1,
            liquidity_ranking=liquidity_lookup[pool.id],
        )
        for index, pool in enumerate(pools)
    }
    return RankingReport(
        by_volume=by_volume,
        by_liquidity=by_liquidity,
        pair_lookups=pair_lookups,
    )
