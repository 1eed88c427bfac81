from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from lp_analytics.api.deps import get_rank_pools_use_case
from lp_analytics.api.schemas.pool_ranking import (
    PoolRankingEnvelope,
    PoolRankingRequest,
    PoolRankingResponse,
    PoolSummaryResponse,
    RankedPoolResponse,
)
from lp_analytics.application.dto.pool_ranking import RankPoolsInput
from lp_analytics.application.use_cases.rank_pools import RankPoolsUseCase
from lp_analytics.domain.entities.lp_statistics import PoolSummary
from lp_analytics.domain.exceptions import PoolRankingInputError

router = APIRouter()


def _summary_response(pool: PoolSummary) -> PoolSummaryResponse:
    return PoolSummaryResponse(
        id=pool.id,
        volume_usd=pool.volume_usd,
        reserve_usd=pool.reserve_usd,
        fees_usd=pool.fees_usd,
        token0_symbol=pool.token0_symbol,
        token1_symbol=pool.token1_symbol,
        fee_tier=pool.fee_tier,
    )


@router.post("/v1/pool-rankings", response_model=PoolRankingEnvelope)
def get_pool_rankings(
    req: PoolRankingRequest,
    use_case: RankPoolsUseCase = Depends(get_rank_pools_use_case),
):
    try:
        output = use_case.execute(
            RankPoolsInput(
                pools=[
                    PoolSummary(
                        id=row.id,
                        volume_usd=row.volume_usd,
                        reserve_usd=row.reserve_usd,
                        fees_usd=row.fees_usd,
                        token0_symbol=row.token0_symbol,
                        token1_symbol=row.token1_symbol,
                        fee_tier=row.fee_tier,
                    )
                    for row in req.pairs
                ]
            )
        )
    except PoolRankingInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    report = output.report
    return PoolRankingEnvelope(
        data=PoolRankingResponse(
            by_volume=[_summary_response(pool) for pool in report.by_volume],
            by_liquidity=[_summary_response(pool) for pool in report.by_liquidity],
            pair_lookups={
                pool_id: RankedPoolResponse(
                    id=ranked.id,
                    volume_usd=ranked.volume_usd,
                    reserve_usd=ranked.reserve_usd,
                    fees_usd=ranked.fees_usd,
                    token0_symbol=ranked.token0_symbol,
                    token1_symbol=ranked.token1_symbol,
                    fee_tier=ranked.fee_tier,
                    volume_ranking=ranked.volume_ranking,
                    liquidity_ranking=ranked.liquidity_ranking,
                )
                for pool_id, ranked in report.pair_lookups.items()
            },
        )
    )
