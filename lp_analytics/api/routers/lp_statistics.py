from __future__ import annotations

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException

from lp_analytics.api.deps import get_compute_lp_statistics_use_case
from lp_analytics.api.schemas.lp_statistics import (
    LpStatisticsEnvelope,
    LpStatisticsRequest,
    LpStatisticsResponse,
    TotalStatsResponse,
    WindowStatsResponse,
)
from lp_analytics.application.dto.lp_statistics import ComputeLpStatisticsInput
from lp_analytics.application.use_cases.compute_lp_statistics import ComputeLpStatisticsUseCase
from lp_analytics.domain.entities.lp_statistics import (
    DailySnapshot,
    LpPosition,
    PoolSummary,
    WindowStats,
)
from lp_analytics.domain.exceptions import LpStatisticsInputError

router = APIRouter()
logger = logging.getLogger(__name__)


def _dec_to_str_or_none(value: Decimal | None) -> str | None:
    return str(value) if value is not None else None


def _window_response(stats: WindowStats | None) -> WindowStatsResponse | None:
    if stats is None:
        return None
    return WindowStatsResponse(
        volume_usd=stats.volume_usd,
        liquidity_usd=stats.liquidity_usd,
        fees_usd=stats.fees_usd,
        volume_usd_change=_dec_to_str_or_none(stats.volume_usd_change),
        liquidity_usd_change=_dec_to_str_or_none(stats.liquidity_usd_change),
        fees_usd_change=_dec_to_str_or_none(stats.fees_usd_change),
    )


@router.post("/v1/lp-stats", response_model=LpStatisticsEnvelope)
def get_lp_statistics(
    req: LpStatisticsRequest,
    use_case: ComputeLpStatisticsUseCase = Depends(get_compute_lp_statistics_use_case),
):
    try:
        output = use_case.execute(
            ComputeLpStatisticsInput(
                pool_summary=PoolSummary(
                    id=req.pair.id,
                    volume_usd=req.pair.volume_usd,
                    reserve_usd=req.pair.reserve_usd,
                    fees_usd=req.pair.fees_usd,
                    token0_symbol=req.pair.token0_symbol,
                    token1_symbol=req.pair.token1_symbol,
                    fee_tier=req.pair.fee_tier,
                ),
                daily_snapshots=[
                    DailySnapshot(
                        date=row.date,
                        reserve0=row.reserve0,
                        reserve1=row.reserve1,
                        reserve_usd=row.reserve_usd,
                        daily_volume_usd=row.daily_volume_usd,
                    )
                    for row in req.historical_data
                ],
                position=LpPosition(lp_share_usd=req.lp_share, lp_date=req.lp_date),
                fee_tier=req.fee_tier,
            )
        )
    except LpStatisticsInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ArithmeticError as exc:
        logger.warning(
            "lp_statistics_router: arithmetic_fault pool=%s snapshots=%s error=%r",
            req.pair.id,
            len(req.historical_data),
            exc,
        )
        raise HTTPException(
            status_code=422,
            detail=f"Pool data cannot be used for LP statistics: {exc!r}",
        ) from exc

    report = output.report
    if report is None:
        return LpStatisticsEnvelope(data=None)

    return LpStatisticsEnvelope(
        data=LpStatisticsResponse(
            total_stats=TotalStatsResponse(
                volume_usd=report.total_stats.volume_usd,
                liquidity_usd=report.total_stats.liquidity_usd,
                fees_usd=report.total_stats.fees_usd,
            ),
            last_day_stats=_window_response(report.last_day),
            prev_day_stats=_window_response(report.prev_day),
            last_week_stats=_window_response(report.last_week),
            prev_week_stats=_window_response(report.prev_week),
            total_fees=report.total_fees,
            impermanent_loss=report.impermanent_loss,
            total_return=report.total_return,
            days=list(report.days),
            daily_liquidity=list(report.daily_liquidity),
            running_volume=list(report.running_volume),
            running_pool_fees=list(report.running_pool_fees),
            running_fees=list(report.running_fees),
            running_impermanent_loss=list(report.running_impermanent_loss),
            running_return=list(report.running_return),
        )
    )
