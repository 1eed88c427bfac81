from __future__ import annotations

from lp_analytics.application.use_cases.compute_lp_statistics import ComputeLpStatisticsUseCase
from lp_analytics.application.use_cases.rank_pools import RankPoolsUseCase
from lp_analytics.shared.config import get_settings


def get_compute_lp_statistics_use_case() -> ComputeLpStatisticsUseCase:
    settings = get_settings()
    return ComputeLpStatisticsUseCase(fee_ratio=settings.fee_ratio)


def get_rank_pools_use_case() -> RankPoolsUseCase:
    return RankPoolsUseCase()
