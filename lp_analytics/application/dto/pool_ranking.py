from __future__ import annotations

from dataclasses import dataclass

from lp_analytics.domain.entities.lp_statistics import PoolSummary
from lp_analytics.domain.entities.pool_ranking import RankingReport


@dataclass(frozen=True)
class RankPoolsInput:
    pools: list[PoolSummary]


@dataclass(frozen=True)
class RankPoolsOutput:
    report: RankingReport
