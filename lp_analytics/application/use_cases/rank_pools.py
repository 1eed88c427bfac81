from __future__ import annotations

import logging

from lp_analytics.application.dto.pool_ranking import RankPoolsInput, RankPoolsOutput
from lp_analytics.domain.exceptions import PoolRankingInputError
from lp_analytics.domain.services.pool_ranking import rank_pools


logger = logging.getLogger(__name__)


class RankPoolsUseCase:
    def execute(self, command: RankPoolsInput) -> RankPoolsOutput:
        if any(not pool.id for pool in command.pools):
            raise PoolRankingInputError("every pool must have an id.")

        report = rank_pools(command.pools)
        logger.info(
            "rank_pools: ranked pools=%s unique_ids=%s",
            len(command.pools),
            len(report.pair_lookups),
        )
        return RankPoolsOutput(report=report)
