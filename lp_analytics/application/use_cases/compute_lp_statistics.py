from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from lp_analytics.application.dto.lp_statistics import (
    ComputeLpStatisticsInput,
    ComputeLpStatisticsOutput,
)
from lp_analytics.domain.exceptions import LpStatisticsInputError
from lp_analytics.domain.services.lp_statistics import compute_lp_statistics
from lp_analytics.domain.services.univ3_fees import FEE_RATIO, fee_ratio_from_tier


logger = logging.getLogger(__name__)


class ComputeLpStatisticsUseCase:
    def __init__(self, *, fee_ratio: Decimal = FEE_RATIO):
        self._fee_ratio = fee_ratio

    def execute(self, command: ComputeLpStatisticsInput) -> ComputeLpStatisticsOutput:
        pool_id = command.pool_summary.id
        position = command.position
        if not pool_id:
            raise LpStatisticsInputError("pool id is required.")
        if not position.lp_share_usd.is_finite() or position.lp_share_usd <= 0:
            raise LpStatisticsInputError("lp_share must be a positive amount.")

        fee_ratio = self._fee_ratio
        if command.fee_tier is not None:
            fee_ratio = fee_ratio_from_tier(command.fee_tier)

        def trace(checkpoint: str, payload: dict[str, Any]) -> None:
            logger.debug("compute_lp_statistics: %s pool=%s %s", checkpoint, pool_id, payload)

        report = compute_lp_statistics(
            command.pool_summary,
            command.daily_snapshots,
            position.lp_share_usd,
            position.lp_date,
            fee_ratio=fee_ratio,
            trace=trace,
        )
        if report is None:
            logger.info(
                "compute_lp_statistics: no_history pool=%s snapshots=%s lp_date=%s",
                pool_id,
                len(command.daily_snapshots),
                position.lp_date.isoformat(),
            )
            return ComputeLpStatisticsOutput(report=None)

        logger.info(
            "compute_lp_statistics: computed pool=%s snapshots=%s rows=%s fee_ratio=%s total_return=%s",
            pool_id,
            len(command.daily_snapshots),
            len(report.days),
            fee_ratio,
            report.total_return,
        )
        return ComputeLpStatisticsOutput(report=report)
