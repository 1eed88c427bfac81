from __future__ import annotations

from decimal import Decimal

from lp_analytics.domain.exceptions import LpStatisticsInputError


FEE_RATIO = Decimal("0.003")
FEE_TIER_DENOMINATOR = Decimal("1000000")
SUPPORTED_FEE_TIERS = (100, 500, 3000, 10000)


def fee_ratio_from_tier(fee_tier: int) -> Decimal:
    # Fee tiers are expressed in hundredths of a bip (3000 -> 0.3%).
    if fee_tier not in SUPPORTED_FEE_TIERS:
        raise LpStatisticsInputError(f"Unsupported fee_tier: {fee_tier}.")
    return Decimal(fee_tier) / FEE_TIER_DENOMINATOR
