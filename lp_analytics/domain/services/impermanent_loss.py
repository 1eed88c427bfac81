from __future__ import annotations

from decimal import Decimal

from lp_analytics.domain.entities.lp_statistics import DailySnapshot


def impermanent_loss_pct(price_ratio: Decimal) -> Decimal:
    """Constant-product impermanent loss for a price ratio r = P_current / P_initial.

    IL = 2 * sqrt(r) / (1 + r) - 1, which is 0 at r == 1 and negative otherwise.
    """
    return Decimal("2") * price_ratio.sqrt() / (price_ratio + Decimal("1")) - Decimal("1")


def exchange_rate(snapshot: DailySnapshot) -> Decimal:
    return snapshot.reserve0 / snapshot.reserve1


def calculate_impermanent_loss(
    *,
    baseline: DailySnapshot,
    current: DailySnapshot,
    lp_share_usd: Decimal,
) -> Decimal:
    price_ratio = exchange_rate(current) / exchange_rate(baseline)
    return impermanent_loss_pct(price_ratio) * lp_share_usd
