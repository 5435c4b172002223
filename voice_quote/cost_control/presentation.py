import logging
from typing import Dict, List, Optional

from ..config.settings import Settings, settings as default_settings
from .models import CostBreakdown, CostResult

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "n/a"


def derive_breakdown(result: CostResult) -> CostBreakdown:
    """Reconstruct per-minute display values from a result snapshot.

    Per-minute values are None where the reconstruction would divide by zero
    (zero minutes, or a -100% margin).
    """
    marginal_cost_per_minute: Optional[float] = None
    base_cost_per_minute: Optional[float] = None

    if result.total_minutes != 0:
        marginal_cost_per_minute = result.total_cost / result.total_minutes
        multiplier = 1 + result.margin / 100
        if multiplier != 0:
            base_cost_per_minute = marginal_cost_per_minute / multiplier
    else:
        logger.debug("Result priced zero minutes, per-minute values unavailable")

    return CostBreakdown(
        base_cost_per_minute=base_cost_per_minute,
        marginal_cost_per_minute=marginal_cost_per_minute,
        total_cost=result.total_cost,
    )


def format_amount(value: Optional[float], decimals: int, currency_symbol: str = "$") -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{currency_symbol}{value:.{decimals}f}"


def format_breakdown(
    breakdown: CostBreakdown,
    settings: Optional[Settings] = None
) -> Dict[str, str]:
    """Format breakdown values for display"""
    cfg = settings or default_settings
    return {
        "base_cost_per_minute": format_amount(
            breakdown.base_cost_per_minute, cfg.per_minute_decimals, cfg.currency_symbol
        ),
        "marginal_cost_per_minute": format_amount(
            breakdown.marginal_cost_per_minute, cfg.per_minute_decimals, cfg.currency_symbol
        ),
        "total_cost": format_amount(
            breakdown.total_cost, cfg.total_decimals, cfg.currency_symbol
        ),
    }


def result_lines(breakdown: CostBreakdown, settings: Optional[Settings] = None) -> List[str]:
    """Labelled lines for the results block"""
    formatted = format_breakdown(breakdown, settings)
    return [
        f"Base cost per minute: {formatted['base_cost_per_minute']}",
        f"Cost per minute with margin: {formatted['marginal_cost_per_minute']}",
        f"Total Cost: {formatted['total_cost']}",
    ]
