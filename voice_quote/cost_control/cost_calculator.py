import logging
from typing import Iterable, Optional, Tuple

from .errors import NoTechnologySelectedError
from .models import CalculationParameters, CostResult, Technology

logger = logging.getLogger(__name__)


def _selected(technologies: Iterable[Technology]) -> Tuple[Technology, ...]:
    selected = tuple(tech for tech in technologies if tech.is_selected)
    if not selected:
        raise NoTechnologySelectedError()
    return selected


def _price(
    selected: Tuple[Technology, ...],
    total_minutes: float,
    margin: float
) -> Tuple[float, float, float]:
    """Return (base cost per minute, total base cost, final cost)"""
    base_cost_per_minute = sum(tech.cost_per_minute for tech in selected)
    total_base_cost = base_cost_per_minute * total_minutes
    final_cost = total_base_cost * (1 + margin / 100)
    return base_cost_per_minute, total_base_cost, final_cost


def calculate_total_cost(
    technologies: Iterable[Technology],
    total_minutes: float,
    margin: float
) -> float:
    """Price the selected technologies over total_minutes with a percentage margin.

    No bounds are enforced here: zero or negative minutes and margins outside
    0-100 are computed as given.
    """
    _, _, final_cost = _price(_selected(technologies), total_minutes, margin)
    return final_cost


class CostCalculator:
    """Turns a selection and form parameters into a CostResult snapshot"""

    def __init__(self, parameters: Optional[CalculationParameters] = None):
        self.default_parameters = parameters or CalculationParameters()

    def calculate(
        self,
        technologies: Iterable[Technology],
        parameters: Optional[CalculationParameters] = None
    ) -> CostResult:
        """Calculate the quote, raising NoTechnologySelectedError on an empty selection"""
        params = parameters or self.default_parameters

        try:
            selected = _selected(technologies)
        except NoTechnologySelectedError:
            logger.warning("Cost calculation requested with no technology selected")
            raise

        base_cost_per_minute, total_base_cost, total_cost = _price(
            selected, params.total_minutes, params.margin
        )

        result = CostResult(
            total_cost=total_cost,
            total_minutes=params.total_minutes,
            margin=params.margin,
            call_duration=params.call_duration,
            base_cost_per_minute=base_cost_per_minute,
            total_base_cost=total_base_cost,
            selected_ids=tuple(tech.id for tech in selected),
        )

        logger.info(
            f"Calculated quote ${total_cost:.2f} for {len(selected)} technologies "
            f"({params.total_minutes:g} min, {params.margin:g}% margin)"
        )
        return result
