import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .errors import CatalogError
from .models import Technology

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TechnologyCosts:
    """Per-minute price for each supported service"""
    vapi_cost_per_minute: float = 0.05  # voice agent platform
    synthflow_cost_per_minute: float = 0.03  # voice agent platform
    twilio_cost_per_minute: float = 0.02  # telephony
    calcom_cost_per_minute: float = 0.01  # scheduling
    makecom_cost_per_minute: float = 0.02  # workflow automation


def build_catalog(costs: Optional[TechnologyCosts] = None) -> Tuple[Technology, ...]:
    """Build the ordered technology catalog with nothing selected"""
    costs = costs or TechnologyCosts()
    catalog = (
        Technology(id="vapi", name="Vapi", cost_per_minute=costs.vapi_cost_per_minute),
        Technology(id="synthflow", name="Synthflow", cost_per_minute=costs.synthflow_cost_per_minute),
        Technology(id="twilio", name="Twilio", cost_per_minute=costs.twilio_cost_per_minute),
        Technology(id="calcom", name="Cal.com", cost_per_minute=costs.calcom_cost_per_minute),
        Technology(id="makecom", name="Make.com", cost_per_minute=costs.makecom_cost_per_minute),
    )
    return validate_catalog(catalog)


def validate_catalog(technologies: Iterable[Technology]) -> Tuple[Technology, ...]:
    """Check id uniqueness and return the catalog as a tuple"""
    catalog = tuple(technologies)
    seen = set()
    for tech in catalog:
        if tech.id in seen:
            raise CatalogError(f"Duplicate technology id: {tech.id}")
        seen.add(tech.id)

    logger.debug(f"Technology catalog ready with {len(catalog)} entries")
    return catalog


def get_technology(technologies: Iterable[Technology], tech_id: str) -> Optional[Technology]:
    """Look up a technology by id"""
    return next((tech for tech in technologies if tech.id == tech_id), None)


DEFAULT_CATALOG = build_catalog()
