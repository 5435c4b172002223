import logging
from typing import Iterable, Iterator, Tuple

from .catalog import DEFAULT_CATALOG, validate_catalog
from .models import Technology

logger = logging.getLogger(__name__)


class SelectionState:
    """Which catalog technologies the user has chosen.

    Every transition returns a new SelectionState; an instance is never
    mutated after construction, so callers can keep the old one around.
    """

    def __init__(self, technologies: Iterable[Technology] = DEFAULT_CATALOG):
        self._technologies: Tuple[Technology, ...] = validate_catalog(technologies)

    @property
    def technologies(self) -> Tuple[Technology, ...]:
        return self._technologies

    def toggle(self, tech_id: str) -> "SelectionState":
        """Flip the selection flag of one technology"""
        if not any(tech.id == tech_id for tech in self._technologies):
            logger.debug(f"Ignoring toggle for unknown technology: {tech_id}")
            return SelectionState(self._technologies)

        updated = tuple(
            tech.toggled() if tech.id == tech_id else tech
            for tech in self._technologies
        )
        logger.debug(f"Toggled technology {tech_id}")
        return SelectionState(updated)

    def clear(self) -> "SelectionState":
        """Deselect everything"""
        return SelectionState(
            tech.model_copy(update={"is_selected": False}) for tech in self._technologies
        )

    def selected(self) -> Tuple[Technology, ...]:
        return tuple(tech for tech in self._technologies if tech.is_selected)

    def selected_ids(self) -> Tuple[str, ...]:
        return tuple(tech.id for tech in self.selected())

    def is_selected(self, tech_id: str) -> bool:
        return tech_id in self.selected_ids()

    def __iter__(self) -> Iterator[Technology]:
        return iter(self._technologies)

    def __len__(self) -> int:
        return len(self._technologies)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectionState):
            return NotImplemented
        return self._technologies == other._technologies

    def __repr__(self) -> str:
        return f"SelectionState(selected={list(self.selected_ids())})"
