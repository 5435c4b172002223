import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from ..config.settings import Settings, settings as default_settings
from ..export import DocumentGenerator, ExportService
from ..notifications import LoggingNotifier, Notification, Notifier
from .catalog import DEFAULT_CATALOG
from .cost_calculator import CostCalculator
from .errors import ExportUnavailableError, InvalidParameterError, NoTechnologySelectedError
from .models import CalculationParameters, CostBreakdown, CostResult, Technology
from .presentation import derive_breakdown, format_breakdown, result_lines
from .selection import SelectionState

logger = logging.getLogger(__name__)


class CalculatorSession:
    """State and actions behind the quote form for one user.

    The form edits parameters and toggles technologies freely; a result only
    changes when calculate() succeeds. Failures are reported through the
    notifier and never raised to the caller.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        notifier: Optional[Notifier] = None,
        catalog: Iterable[Technology] = DEFAULT_CATALOG,
        document_generator: Optional[DocumentGenerator] = None
    ):
        self.settings = settings or default_settings
        self.notifier = notifier or LoggingNotifier()
        self.calculator = CostCalculator()
        self.export_service = ExportService(document_generator, self.notifier)

        self.selection = SelectionState(catalog)
        self.parameters = self._default_parameters()
        self.result: Optional[CostResult] = None

        logger.info(f"Calculator session started with {len(self.selection)} technologies")

    def _default_parameters(self) -> CalculationParameters:
        return CalculationParameters(
            call_duration=self.settings.default_call_duration,
            total_minutes=self.settings.default_total_minutes,
            margin=self.settings.default_margin,
        )

    @property
    def technologies(self) -> Tuple[Technology, ...]:
        return self.selection.technologies

    # Form inputs

    def update_parameters(self, **changes: float) -> bool:
        """Apply form edits; out-of-bound values are rejected and reported"""
        try:
            self.parameters = self.parameters.with_changes(**changes)
            return True
        except InvalidParameterError as e:
            logger.warning(f"Rejected parameter update {changes}: {e}")
            self.notifier.notify(Notification.error(str(e)))
            return False

    def set_call_duration(self, value: float) -> bool:
        return self.update_parameters(call_duration=value)

    def set_total_minutes(self, value: float) -> bool:
        return self.update_parameters(total_minutes=value)

    def set_margin(self, value: float) -> bool:
        return self.update_parameters(margin=value)

    def toggle_technology(self, tech_id: str) -> SelectionState:
        self.selection = self.selection.toggle(tech_id)
        return self.selection

    # Actions

    def calculate(self) -> Optional[CostResult]:
        """Calculate and store a result; on an empty selection the previous result stays"""
        try:
            result = self.calculator.calculate(self.selection, self.parameters)
        except NoTechnologySelectedError as e:
            self.notifier.notify(Notification.error(e.message))
            return None

        self.result = result
        return result

    def export_pdf(self) -> Optional[bytes]:
        try:
            return self.export_service.export(self.result, self.technologies)
        except ExportUnavailableError as e:
            logger.warning(f"Export rejected: {e}")
            self.notifier.notify(Notification.error(str(e)))
            return None
        except Exception as e:
            logger.error(f"Document generation failed: {e}")
            self.notifier.notify(Notification.error(f"Export failed: {e}"))
            return None

    def reset(self) -> None:
        """Restore default inputs and drop the current result"""
        self.selection = self.selection.clear()
        self.parameters = self._default_parameters()
        self.result = None
        logger.debug("Calculator session reset")

    # Derived state

    @property
    def can_export(self) -> bool:
        return self.result is not None

    @property
    def breakdown(self) -> Optional[CostBreakdown]:
        if self.result is None:
            return None
        return derive_breakdown(self.result)

    @property
    def is_result_stale(self) -> bool:
        """True when the inputs changed since the stored result was calculated"""
        if self.result is None:
            return False
        return (
            self.result.total_minutes != self.parameters.total_minutes
            or self.result.margin != self.parameters.margin
            or self.result.call_duration != self.parameters.call_duration
            or self.result.selected_ids != self.selection.selected_ids()
        )

    def summary(self) -> Dict[str, Any]:
        """Plain-dict view of the session for rendering"""
        breakdown = self.breakdown
        return {
            "parameters": self.parameters.model_dump(),
            "selected": list(self.selection.selected_ids()),
            "result": format_breakdown(breakdown, self.settings) if breakdown is not None else None,
            "result_lines": result_lines(breakdown, self.settings) if breakdown is not None else [],
            "stale": self.is_result_stale,
            "can_export": self.can_export,
        }
