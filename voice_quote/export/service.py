import logging
from typing import Iterable, Optional

from ..cost_control.catalog import DEFAULT_CATALOG
from ..cost_control.errors import ExportUnavailableError
from ..cost_control.models import CostResult, Technology
from ..cost_control.presentation import derive_breakdown
from ..notifications import LoggingNotifier, Notification, Notifier
from .generator import DocumentGenerator, ExportRequest

logger = logging.getLogger(__name__)

EXPORT_STARTED_TITLE = "Export Started"
EXPORT_STARTED_MESSAGE = "Your PDF is being generated..."


class ExportService:
    """Announces and runs quote document exports"""

    def __init__(
        self,
        generator: Optional[DocumentGenerator] = None,
        notifier: Optional[Notifier] = None
    ):
        self.generator = generator
        self.notifier = notifier or LoggingNotifier()

    def build_request(
        self,
        result: CostResult,
        technologies: Iterable[Technology] = DEFAULT_CATALOG
    ) -> ExportRequest:
        """Bundle the result with the technologies it was priced from"""
        priced = tuple(
            tech.model_copy(update={"is_selected": True})
            for tech in technologies
            if tech.id in result.selected_ids
        )
        return ExportRequest(
            result=result,
            breakdown=derive_breakdown(result),
            technologies=priced,
        )

    def export(
        self,
        result: Optional[CostResult],
        technologies: Iterable[Technology] = DEFAULT_CATALOG
    ) -> Optional[bytes]:
        """Export a calculated quote; returns None when no generator is configured"""
        if result is None:
            raise ExportUnavailableError("Calculate a quote before exporting")

        self.notifier.notify(Notification.info(EXPORT_STARTED_MESSAGE, title=EXPORT_STARTED_TITLE))

        if self.generator is None:
            logger.info("Export requested but no document generator is configured")
            return None

        request = self.build_request(result, technologies)
        document = self.generator.generate(request)
        logger.info(
            f"Exported quote ${result.total_cost:.2f} as {self.generator.content_type} "
            f"({len(document)} bytes)"
        )
        return document
