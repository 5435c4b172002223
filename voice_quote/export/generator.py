from abc import ABC, abstractmethod
from typing import Tuple

from pydantic import BaseModel, ConfigDict

from ..cost_control.models import CostBreakdown, CostResult, Technology


class ExportRequest(BaseModel):
    """Everything a generator needs to render a quote"""
    model_config = ConfigDict(frozen=True)

    result: CostResult
    breakdown: CostBreakdown
    technologies: Tuple[Technology, ...]


class DocumentGenerator(ABC):
    """Renders an ExportRequest into a document"""

    content_type: str = "application/pdf"
    file_extension: str = ".pdf"

    @abstractmethod
    def generate(self, request: ExportRequest) -> bytes:
        pass
