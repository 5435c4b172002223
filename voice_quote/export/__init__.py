"""
Quote document export.

Only the document-generation seam is defined here; concrete formats are
supplied by implementing DocumentGenerator.
"""

from .generator import DocumentGenerator, ExportRequest
from .service import ExportService, EXPORT_STARTED_TITLE, EXPORT_STARTED_MESSAGE

__all__ = [
    "DocumentGenerator",
    "ExportRequest",
    "ExportService",
    "EXPORT_STARTED_TITLE",
    "EXPORT_STARTED_MESSAGE",
]
