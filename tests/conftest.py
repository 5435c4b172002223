"""
Pytest configuration and shared fixtures for voice_quote tests
"""
import pytest

from voice_quote.config.settings import Settings
from voice_quote.cost_control.catalog import TechnologyCosts, build_catalog
from voice_quote.cost_control.cost_calculator import CostCalculator
from voice_quote.cost_control.cost_service import CalculatorSession
from voice_quote.cost_control.models import CalculationParameters
from voice_quote.cost_control.selection import SelectionState
from voice_quote.export import DocumentGenerator, ExportRequest
from voice_quote.notifications import RecordingNotifier


class FakeDocumentGenerator(DocumentGenerator):
    """Generator that records requests and returns a fixed payload"""

    content_type = "application/octet-stream"
    file_extension = ".bin"

    def __init__(self, payload: bytes = b"quote-document"):
        self.payload = payload
        self.requests = []

    def generate(self, request: ExportRequest) -> bytes:
        self.requests.append(request)
        return self.payload


@pytest.fixture
def test_settings():
    """Settings with the form defaults, isolated from the environment"""
    return Settings(
        _env_file=None,
        default_call_duration=5.0,
        default_total_minutes=1000.0,
        default_margin=20.0,
        currency_symbol="$",
        per_minute_decimals=4,
        total_decimals=2,
    )


@pytest.fixture
def catalog():
    """Default five-entry technology catalog"""
    return build_catalog(TechnologyCosts())


@pytest.fixture
def selection(catalog):
    return SelectionState(catalog)


@pytest.fixture
def default_parameters():
    return CalculationParameters(call_duration=5, total_minutes=1000, margin=20)


@pytest.fixture
def cost_calculator():
    return CostCalculator()


@pytest.fixture
def recording_notifier():
    return RecordingNotifier()


@pytest.fixture
def document_generator():
    return FakeDocumentGenerator()


@pytest.fixture
def session(test_settings, recording_notifier, catalog):
    """Calculator session wired to an in-memory notifier"""
    return CalculatorSession(
        settings=test_settings,
        notifier=recording_notifier,
        catalog=catalog,
    )


@pytest.fixture
def export_session(test_settings, recording_notifier, catalog, document_generator):
    """Calculator session with a document generator attached"""
    return CalculatorSession(
        settings=test_settings,
        notifier=recording_notifier,
        catalog=catalog,
        document_generator=document_generator,
    )
