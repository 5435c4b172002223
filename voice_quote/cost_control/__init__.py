"""
Cost calculation for voice stack quotes

Technology catalog, selection state, the cost calculator and the display
breakdown derived from its results. The form-level session lives in
cost_control.cost_service.
"""

from .models import CalculationParameters, CostBreakdown, CostResult, Technology
from .errors import (
    CalculationError,
    CatalogError,
    ExportUnavailableError,
    InvalidParameterError,
    NoTechnologySelectedError,
)
from .catalog import DEFAULT_CATALOG, TechnologyCosts, build_catalog, get_technology
from .selection import SelectionState
from .cost_calculator import CostCalculator, calculate_total_cost
from .presentation import derive_breakdown, format_breakdown, result_lines

__all__ = [
    "CalculationParameters",
    "CostBreakdown",
    "CostResult",
    "Technology",
    "CalculationError",
    "CatalogError",
    "ExportUnavailableError",
    "InvalidParameterError",
    "NoTechnologySelectedError",
    "DEFAULT_CATALOG",
    "TechnologyCosts",
    "build_catalog",
    "get_technology",
    "SelectionState",
    "CostCalculator",
    "calculate_total_cost",
    "derive_breakdown",
    "format_breakdown",
    "result_lines",
]
