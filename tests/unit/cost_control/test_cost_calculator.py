"""Tests for cost calculator"""

from itertools import combinations

import pytest
from pydantic import ValidationError

from voice_quote.cost_control.cost_calculator import CostCalculator, calculate_total_cost
from voice_quote.cost_control.errors import NoTechnologySelectedError
from voice_quote.cost_control.models import CalculationParameters


def _select(catalog, ids):
    return tuple(tech.toggled() if tech.id in ids else tech for tech in catalog)


class TestCalculateTotalCost:
    """Test the pricing formula"""

    def test_vapi_and_twilio_scenario(self, catalog):
        """Test Vapi + Twilio over 1000 minutes at 20% margin"""
        technologies = _select(catalog, {"vapi", "twilio"})

        total = calculate_total_cost(technologies, total_minutes=1000, margin=20)

        assert total == pytest.approx(84.0)

    def test_zero_margin_single_technology(self, catalog):
        """Test Cal.com alone over 500 minutes with no margin"""
        technologies = _select(catalog, {"calcom"})

        assert calculate_total_cost(technologies, 500, 0) == pytest.approx(5.0)

    @pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
    def test_formula_for_every_subset(self, catalog, size):
        """Test sum(costs) * minutes * (1 + margin/100) across all subsets"""
        for ids in combinations([tech.id for tech in catalog], size):
            technologies = _select(catalog, set(ids))
            expected = sum(t.cost_per_minute for t in technologies if t.is_selected) * 750 * 1.35

            assert calculate_total_cost(technologies, 750, 35) == pytest.approx(expected)

    @pytest.mark.parametrize("total_minutes,margin", [(1000, 20), (1, 0), (0, 50), (250, 100)])
    def test_empty_selection_fails(self, catalog, total_minutes, margin):
        """Test an empty selection fails for any minutes and margin"""
        with pytest.raises(NoTechnologySelectedError) as exc_info:
            calculate_total_cost(catalog, total_minutes, margin)

        assert str(exc_info.value) == "Please select at least one technology"

    def test_bounds_not_enforced(self, catalog):
        """Test the formula itself computes out-of-range inputs"""
        technologies = _select(catalog, {"vapi"})

        assert calculate_total_cost(technologies, 0, 20) == 0.0
        assert calculate_total_cost(technologies, -100, 0) == pytest.approx(-5.0)
        assert calculate_total_cost(technologies, 100, 150) == pytest.approx(12.5)


class TestCostCalculator:
    """Test CostCalculator result snapshots"""

    def test_calculate_snapshot(self, cost_calculator, catalog, default_parameters):
        """Test the result captures everything used to price it"""
        technologies = _select(catalog, {"vapi", "twilio"})

        result = cost_calculator.calculate(technologies, default_parameters)

        assert result.total_cost == pytest.approx(84.0)
        assert result.base_cost_per_minute == pytest.approx(0.07)
        assert result.total_base_cost == pytest.approx(70.0)
        assert result.total_minutes == 1000
        assert result.margin == 20
        assert result.call_duration == 5
        assert result.selected_ids == ("vapi", "twilio")
        assert result.calculated_at.tzinfo is not None

    def test_call_duration_does_not_affect_cost(self, cost_calculator, catalog):
        """Test call duration is carried but not priced"""
        technologies = _select(catalog, {"synthflow"})

        short = cost_calculator.calculate(
            technologies, CalculationParameters(call_duration=1, total_minutes=200, margin=10)
        )
        long = cost_calculator.calculate(
            technologies, CalculationParameters(call_duration=45, total_minutes=200, margin=10)
        )

        assert short.total_cost == long.total_cost
        assert long.call_duration == 45

    def test_default_parameters_used(self, catalog):
        calculator = CostCalculator(CalculationParameters(total_minutes=100, margin=0))

        result = calculator.calculate(_select(catalog, {"makecom"}))

        assert result.total_cost == pytest.approx(2.0)

    def test_empty_selection_raises(self, cost_calculator, catalog, default_parameters):
        with pytest.raises(NoTechnologySelectedError):
            cost_calculator.calculate(catalog, default_parameters)

    def test_result_is_immutable(self, cost_calculator, catalog, default_parameters):
        result = cost_calculator.calculate(_select(catalog, {"vapi"}), default_parameters)

        with pytest.raises(ValidationError):
            result.total_cost = 1.0
