from datetime import datetime, timezone
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidParameterError


class Technology(BaseModel):
    """A third-party service contributing a fixed per-minute cost"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    is_selected: bool = False
    cost_per_minute: float = Field(ge=0)

    def toggled(self) -> "Technology":
        """Return a copy with the selection flag flipped"""
        return self.model_copy(update={"is_selected": not self.is_selected})


class CalculationParameters(BaseModel):
    """Form inputs feeding the calculation"""
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    # Collected by the form but not part of the per-minute pricing formula
    call_duration: float = Field(default=5.0, ge=1)
    total_minutes: float = Field(default=1000.0, ge=1)
    margin: float = Field(default=20.0, ge=0, le=100)

    @classmethod
    def build(cls, **values) -> "CalculationParameters":
        """Validate values, raising InvalidParameterError on the first bad field"""
        try:
            return cls(**values)
        except ValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error.get("loc") else "parameters"
            raise InvalidParameterError(
                field, values.get(field), error.get("msg")
            ) from e

    def with_changes(self, **changes) -> "CalculationParameters":
        """Return validated parameters with the given fields replaced"""
        return self.build(**{**self.model_dump(), **changes})

    @property
    def margin_multiplier(self) -> float:
        return 1 + self.margin / 100


class CostResult(BaseModel):
    """Immutable snapshot of a successful calculation"""
    model_config = ConfigDict(frozen=True)

    total_cost: float
    total_minutes: float
    margin: float
    call_duration: float
    base_cost_per_minute: float
    total_base_cost: float
    selected_ids: Tuple[str, ...]
    calculated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class CostBreakdown(BaseModel):
    """Display values reconstructed from a CostResult"""
    model_config = ConfigDict(frozen=True)

    base_cost_per_minute: Optional[float] = None
    marginal_cost_per_minute: Optional[float] = None
    total_cost: float
