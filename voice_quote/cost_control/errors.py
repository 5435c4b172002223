from typing import Optional


NO_TECHNOLOGY_SELECTED_MESSAGE = "Please select at least one technology"


class CalculationError(Exception):
    """Base exception for quote calculation errors"""
    pass


class NoTechnologySelectedError(CalculationError):
    """Exception raised when a calculation is requested with an empty selection"""

    def __init__(self, message: str = NO_TECHNOLOGY_SELECTED_MESSAGE):
        super().__init__(message)
        self.message = message


class InvalidParameterError(CalculationError):
    """Exception raised when a form value falls outside its numeric bounds"""

    def __init__(self, field: str, value: object, reason: Optional[str] = None):
        self.field = field
        self.value = value
        self.reason = reason or "value out of range"
        super().__init__(f"Invalid {field}: {value!r} ({self.reason})")


class CatalogError(CalculationError):
    """Exception raised when a technology catalog is malformed"""
    pass


class ExportUnavailableError(CalculationError):
    """Exception raised when an export is requested before any calculation"""
    pass
