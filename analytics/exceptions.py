class StatsError(ValueError):
    """Base for all analytics errors."""


class InvalidSlopeError(StatsError):
    """Slope rating missing or not positive where a differential needs it."""


class NonFiniteValueError(StatsError):
    """NaN or infinity reached an arithmetic step."""
