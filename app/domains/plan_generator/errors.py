"""Domain-specific errors for plan generation.

Insufficient catalog data is deliberately not represented here: the
generator produces a shorter plan instead of failing.
"""


class PlanGeneratorError(Exception):
    """Base exception for all plan generation errors."""

    pass


class InvalidParametersError(PlanGeneratorError):
    """Raised when a goal/experience pair has no training parameters."""

    pass


class InvalidWorkoutConfigurationError(PlanGeneratorError):
    """Raised when the resolved workout type needs a day that was not given."""

    pass
