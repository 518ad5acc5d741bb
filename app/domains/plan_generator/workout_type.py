"""Workout structure selection.

Untrained lifters get the most out of full-body sessions. Trained lifters on
one or two days a week split upper/lower; everyone else runs push/pull/legs
for volume management.
"""

from app.domains.plan_generator.enums import ExperienceLevel, WorkoutType


def select_workout_type(experience: ExperienceLevel, weekly_days: int) -> WorkoutType:
    """Map experience and weekly frequency to a workout structure.

    Total function: every input maps to a structure, first match wins.

    Args:
        experience: User experience level
        weekly_days: Training days per week

    Returns:
        Selected WorkoutType
    """
    if experience == ExperienceLevel.UNTRAINED:
        return WorkoutType.FULL_BODY
    if experience == ExperienceLevel.TRAINED and weekly_days <= 2:
        return WorkoutType.UPPER_LOWER
    return WorkoutType.PUSH_PULL
