"""Training parameter selection (sets, reps, rest).

The baseline table is keyed by (goal, experience) and never defaults: a pair
outside the table is a caller bug and raises InvalidParametersError.

Frequency adjustment is an opt-in refinement on top of the baseline. It is
disabled unless PLAN_FREQUENCY_ADJUSTMENT is set or the assembler is called
with adjust_for_frequency=True.
"""

from typing import NamedTuple

from loguru import logger

from app.domains.plan_generator.enums import ExperienceLevel, TrainingGoal
from app.domains.plan_generator.errors import InvalidParametersError

MIN_SETS = 2
MIN_REST_SECONDS = 30


class TrainingParameters(NamedTuple):
    """Per-exercise prescription applied to every activity of a plan."""

    sets: int
    reps: int
    rest_seconds: int


_PARAMETER_TABLE: dict[tuple[TrainingGoal, ExperienceLevel], TrainingParameters] = {
    (TrainingGoal.STRENGTH, ExperienceLevel.UNTRAINED): TrainingParameters(3, 8, 120),
    (TrainingGoal.STRENGTH, ExperienceLevel.TRAINED): TrainingParameters(4, 6, 180),
    (TrainingGoal.STRENGTH, ExperienceLevel.ADVANCED): TrainingParameters(5, 5, 180),
    (TrainingGoal.HYPERTROPHY, ExperienceLevel.UNTRAINED): TrainingParameters(3, 12, 60),
    (TrainingGoal.HYPERTROPHY, ExperienceLevel.TRAINED): TrainingParameters(4, 10, 90),
    (TrainingGoal.HYPERTROPHY, ExperienceLevel.ADVANCED): TrainingParameters(4, 8, 90),
    # Endurance is the same for every level
    (TrainingGoal.ENDURANCE, ExperienceLevel.UNTRAINED): TrainingParameters(3, 15, 45),
    (TrainingGoal.ENDURANCE, ExperienceLevel.TRAINED): TrainingParameters(3, 15, 45),
    (TrainingGoal.ENDURANCE, ExperienceLevel.ADVANCED): TrainingParameters(3, 15, 45),
}


def select_parameters(goal: TrainingGoal, experience: ExperienceLevel) -> TrainingParameters:
    """Look up sets, reps and rest for a goal and experience level.

    Args:
        goal: Training goal
        experience: Experience level

    Returns:
        TrainingParameters for the pair

    Raises:
        InvalidParametersError: If the pair is not in the table
    """
    params = _PARAMETER_TABLE.get((goal, experience))
    if params is None:
        raise InvalidParametersError(f"No training parameters for goal={goal!r}, experience={experience!r}")
    return params


def _adjusted_sets(sets: int, experience: ExperienceLevel, weekly_days: int) -> int:
    # Low frequency needs more per-session volume, high frequency less
    if weekly_days == 1:
        return sets + 2
    if weekly_days == 2:
        return sets + 1
    if weekly_days in (4, 5):
        return max(MIN_SETS, sets - 1)
    if weekly_days == 6:
        if experience == ExperienceLevel.ADVANCED:
            return max(MIN_SETS, sets - 2)
        return max(MIN_SETS, sets - 1)
    return sets


def _adjusted_rest(rest_seconds: int, goal: TrainingGoal, weekly_days: int) -> int:
    if weekly_days >= 5:
        return max(MIN_REST_SECONDS, rest_seconds - 30)
    if weekly_days in (3, 4) and goal != TrainingGoal.STRENGTH:
        return max(MIN_REST_SECONDS, rest_seconds - 15)
    return rest_seconds


def adjust_for_frequency(
    params: TrainingParameters,
    goal: TrainingGoal,
    experience: ExperienceLevel,
    weekly_days: int,
) -> TrainingParameters:
    """Adjust per-session volume and rest for weekly training frequency.

    Weekly volume stays roughly constant: fewer days means more sets per
    session, more days means fewer sets and slightly shorter rest. Reps are
    tied to the goal and never change.

    Args:
        params: Baseline parameters from select_parameters
        goal: Training goal
        experience: Experience level
        weekly_days: Training days per week

    Returns:
        Adjusted TrainingParameters
    """
    adjusted = TrainingParameters(
        sets=_adjusted_sets(params.sets, experience, weekly_days),
        reps=params.reps,
        rest_seconds=_adjusted_rest(params.rest_seconds, goal, weekly_days),
    )
    if adjusted != params:
        logger.debug(
            "Adjusted training parameters for frequency",
            weekly_days=weekly_days,
            base_sets=params.sets,
            sets=adjusted.sets,
            base_rest=params.rest_seconds,
            rest=adjusted.rest_seconds,
        )
    return adjusted
