"""Weight back-fill from known rep-maxes.

Best-effort enrichment of an already generated plan: unknown goal/experience
pairs fall back to a moderate load instead of failing, and activities without
a usable rep-max are left alone.
"""

import math

from loguru import logger

from app.domains.plan_generator.enums import Equipment, ExperienceLevel, TrainingGoal
from app.domains.plan_generator.models import GeneratedPlan

WEIGHT_INCREMENT = 2.5
DEFAULT_LOAD_PERCENTAGE = 0.65

_LOAD_PERCENTAGE: dict[tuple[TrainingGoal, ExperienceLevel], float] = {
    (TrainingGoal.STRENGTH, ExperienceLevel.UNTRAINED): 0.65,
    (TrainingGoal.STRENGTH, ExperienceLevel.TRAINED): 0.75,
    (TrainingGoal.STRENGTH, ExperienceLevel.ADVANCED): 0.85,
    (TrainingGoal.HYPERTROPHY, ExperienceLevel.UNTRAINED): 0.65,
    (TrainingGoal.HYPERTROPHY, ExperienceLevel.TRAINED): 0.75,
    (TrainingGoal.HYPERTROPHY, ExperienceLevel.ADVANCED): 0.75,
    (TrainingGoal.ENDURANCE, ExperienceLevel.UNTRAINED): 0.55,
    (TrainingGoal.ENDURANCE, ExperienceLevel.TRAINED): 0.55,
    (TrainingGoal.ENDURANCE, ExperienceLevel.ADVANCED): 0.55,
}


def load_percentage(goal: TrainingGoal, experience: ExperienceLevel) -> float:
    """Share of the rep-max to load for a goal and experience level."""
    return _LOAD_PERCENTAGE.get((goal, experience), DEFAULT_LOAD_PERCENTAGE)


def round_to_increment(weight: float, increment: float = WEIGHT_INCREMENT) -> float:
    """Round half-up to the nearest loadable increment, never below one increment."""
    steps = math.floor(weight / increment + 0.5)
    return max(1, steps) * increment


def apply_weights(
    plan: GeneratedPlan,
    rep_maxes: dict[int, float],
    goal: TrainingGoal,
    experience: ExperienceLevel,
) -> None:
    """Assign working weights to a plan's sets in place.

    Every set of an activity gets the same weight. Bodyweight exercises and
    exercises without a positive rep-max are skipped.

    Args:
        plan: Generated plan to update
        rep_maxes: Exercise id to one-rep max
        goal: Training goal the plan was generated for
        experience: Experience level the plan was generated for
    """
    if not rep_maxes:
        return

    percentage = load_percentage(goal, experience)
    updated = 0

    for activity in plan.activities:
        if activity.exercise.required_equipment == Equipment.NONE:
            continue
        rep_max = rep_maxes.get(activity.exercise_id)
        if rep_max is None or rep_max <= 0:
            continue

        weight = round_to_increment(rep_max * percentage)
        for exercise_set in activity.sets:
            exercise_set.weight = weight
        updated += 1

    logger.info(
        "Applied rep-max weights to plan",
        plan_name=plan.name,
        percentage=percentage,
        activities_updated=updated,
    )
