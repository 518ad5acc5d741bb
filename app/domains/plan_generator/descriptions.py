"""Plan naming, description text and plan-category tags."""

from app.domains.plan_generator.enums import ExperienceLevel, TrainingGoal, WorkoutType
from app.domains.plan_generator.errors import InvalidParametersError, InvalidWorkoutConfigurationError
from app.domains.plan_generator.models import Category

FULL_BODY_LABEL = "Full Body"

_GOAL_FOCUS: dict[TrainingGoal, str] = {
    TrainingGoal.STRENGTH: "strength development",
    TrainingGoal.HYPERTROPHY: "muscle growth",
    TrainingGoal.ENDURANCE: "muscular endurance",
}

_WORKOUT_TYPE_PHRASE: dict[WorkoutType, str] = {
    WorkoutType.FULL_BODY: "full body training program targeting all major muscle groups in each session",
    WorkoutType.UPPER_LOWER: "split routine alternating between upper and lower body workouts",
    WorkoutType.PUSH_PULL: "split routine rotating between push, pull, and leg focused workouts",
}

_LEVEL_PHRASE: dict[ExperienceLevel, str] = {
    ExperienceLevel.UNTRAINED: "beginners",
    ExperienceLevel.TRAINED: "intermediate trainees",
    ExperienceLevel.ADVANCED: "advanced trainees",
}

# Plan-category tag names as seeded in the catalog
_WORKOUT_TYPE_CATEGORY: dict[WorkoutType, str] = {
    WorkoutType.FULL_BODY: "Full Body",
    WorkoutType.UPPER_LOWER: "Upper/Lower",
    WorkoutType.PUSH_PULL: "Split Routine",
}

_GOAL_CATEGORY: dict[TrainingGoal, str] = {
    TrainingGoal.STRENGTH: "Strength",
    TrainingGoal.ENDURANCE: "Endurance",
}


def plan_name(goal: TrainingGoal, day_label: str) -> str:
    """Build the plan name, e.g. "Push Strength Workout"."""
    return f"{day_label} {TrainingGoal(goal).label} Workout"


def plan_description(goal: TrainingGoal, experience: ExperienceLevel, workout_type: WorkoutType) -> str:
    """Build the human-readable plan description.

    Raises:
        InvalidParametersError: If goal or experience is unknown
        InvalidWorkoutConfigurationError: If the workout type is unknown
    """
    focus = _GOAL_FOCUS.get(goal)
    level = _LEVEL_PHRASE.get(experience)
    if focus is None or level is None:
        raise InvalidParametersError(f"Cannot describe goal={goal!r}, experience={experience!r}")
    type_phrase = _WORKOUT_TYPE_PHRASE.get(workout_type)
    if type_phrase is None:
        raise InvalidWorkoutConfigurationError(f"Cannot describe workout type {workout_type!r}")

    return (
        f"A {type_phrase} designed for {level}, focusing on {focus}. "
        "Based on scientific research for optimal training adaptations."
    )


def select_plan_categories(
    all_categories: list[Category],
    goal: TrainingGoal,
    workout_type: WorkoutType,
) -> list[Category]:
    """Pick the plan tags matching the workout type and goal.

    Hypertrophy has no goal tag. Missing tags are skipped; each tag name is
    picked at most once, first catalog entry wins.
    """
    wanted = [_WORKOUT_TYPE_CATEGORY.get(workout_type), _GOAL_CATEGORY.get(goal)]

    selected: list[Category] = []
    for name in wanted:
        if name is None or any(c.name == name for c in selected):
            continue
        match = next((c for c in all_categories if c.name == name), None)
        if match is not None:
            selected.append(match)
    return selected
