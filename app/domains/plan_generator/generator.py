"""Training plan assembly.

This module wires the generator stages together:
1. Fetch visible exercises and keep those the user has equipment for
2. Resolve workout structure and training parameters
3. Select exercises for the resolved structure/day
4. Build ordered activities
5. Tag, name and describe the plan

Every stage except the collaborator fetches is a pure function. The result
is returned unsaved; persisting it is the caller's job.
"""

from collections.abc import Iterable
from enum import StrEnum
from typing import Protocol, TypeVar

from loguru import logger

from app.domains.plan_generator.activity_builder import build_activities
from app.domains.plan_generator.descriptions import (
    FULL_BODY_LABEL,
    plan_description,
    plan_name,
    select_plan_categories,
)
from app.domains.plan_generator.enums import (
    Equipment,
    ExperienceLevel,
    PushPullWorkoutDay,
    TrainingGoal,
    UpperLowerWorkoutDay,
    WorkoutType,
)
from app.domains.plan_generator.errors import InvalidParametersError, InvalidWorkoutConfigurationError
from app.domains.plan_generator.exercise_selector import select_for_day, select_full_body
from app.domains.plan_generator.models import Category, Exercise, GeneratedPlan
from app.domains.plan_generator.observability import GeneratorStage, log_stage, log_stage_failure, timed_stage
from app.domains.plan_generator.parameters import adjust_for_frequency as adjust_parameters_for_frequency
from app.domains.plan_generator.parameters import select_parameters
from app.domains.plan_generator.weights import apply_weights
from app.domains.plan_generator.workout_type import select_workout_type


class ExerciseCatalog(Protocol):
    """Supplies library exercises plus the user's own."""

    def fetch_all_visible_exercises(self, user_id: str) -> list[Exercise]: ...


class CategorySupplier(Protocol):
    """Supplies every plan-category tag."""

    def fetch_all_plan_categories(self) -> list[Category]: ...


def filter_by_equipment(exercises: list[Exercise], available_equipment: Iterable[Equipment]) -> list[Exercise]:
    """Keep exercises whose required equipment is literally in the available set.

    Bodyweight exercises are only kept when Equipment.NONE is listed.
    """
    available = set(available_equipment)
    return [e for e in exercises if e.required_equipment in available]


DayT = TypeVar("DayT", PushPullWorkoutDay, UpperLowerWorkoutDay)


def _coerce_day(day: StrEnum | str | None, day_enum: type[DayT], workout_type: WorkoutType) -> DayT:
    if day is None:
        raise InvalidWorkoutConfigurationError(
            f"Workout type '{workout_type.value}' requires a {day_enum.__name__} but none was given"
        )
    try:
        return day_enum(day)
    except ValueError as e:
        raise InvalidWorkoutConfigurationError(f"Invalid {day_enum.__name__}: {day!r}") from e


class PlanGenerator:
    """Generates a single-session training plan for a user.

    Args:
        exercise_catalog: Source of visible exercises
        category_supplier: Source of plan-category tags
    """

    def __init__(self, exercise_catalog: ExerciseCatalog, category_supplier: CategorySupplier) -> None:
        self._exercise_catalog = exercise_catalog
        self._category_supplier = category_supplier

    def _select_exercises(
        self,
        pool: list[Exercise],
        workout_type: WorkoutType,
        experience: ExperienceLevel,
        push_pull_day: PushPullWorkoutDay | None,
        upper_lower_day: UpperLowerWorkoutDay | None,
    ) -> tuple[list[Exercise], str]:
        """Dispatch to the selection strategy for the workout type.

        Returns:
            Tuple of selected exercises and the day label used in the plan name

        Raises:
            InvalidWorkoutConfigurationError: If the required day is missing
                or the workout type is unknown
        """
        if workout_type == WorkoutType.FULL_BODY:
            return select_full_body(pool), FULL_BODY_LABEL
        if workout_type == WorkoutType.UPPER_LOWER:
            day = _coerce_day(upper_lower_day, UpperLowerWorkoutDay, workout_type)
            return select_for_day(pool, day, experience), day.label
        if workout_type == WorkoutType.PUSH_PULL:
            day = _coerce_day(push_pull_day, PushPullWorkoutDay, workout_type)
            return select_for_day(pool, day, experience), day.label
        raise InvalidWorkoutConfigurationError(f"Unknown workout type: {workout_type!r}")

    def generate_plan(
        self,
        user_id: str,
        goal: TrainingGoal,
        experience: ExperienceLevel,
        weekly_days: int,
        available_equipment: Iterable[Equipment],
        push_pull_day: PushPullWorkoutDay | None = None,
        upper_lower_day: UpperLowerWorkoutDay | None = None,
        *,
        adjust_for_frequency: bool = False,
    ) -> GeneratedPlan:
        """Generate a training plan.

        Args:
            user_id: Owner of the plan
            goal: Training goal
            experience: Experience level
            weekly_days: Training days per week
            available_equipment: Equipment the user has access to
            push_pull_day: Required when the resolved structure is push/pull/legs
            upper_lower_day: Required when the resolved structure is upper/lower
            adjust_for_frequency: Apply the weekly-frequency adjustment to sets/rest

        Returns:
            Unsaved GeneratedPlan

        Raises:
            InvalidParametersError: If goal/experience has no parameters
            InvalidWorkoutConfigurationError: If the required day is missing
        """
        with logger.contextualize(user_id=user_id):
            return self._generate(
                user_id,
                goal,
                experience,
                weekly_days,
                available_equipment,
                push_pull_day,
                upper_lower_day,
                adjust_for_frequency,
            )

    def _generate(
        self,
        user_id: str,
        goal: TrainingGoal,
        experience: ExperienceLevel,
        weekly_days: int,
        available_equipment: Iterable[Equipment],
        push_pull_day: PushPullWorkoutDay | None,
        upper_lower_day: UpperLowerWorkoutDay | None,
        adjust_for_frequency: bool,
    ) -> GeneratedPlan:
        with timed_stage(GeneratorStage.FETCH_CATALOG):
            exercises = self._exercise_catalog.fetch_all_visible_exercises(user_id)
        pool = filter_by_equipment(exercises, available_equipment)
        log_stage(GeneratorStage.FETCH_CATALOG, visible=len(exercises), available=len(pool))

        workout_type = select_workout_type(experience, weekly_days)
        try:
            params = select_parameters(goal, experience)
        except InvalidParametersError as e:
            log_stage_failure(GeneratorStage.SELECT_STRUCTURE, e)
            raise
        if adjust_for_frequency:
            params = adjust_parameters_for_frequency(params, goal, experience, weekly_days)
        log_stage(
            GeneratorStage.SELECT_STRUCTURE,
            workout_type=workout_type.value,
            sets=params.sets,
            reps=params.reps,
            rest_seconds=params.rest_seconds,
        )

        try:
            selected, day_label = self._select_exercises(
                pool, workout_type, experience, push_pull_day, upper_lower_day
            )
        except InvalidWorkoutConfigurationError as e:
            log_stage_failure(GeneratorStage.SELECT_EXERCISES, e)
            raise
        log_stage(GeneratorStage.SELECT_EXERCISES, day=day_label, selected=len(selected))

        activities = build_activities(selected, params.sets, params.reps, params.rest_seconds)
        log_stage(GeneratorStage.BUILD_ACTIVITIES, activities=len(activities))

        with timed_stage(GeneratorStage.ASSEMBLE):
            categories = select_plan_categories(
                self._category_supplier.fetch_all_plan_categories(), goal, workout_type
            )
            plan = GeneratedPlan(
                user_id=user_id,
                name=plan_name(goal, day_label),
                description=plan_description(goal, experience, workout_type),
                categories=categories,
                activities=activities,
            )
        log_stage(GeneratorStage.ASSEMBLE, plan_name=plan.name, categories=len(categories))
        return plan

    @staticmethod
    def apply_weights(
        plan: GeneratedPlan,
        rep_maxes: dict[int, float],
        goal: TrainingGoal,
        experience: ExperienceLevel,
    ) -> None:
        """Back-fill working weights on an assembled plan (see weights.apply_weights)."""
        with logger.contextualize(user_id=plan.user_id):
            apply_weights(plan, rep_maxes, goal, experience)
            log_stage(GeneratorStage.APPLY_WEIGHTS, rep_maxes=len(rep_maxes))
