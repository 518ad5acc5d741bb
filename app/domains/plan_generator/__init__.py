"""Plan generator - rule-based single-session training plans.

This module provides:
- Workout structure and training parameter selection
- Quota-driven exercise selection ranked by complexity
- Activity building and plan assembly
- Rep-max based weight back-fill
"""

from app.domains.plan_generator.activity_builder import build_activities
from app.domains.plan_generator.complexity import complexity_score
from app.domains.plan_generator.enums import (
    Equipment,
    ExperienceLevel,
    MovementType,
    PushPullWorkoutDay,
    TrainingGoal,
    UpperLowerWorkoutDay,
    WorkoutType,
)
from app.domains.plan_generator.errors import (
    InvalidParametersError,
    InvalidWorkoutConfigurationError,
    PlanGeneratorError,
)
from app.domains.plan_generator.exercise_selector import select_for_day, select_full_body
from app.domains.plan_generator.generator import CategorySupplier, ExerciseCatalog, PlanGenerator
from app.domains.plan_generator.models import Category, Exercise, ExerciseSet, GeneratedPlan, PlanActivity
from app.domains.plan_generator.parameters import TrainingParameters, adjust_for_frequency, select_parameters
from app.domains.plan_generator.weights import apply_weights
from app.domains.plan_generator.workout_type import select_workout_type

__all__ = [
    "Category",
    "CategorySupplier",
    "Equipment",
    "Exercise",
    "ExerciseCatalog",
    "ExerciseSet",
    "ExperienceLevel",
    "GeneratedPlan",
    "InvalidParametersError",
    "InvalidWorkoutConfigurationError",
    "MovementType",
    "PlanActivity",
    "PlanGenerator",
    "PlanGeneratorError",
    "PushPullWorkoutDay",
    "TrainingGoal",
    "TrainingParameters",
    "UpperLowerWorkoutDay",
    "WorkoutType",
    "adjust_for_frequency",
    "apply_weights",
    "build_activities",
    "complexity_score",
    "select_for_day",
    "select_full_body",
    "select_parameters",
    "select_workout_type",
]
