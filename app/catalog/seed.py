"""Seed catalog loader.

Loads the static catalog (exercise categories, exercises, plan tags and the
default library plans) from YAML and inserts the missing entries into the
database. Seeding is idempotent: rows are matched by name and existing rows
are never modified.
"""

from pathlib import Path

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, model_validator
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models import (
    Exercise,
    ExerciseCategory,
    ExerciseSet,
    PlanActivity,
    TrainingPlan,
    TrainingPlanCategory,
)
from app.domains.plan_generator.enums import Equipment


class SeedCategory(BaseModel):
    """Exercise category or plan tag entry."""

    name: str = Field(..., min_length=3, max_length=30)
    description: str | None = Field(None, max_length=200)


class SeedExercise(BaseModel):
    """Library exercise entry."""

    name: str = Field(..., min_length=3, max_length=50)
    description: str | None = None
    primary_category: str
    secondary_categories: list[str] = Field(default_factory=list)
    equipment: Equipment = Equipment.NONE

    @model_validator(mode="after")
    def primary_not_in_secondaries(self) -> "SeedExercise":
        if self.primary_category in self.secondary_categories:
            raise ValueError(f"Exercise '{self.name}' repeats its primary category as a secondary category")
        return self


class SeedSet(BaseModel):
    repetitions: int = Field(..., ge=0)
    weight: float | None = Field(None, gt=0)
    rest_after_seconds: int | None = Field(60, ge=0)


class SeedActivity(BaseModel):
    """Library exercise (by name) with its prescribed sets, in order."""

    exercise: str
    sets: list[SeedSet] = Field(..., min_length=1)


class SeedPlan(BaseModel):
    """Default library plan. Activities are numbered in file order."""

    name: str = Field(..., min_length=3, max_length=50)
    description: str | None = None
    categories: list[str] = Field(default_factory=list)
    activities: list[SeedActivity] = Field(..., min_length=1)


class SeedCatalog(BaseModel):
    """Full seed file."""

    exercise_categories: list[SeedCategory] = Field(default_factory=list)
    exercises: list[SeedExercise] = Field(default_factory=list)
    plan_categories: list[SeedCategory] = Field(default_factory=list)
    default_plans: list[SeedPlan] = Field(default_factory=list)

    @model_validator(mode="after")
    def exercises_reference_known_categories(self) -> "SeedCatalog":
        known = {c.name for c in self.exercise_categories}
        for exercise in self.exercises:
            unknown = {exercise.primary_category, *exercise.secondary_categories} - known
            if unknown:
                raise ValueError(f"Exercise '{exercise.name}' references unknown categories: {sorted(unknown)}")
        return self

    @model_validator(mode="after")
    def plans_reference_known_entries(self) -> "SeedCatalog":
        exercise_names = {e.name for e in self.exercises}
        tag_names = {c.name for c in self.plan_categories}
        for plan in self.default_plans:
            unknown_tags = set(plan.categories) - tag_names
            if unknown_tags:
                raise ValueError(f"Plan '{plan.name}' references unknown plan categories: {sorted(unknown_tags)}")
            unknown_exercises = {a.exercise for a in plan.activities} - exercise_names
            if unknown_exercises:
                raise ValueError(f"Plan '{plan.name}' references unknown exercises: {sorted(unknown_exercises)}")
        return self


class SeedResult(BaseModel):
    """Number of rows inserted per table."""

    exercise_categories: int = 0
    exercises: int = 0
    plan_categories: int = 0
    default_plans: int = 0


def load_seed_catalog(path: str | Path) -> SeedCatalog:
    """Read and validate a seed catalog file.

    Args:
        path: Path to the YAML seed file

    Returns:
        Validated SeedCatalog

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a mapping or fails validation
    """
    seed_path = Path(path)
    if not seed_path.exists():
        raise FileNotFoundError(f"Seed catalog not found: {seed_path}")

    with seed_path.open() as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Invalid seed catalog format in {seed_path}: expected a mapping")

    try:
        return SeedCatalog.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid seed catalog {seed_path}: {e}") from e


def _seed_categories(session: Session, model, entries: list[SeedCategory]) -> int:
    existing = set(session.execute(select(model.name)).scalars().all())
    inserted = 0
    for entry in entries:
        if entry.name in existing:
            continue
        session.add(model(name=entry.name, description=entry.description))
        existing.add(entry.name)
        inserted += 1
    session.flush()
    return inserted


def _seed_exercises(session: Session, entries: list[SeedExercise]) -> int:
    categories = {c.name: c for c in session.execute(select(ExerciseCategory)).scalars().all()}
    existing = set(session.execute(select(Exercise.name).where(Exercise.user_id.is_(None))).scalars().all())
    inserted = 0
    for entry in entries:
        if entry.name in existing:
            continue
        session.add(
            Exercise(
                name=entry.name,
                description=entry.description,
                user_id=None,
                primary_category=categories[entry.primary_category],
                secondary_categories=[categories[name] for name in entry.secondary_categories],
                required_equipment=entry.equipment.value,
            )
        )
        existing.add(entry.name)
        inserted += 1
    session.flush()
    return inserted


def _seed_default_plans(session: Session, entries: list[SeedPlan]) -> int:
    exercises = {
        e.name: e for e in session.execute(select(Exercise).where(Exercise.user_id.is_(None))).scalars().all()
    }
    tags = {c.name: c for c in session.execute(select(TrainingPlanCategory)).scalars().all()}
    existing = set(
        session.execute(select(TrainingPlan.name).where(TrainingPlan.user_id.is_(None))).scalars().all()
    )
    inserted = 0
    for entry in entries:
        if entry.name in existing:
            continue
        plan = TrainingPlan(
            name=entry.name,
            description=entry.description,
            user_id=None,
            categories=[tags[name] for name in entry.categories],
        )
        for activity_order, activity in enumerate(entry.activities, start=1):
            plan.activities.append(
                PlanActivity(
                    exercise=exercises[activity.exercise],
                    order=activity_order,
                    sets=[
                        ExerciseSet(
                            order=set_order,
                            repetitions=s.repetitions,
                            weight=s.weight,
                            rest_after_seconds=s.rest_after_seconds,
                        )
                        for set_order, s in enumerate(activity.sets, start=1)
                    ],
                )
            )
        session.add(plan)
        existing.add(entry.name)
        inserted += 1
    session.flush()
    return inserted


def seed_database(session: Session, catalog: SeedCatalog) -> SeedResult:
    """Insert missing seed rows. Caller owns the transaction.

    Default plans go last because they reference exercises and plan tags by
    name.

    Args:
        session: Open database session
        catalog: Validated seed catalog

    Returns:
        SeedResult with insert counts
    """
    result = SeedResult(
        exercise_categories=_seed_categories(session, ExerciseCategory, catalog.exercise_categories),
        exercises=_seed_exercises(session, catalog.exercises),
        plan_categories=_seed_categories(session, TrainingPlanCategory, catalog.plan_categories),
    )
    result.default_plans = _seed_default_plans(session, catalog.default_plans)
    logger.info(
        "Seed catalog applied",
        exercise_categories=result.exercise_categories,
        exercises=result.exercises,
        plan_categories=result.plan_categories,
        default_plans=result.default_plans,
    )
    return result
