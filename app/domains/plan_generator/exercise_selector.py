"""Quota-driven exercise selection.

Both strategies take an equipment-filtered pool and return exercises in draw
order. Each draw ranks its candidates by complexity and takes the top N; a
sparse pool just yields fewer exercises.
"""

from dataclasses import dataclass

from loguru import logger

from app.domains.plan_generator.complexity import rank_by_complexity
from app.domains.plan_generator.enums import (
    ExperienceLevel,
    MovementType,
    PushPullWorkoutDay,
    UpperLowerWorkoutDay,
)
from app.domains.plan_generator.models import Exercise

# Full body: (primary category, count), compound-heavy groups first
_FULL_BODY_QUOTAS: list[tuple[str, int]] = [
    ("Legs", 2),
    ("Chest", 1),
    ("Back", 2),
    ("Shoulders", 1),
    ("Biceps", 1),
    ("Triceps", 1),
    ("Core", 1),
]

_COMPOUND_QUOTA: dict[ExperienceLevel, int] = {
    ExperienceLevel.UNTRAINED: 3,
    ExperienceLevel.TRAINED: 4,
    ExperienceLevel.ADVANCED: 5,
}

_PUSH_PULL_ISOLATION_QUOTA: dict[ExperienceLevel, int] = {
    ExperienceLevel.UNTRAINED: 1,
    ExperienceLevel.TRAINED: 2,
    ExperienceLevel.ADVANCED: 3,
}

_UPPER_LOWER_ISOLATION_QUOTA: dict[ExperienceLevel, int] = {
    ExperienceLevel.UNTRAINED: 1,
    ExperienceLevel.TRAINED: 2,
    ExperienceLevel.ADVANCED: 2,
}


@dataclass(frozen=True)
class _Draw:
    """One quota draw: movement type, target category and how many to take."""

    movement_type: MovementType
    category: str
    count: int


def _is_compound_in(exercise: Exercise, category: str) -> bool:
    return exercise.movement_type == MovementType.COMPOUND and exercise.primary_category.name == category


def _is_isolation_in(exercise: Exercise, category: str) -> bool:
    return exercise.movement_type == MovementType.ISOLATION and exercise.works_category(category)


def _take_top(candidates: list[Exercise], count: int) -> list[Exercise]:
    if count <= 0:
        return []
    return rank_by_complexity(candidates)[:count]


def _run_draws(pool: list[Exercise], draws: list[_Draw]) -> list[Exercise]:
    selected: list[Exercise] = []
    for draw in draws:
        if draw.movement_type == MovementType.COMPOUND:
            candidates = [e for e in pool if _is_compound_in(e, draw.category)]
        else:
            candidates = [e for e in pool if _is_isolation_in(e, draw.category)]
        picked = _take_top(candidates, draw.count)
        if len(picked) < draw.count:
            logger.debug(
                "Quota draw short of exercises",
                movement_type=draw.movement_type.value,
                category=draw.category,
                wanted=draw.count,
                found=len(picked),
            )
        selected.extend(picked)
    return selected


def select_full_body(pool: list[Exercise]) -> list[Exercise]:
    """Select a full-body session from the pool.

    Quotas are fixed regardless of goal and experience and match on primary
    category only.

    Args:
        pool: Equipment-filtered exercises

    Returns:
        Selected exercises in draw order
    """
    selected: list[Exercise] = []
    for category, count in _FULL_BODY_QUOTAS:
        candidates = [e for e in pool if e.primary_category.name == category]
        selected.extend(_take_top(candidates, count))
    return selected


def _push_pull_draws(day: PushPullWorkoutDay, experience: ExperienceLevel) -> list[_Draw]:
    compound = _COMPOUND_QUOTA.get(experience, 3)
    isolation = _PUSH_PULL_ISOLATION_QUOTA.get(experience, 1)
    primary, supporting = {
        PushPullWorkoutDay.PUSH: ("Chest", "Triceps"),
        PushPullWorkoutDay.PULL: ("Back", "Biceps"),
        PushPullWorkoutDay.LEGS: ("Legs", "Core"),
    }[day]
    return [
        _Draw(MovementType.COMPOUND, primary, compound),
        _Draw(MovementType.ISOLATION, supporting, isolation),
    ]


def _upper_lower_draws(day: UpperLowerWorkoutDay, experience: ExperienceLevel) -> list[_Draw]:
    compound = _COMPOUND_QUOTA.get(experience, 3)
    isolation = _UPPER_LOWER_ISOLATION_QUOTA.get(experience, 1)
    if day == UpperLowerWorkoutDay.UPPER:
        return [
            # Horizontal push/pull
            _Draw(MovementType.COMPOUND, "Chest", compound // 2),
            _Draw(MovementType.COMPOUND, "Back", compound // 2),
            # Vertical push
            _Draw(MovementType.COMPOUND, "Shoulders", 1),
            _Draw(MovementType.ISOLATION, "Triceps", isolation),
            _Draw(MovementType.ISOLATION, "Biceps", isolation),
        ]
    return [
        _Draw(MovementType.COMPOUND, "Legs", compound),
        _Draw(MovementType.ISOLATION, "Core", isolation),
        _Draw(MovementType.ISOLATION, "Glutes", 1),
    ]


def select_for_day(
    pool: list[Exercise],
    day: PushPullWorkoutDay | UpperLowerWorkoutDay,
    experience: ExperienceLevel,
) -> list[Exercise]:
    """Select exercises for one day of a split routine.

    Compound draws match the primary category; isolation draws match the
    primary or any secondary category. Quotas grow with experience.

    Args:
        pool: Equipment-filtered exercises
        day: Push/pull/legs or upper/lower day
        experience: Experience level

    Returns:
        Selected exercises in draw order
    """
    if isinstance(day, PushPullWorkoutDay):
        draws = _push_pull_draws(day, experience)
    else:
        draws = _upper_lower_draws(day, experience)
    return _run_draws(pool, draws)
