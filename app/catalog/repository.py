"""Exercise catalog and plan-category supplier backed by the database.

Maps ORM rows to the frozen generator models. Results are fetched fresh on
every call; nothing is cached.
"""

from loguru import logger
from sqlalchemy import or_, select
from sqlalchemy.orm import Session, selectinload

from app.db.models import Exercise as ExerciseRow
from app.db.models import ExerciseCategory as ExerciseCategoryRow
from app.db.models import TrainingPlanCategory as TrainingPlanCategoryRow
from app.domains.plan_generator.enums import Equipment
from app.domains.plan_generator.models import Category, Exercise


def _to_category(row: ExerciseCategoryRow | TrainingPlanCategoryRow) -> Category:
    return Category(id=row.id, name=row.name)


def to_domain_exercise(row: ExerciseRow) -> Exercise:
    """Convert an exercise row to the generator model.

    A secondary category equal to the primary is dropped rather than
    rejected, so one bad join row cannot break plan generation.
    """
    primary = _to_category(row.primary_category)
    secondaries = tuple(
        _to_category(c) for c in row.secondary_categories if c.id != row.primary_category_id
    )
    if len(secondaries) != len(row.secondary_categories):
        logger.warning(
            "Dropped primary category from secondary categories",
            exercise_id=row.id,
            exercise_name=row.name,
        )
    return Exercise(
        id=row.id,
        name=row.name,
        primary_category=primary,
        secondary_categories=secondaries,
        required_equipment=Equipment(row.required_equipment),
        owner_user_id=row.user_id,
    )


class SqlExerciseCatalog:
    """Library exercises plus the requesting user's own exercises."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def fetch_all_visible_exercises(self, user_id: str) -> list[Exercise]:
        query = (
            select(ExerciseRow)
            .where(or_(ExerciseRow.user_id.is_(None), ExerciseRow.user_id == user_id))
            .options(selectinload(ExerciseRow.secondary_categories))
            .order_by(ExerciseRow.id)
        )
        rows = self._session.execute(query).scalars().unique().all()
        logger.debug("Fetched visible exercises", user_id=user_id, count=len(rows))
        exercises: list[Exercise] = []
        for row in rows:
            try:
                exercises.append(to_domain_exercise(row))
            except ValueError as e:
                # Unknown equipment value written outside the seed loader
                logger.warning(
                    "Skipping exercise row that cannot be mapped",
                    exercise_id=row.id,
                    exercise_name=row.name,
                    equipment=row.required_equipment,
                    error=str(e),
                )
        return exercises


class SqlCategorySupplier:
    """All plan-category tags."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def fetch_all_plan_categories(self) -> list[Category]:
        query = select(TrainingPlanCategoryRow).order_by(TrainingPlanCategoryRow.id)
        rows = self._session.execute(query).scalars().all()
        return [_to_category(row) for row in rows]


class InMemoryCatalog:
    """Catalog and category supplier over fixed lists.

    Used when the generator runs without a database (scripts, tests).
    Exercises owned by other users are hidden the same way the SQL catalog
    hides them.
    """

    def __init__(self, exercises: list[Exercise], plan_categories: list[Category]) -> None:
        self._exercises = list(exercises)
        self._plan_categories = list(plan_categories)

    def fetch_all_visible_exercises(self, user_id: str) -> list[Exercise]:
        return [e for e in self._exercises if e.owner_user_id is None or e.owner_user_id == user_id]

    def fetch_all_plan_categories(self) -> list[Category]:
        return list(self._plan_categories)
