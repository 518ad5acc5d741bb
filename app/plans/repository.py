"""Repository functions for generated training plans.

Persists a GeneratedPlan as a user-made training plan with its activities,
sets and category links.
"""

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.db.models import ExerciseSet, PlanActivity, TrainingPlan, TrainingPlanCategory
from app.domains.plan_generator.models import GeneratedPlan


def save_generated_plan(session: Session, plan: GeneratedPlan) -> int:
    """Save a generated plan and return its id.

    The row is flushed, not committed; the caller owns the transaction.

    Args:
        session: Open database session
        plan: Plan returned by the generator (weights optional)

    Returns:
        Persisted plan id
    """
    category_ids = [c.id for c in plan.categories]
    categories: list[TrainingPlanCategory] = []
    if category_ids:
        rows = session.execute(
            select(TrainingPlanCategory).where(TrainingPlanCategory.id.in_(category_ids))
        ).scalars().all()
        by_id = {row.id: row for row in rows}
        categories = [by_id[i] for i in category_ids if i in by_id]

    plan_row = TrainingPlan(
        name=plan.name,
        description=plan.description,
        user_id=plan.user_id,
        categories=categories,
        activities=[
            PlanActivity(
                exercise_id=activity.exercise_id,
                order=activity.order,
                sets=[
                    ExerciseSet(
                        order=s.order,
                        repetitions=s.repetitions,
                        weight=s.weight,
                        rest_after_seconds=s.rest_after_seconds,
                    )
                    for s in activity.sets
                ],
            )
            for activity in plan.activities
        ],
    )
    session.add(plan_row)
    session.flush()

    logger.info(
        "Generated plan saved",
        plan_id=plan_row.id,
        user_id=plan.user_id,
        activities=len(plan.activities),
    )
    return plan_row.id


def get_user_plan(session: Session, plan_id: int, user_id: str) -> TrainingPlan | None:
    """Load a plan with activities, sets and categories if it belongs to the user."""
    query = (
        select(TrainingPlan)
        .where(TrainingPlan.id == plan_id, TrainingPlan.user_id == user_id)
        .options(
            selectinload(TrainingPlan.categories),
            selectinload(TrainingPlan.activities).selectinload(PlanActivity.sets),
            selectinload(TrainingPlan.activities).selectinload(PlanActivity.exercise),
        )
    )
    return session.execute(query).scalar_one_or_none()
