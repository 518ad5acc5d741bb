"""Exercise complexity scoring.

Higher scores are scheduled first and win quota draws. Compound movements get
a flat bonus that no realistic number of secondary categories can overtake.
"""

from app.domains.plan_generator.enums import MovementType
from app.domains.plan_generator.models import Exercise

COMPOUND_BONUS = 100


def complexity_score(exercise: Exercise) -> int:
    """Score an exercise: compound bonus plus one point per secondary category."""
    score = COMPOUND_BONUS if exercise.movement_type == MovementType.COMPOUND else 0
    return score + len(exercise.secondary_categories)


def rank_by_complexity(exercises: list[Exercise]) -> list[Exercise]:
    """Sort exercises by descending complexity.

    sorted() is stable, so equal scores keep their input order.
    """
    return sorted(exercises, key=complexity_score, reverse=True)
