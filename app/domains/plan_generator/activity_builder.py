"""Activity builder: selected exercises to ordered plan activities."""

from app.domains.plan_generator.complexity import complexity_score
from app.domains.plan_generator.models import Exercise, ExerciseSet, PlanActivity


def build_activities(
    exercises: list[Exercise],
    sets: int,
    reps: int,
    rest_seconds: int,
) -> list[PlanActivity]:
    """Build plan activities with identical set prescriptions.

    Activities are stable-sorted by descending complexity so the most
    demanding movements come first, then numbered 1..N.

    Args:
        exercises: Selected exercises in selection order
        sets: Sets per exercise
        reps: Repetitions per set
        rest_seconds: Rest after each set

    Returns:
        Ordered list of PlanActivity
    """
    activities = [
        PlanActivity(
            exercise=exercise,
            sets=[
                ExerciseSet(order=set_order, repetitions=reps, rest_after_seconds=rest_seconds)
                for set_order in range(1, sets + 1)
            ],
        )
        for exercise in exercises
    ]

    activities.sort(key=lambda a: complexity_score(a.exercise), reverse=True)

    for index, activity in enumerate(activities, start=1):
        activity.order = index

    return activities
