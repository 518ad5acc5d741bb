"""Tests for building ordered plan activities."""

from app.domains.plan_generator.activity_builder import build_activities
from app.domains.plan_generator.complexity import complexity_score


class TestBuildActivities:
    def test_counts_and_set_orders(self, sample_exercises):
        exercises = sample_exercises[:5]
        activities = build_activities(exercises, sets=4, reps=6, rest_seconds=180)

        assert len(activities) == 5
        for activity in activities:
            assert [s.order for s in activity.sets] == [1, 2, 3, 4]
            assert all(s.repetitions == 6 for s in activity.sets)
            assert all(s.rest_after_seconds == 180 for s in activity.sets)
            assert all(s.weight is None for s in activity.sets)

    def test_orders_contiguous_and_sorted_by_complexity(self, sample_exercises):
        activities = build_activities(sample_exercises, sets=3, reps=8, rest_seconds=120)

        assert [a.order for a in activities] == list(range(1, len(sample_exercises) + 1))
        scores = [complexity_score(a.exercise) for a in activities]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_selection_order(self, sample_exercises):
        by_id = {e.id: e for e in sample_exercises}
        # Dumbbell Flyes (0), Incline Dumbbell Press (101), Barbell Rows (101), Plank (0)
        selection = [by_id[4], by_id[2], by_id[6], by_id[16]]
        activities = build_activities(selection, sets=1, reps=10, rest_seconds=60)
        assert [a.exercise_id for a in activities] == [2, 6, 4, 16]

    def test_zero_reps_allowed(self, sample_exercises):
        activities = build_activities([sample_exercises[15]], sets=2, reps=0, rest_seconds=30)
        assert [s.repetitions for s in activities[0].sets] == [0, 0]

    def test_empty_selection(self):
        assert build_activities([], sets=3, reps=8, rest_seconds=120) == []
