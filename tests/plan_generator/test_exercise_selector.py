"""Tests for quota-driven exercise selection."""

from app.domains.plan_generator.enums import (
    Equipment,
    ExperienceLevel,
    MovementType,
    PushPullWorkoutDay,
    UpperLowerWorkoutDay,
)
from app.domains.plan_generator.exercise_selector import select_for_day, select_full_body
from app.domains.plan_generator.generator import filter_by_equipment


def _pool(exercises, *equipment, owner="user-1"):
    visible = [e for e in exercises if e.owner_user_id in (None, owner)]
    return filter_by_equipment(visible, equipment)


class TestSelectFullBody:
    """Test select_full_body() fixed quotas."""

    def test_barbell_dumbbell_pool(self, sample_exercises):
        pool = _pool(sample_exercises, Equipment.BARBELL, Equipment.DUMBBELL)
        selected = select_full_body(pool)
        # Legs 2, Chest 1, Back 2, Shoulders 1; no arm or core work for this equipment
        assert [e.id for e in selected] == [9, 10, 1, 5, 6, 12]

    def test_full_equipment_fills_every_quota(self, sample_exercises):
        pool = _pool(sample_exercises, *Equipment)
        selected = select_full_body(pool)
        counts: dict[str, int] = {}
        for exercise in selected:
            counts[exercise.primary_category.name] = counts.get(exercise.primary_category.name, 0) + 1
        assert counts == {"Legs": 2, "Chest": 1, "Back": 2, "Shoulders": 1, "Biceps": 1, "Triceps": 1, "Core": 1}

    def test_empty_pool_returns_empty(self):
        assert select_full_body([]) == []

    def test_deterministic(self, sample_exercises):
        pool = _pool(sample_exercises, *Equipment)
        assert select_full_body(pool) == select_full_body(pool)


class TestSelectForDay:
    """Test select_for_day() split-day draws."""

    def test_push_day_advanced(self, sample_exercises):
        pool = _pool(sample_exercises, Equipment.BARBELL, Equipment.DUMBBELL, Equipment.CABLE)
        selected = select_for_day(pool, PushPullWorkoutDay.PUSH, ExperienceLevel.ADVANCED)
        assert [e.id for e in selected] == [1, 2, 15]
        assert selected[-1].movement_type == MovementType.ISOLATION

    def test_pull_day_untrained_takes_top_three(self, sample_exercises):
        pool = _pool(sample_exercises, *Equipment)
        selected = select_for_day(pool, PushPullWorkoutDay.PULL, ExperienceLevel.UNTRAINED)
        # Deadlift first, then the 101-score rows in catalog order, then one biceps isolation
        assert [e.id for e in selected] == [5, 6, 7, 14]

    def test_legs_day_core_isolation(self, sample_exercises):
        pool = _pool(sample_exercises, Equipment.NONE, Equipment.BARBELL, Equipment.DUMBBELL)
        selected = select_for_day(pool, PushPullWorkoutDay.LEGS, ExperienceLevel.TRAINED)
        assert [e.id for e in selected] == [9, 10, 16]

    def test_upper_day_trained(self, sample_exercises):
        pool = _pool(sample_exercises, *Equipment)
        selected = select_for_day(pool, UpperLowerWorkoutDay.UPPER, ExperienceLevel.TRAINED)
        # Chest 2, Back 2, Shoulders 1 compound; Triceps 1 and Biceps 1 isolation available
        assert [e.id for e in selected] == [1, 3, 5, 6, 12, 15, 14]

    def test_upper_day_untrained_half_quota_rounds_down(self, sample_exercises):
        pool = _pool(sample_exercises, Equipment.BARBELL)
        selected = select_for_day(pool, UpperLowerWorkoutDay.UPPER, ExperienceLevel.UNTRAINED)
        assert [e.id for e in selected] == [1, 5, 12]

    def test_lower_day(self, sample_exercises):
        pool = _pool(sample_exercises, *Equipment)
        selected = select_for_day(pool, UpperLowerWorkoutDay.LOWER, ExperienceLevel.ADVANCED)
        assert [e.id for e in selected] == [9, 10, 16, 17, 18]

    def test_isolation_draw_matches_primary_category(self, exercise_categories):
        from app.domains.plan_generator.models import Exercise

        curl = Exercise(id=1, name="Curl", primary_category=exercise_categories["Biceps"])
        selected = select_for_day([curl], PushPullWorkoutDay.PULL, ExperienceLevel.TRAINED)
        assert selected == [curl]

    def test_sparse_pool_returns_fewer(self, sample_exercises):
        pool = _pool(sample_exercises, Equipment.MACHINE)
        selected = select_for_day(pool, PushPullWorkoutDay.PUSH, ExperienceLevel.ADVANCED)
        assert selected == []
