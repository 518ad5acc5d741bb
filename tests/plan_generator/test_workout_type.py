"""Tests for workout structure selection."""

import pytest

from app.domains.plan_generator.enums import ExperienceLevel, WorkoutType
from app.domains.plan_generator.workout_type import select_workout_type


class TestSelectWorkoutType:
    """Test select_workout_type() priority rules."""

    @pytest.mark.parametrize("weekly_days", [1, 2, 3, 5, 7])
    def test_untrained_always_full_body(self, weekly_days):
        assert select_workout_type(ExperienceLevel.UNTRAINED, weekly_days) == WorkoutType.FULL_BODY

    @pytest.mark.parametrize("weekly_days", [1, 2])
    def test_trained_low_frequency_upper_lower(self, weekly_days):
        assert select_workout_type(ExperienceLevel.TRAINED, weekly_days) == WorkoutType.UPPER_LOWER

    @pytest.mark.parametrize("weekly_days", [3, 4, 6])
    def test_trained_higher_frequency_push_pull(self, weekly_days):
        assert select_workout_type(ExperienceLevel.TRAINED, weekly_days) == WorkoutType.PUSH_PULL

    @pytest.mark.parametrize("weekly_days", [1, 2, 4])
    def test_advanced_always_push_pull(self, weekly_days):
        assert select_workout_type(ExperienceLevel.ADVANCED, weekly_days) == WorkoutType.PUSH_PULL

    def test_deterministic(self):
        """Test that the same inputs always give the same structure."""
        results = {select_workout_type(ExperienceLevel.TRAINED, 2) for _ in range(5)}
        assert results == {WorkoutType.UPPER_LOWER}
