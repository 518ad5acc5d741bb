"""Canonical enums for plan generation.

All enums are string-based so they serialize cleanly to JSON and to the
string columns of the relational schema.
"""

from enum import StrEnum


# -----------------------------
# User Input
# -----------------------------
class TrainingGoal(StrEnum):
    """What the user wants the plan to develop."""

    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ExperienceLevel(StrEnum):
    """How long the user has been training consistently."""

    UNTRAINED = "untrained"
    TRAINED = "trained"
    ADVANCED = "advanced"


class Equipment(StrEnum):
    """Equipment an exercise requires. NONE means bodyweight."""

    NONE = "none"
    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    CABLE = "cable"
    MACHINE = "machine"
    RESISTANCE_BAND = "resistance_band"
    KETTLEBELL = "kettlebell"
    PULL_UP_BAR = "pull_up_bar"


# -----------------------------
# Workout Structure
# -----------------------------
class WorkoutType(StrEnum):
    """Session structure of a generated plan."""

    FULL_BODY = "full_body"
    UPPER_LOWER = "upper_lower"
    PUSH_PULL = "push_pull"


class PushPullWorkoutDay(StrEnum):
    """Day of a push/pull/legs split."""

    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class UpperLowerWorkoutDay(StrEnum):
    """Day of an upper/lower split."""

    UPPER = "upper"
    LOWER = "lower"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# -----------------------------
# Exercise Classification
# -----------------------------
class MovementType(StrEnum):
    """Derived from an exercise's secondary categories, never stored."""

    COMPOUND = "compound"
    ISOLATION = "isolation"
