"""Data models for plan generation.

Catalog inputs (Category, Exercise) are frozen: the generator never mutates
the catalog. Plan outputs (ExerciseSet, PlanActivity, GeneratedPlan) are
built fresh per call and handed to the caller for persistence; the weight
back-fill pass is the only thing that touches them afterwards.
"""

from dataclasses import dataclass, field

from app.domains.plan_generator.enums import Equipment, MovementType


# -----------------------------
# Catalog Inputs
# -----------------------------
@dataclass(frozen=True)
class Category:
    """Exercise muscle group or plan tag.

    Attributes:
        id: Catalog identifier
        name: Display name, unique within its catalog (e.g. "Chest", "Strength")
    """

    id: int
    name: str


@dataclass(frozen=True)
class Exercise:
    """Library or user-authored exercise.

    The variant is an explicit discriminant: owner_user_id is None for
    library exercises and holds the author's user id otherwise.

    Attributes:
        id: Catalog identifier
        name: Exercise name
        primary_category: The one muscle group the exercise is filed under
        secondary_categories: Other muscle groups worked, never the primary
        required_equipment: Equipment needed (Equipment.NONE for bodyweight)
        owner_user_id: Author of a user-made exercise, None for library ones
    """

    id: int
    name: str
    primary_category: Category
    secondary_categories: tuple[Category, ...] = ()
    required_equipment: Equipment = Equipment.NONE
    owner_user_id: str | None = None

    def __post_init__(self) -> None:
        if any(c.name == self.primary_category.name for c in self.secondary_categories):
            raise ValueError(
                f"Exercise '{self.name}' lists its primary category "
                f"'{self.primary_category.name}' as a secondary category"
            )

    @property
    def movement_type(self) -> MovementType:
        if self.secondary_categories:
            return MovementType.COMPOUND
        return MovementType.ISOLATION

    @property
    def is_user_made(self) -> bool:
        return self.owner_user_id is not None

    def works_category(self, category_name: str) -> bool:
        """True if the category is the primary or one of the secondaries."""
        if self.primary_category.name == category_name:
            return True
        return any(c.name == category_name for c in self.secondary_categories)


# -----------------------------
# Plan Outputs
# -----------------------------
@dataclass
class ExerciseSet:
    """One set of an activity.

    Attributes:
        order: 1-based position within the activity
        repetitions: Target reps (0 for timed/isometric movements)
        weight: Working weight, filled by the weight back-fill pass
        rest_after_seconds: Rest after the set
    """

    order: int
    repetitions: int
    weight: float | None = None
    rest_after_seconds: int | None = None


@dataclass
class PlanActivity:
    """One exercise slot in a plan with its sets."""

    exercise: Exercise
    sets: list[ExerciseSet] = field(default_factory=list)
    order: int = 0

    @property
    def exercise_id(self) -> int:
        return self.exercise.id


@dataclass
class GeneratedPlan:
    """Training plan produced by one generation call.

    Attributes:
        user_id: Owner of the plan
        name: Display name (e.g. "Push Strength Workout")
        description: Human-readable summary
        categories: Plan tags, no duplicates
        activities: Activities ordered by scheduling priority
    """

    user_id: str
    name: str
    description: str
    categories: list[Category] = field(default_factory=list)
    activities: list[PlanActivity] = field(default_factory=list)
