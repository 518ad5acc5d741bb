"""Request/response schemas for plan generation and catalog endpoints."""

from pydantic import BaseModel, Field

from app.db.models import TrainingPlan
from app.domains.plan_generator.enums import (
    Equipment,
    ExperienceLevel,
    MovementType,
    PushPullWorkoutDay,
    TrainingGoal,
    UpperLowerWorkoutDay,
)
from app.domains.plan_generator.models import Category, Exercise, GeneratedPlan


class GeneratePlanRequest(BaseModel):
    """Input for POST /plans/generate."""

    goal: TrainingGoal = Field(..., description="Training goal")
    experience: ExperienceLevel = Field(..., description="Experience level")
    weekly_days: int = Field(..., ge=1, le=7, description="Training days per week")
    available_equipment: list[Equipment] = Field(..., min_length=1, description="Equipment the user can use")
    push_pull_day: PushPullWorkoutDay | None = Field(None, description="Required for push/pull/legs plans")
    upper_lower_day: UpperLowerWorkoutDay | None = Field(None, description="Required for upper/lower plans")
    rep_maxes: dict[int, float] = Field(default_factory=dict, description="Exercise id to one-rep max")
    persist: bool = Field(True, description="Save the generated plan")


class CategoryResponse(BaseModel):
    id: int
    name: str


class ExerciseResponse(BaseModel):
    id: int
    name: str
    primary_category: str
    secondary_categories: list[str]
    equipment: Equipment
    movement_type: MovementType
    user_made: bool

    @classmethod
    def from_domain(cls, exercise: Exercise) -> "ExerciseResponse":
        return cls(
            id=exercise.id,
            name=exercise.name,
            primary_category=exercise.primary_category.name,
            secondary_categories=[c.name for c in exercise.secondary_categories],
            equipment=exercise.required_equipment,
            movement_type=exercise.movement_type,
            user_made=exercise.is_user_made,
        )


class SetResponse(BaseModel):
    order: int
    repetitions: int
    weight: float | None = None
    rest_after_seconds: int | None = None


class ActivityResponse(BaseModel):
    order: int
    exercise_id: int
    exercise_name: str
    sets: list[SetResponse]


class PlanResponse(BaseModel):
    """Generated or stored plan. id is None when the plan was not saved."""

    id: int | None = None
    user_id: str
    name: str
    description: str | None
    categories: list[CategoryResponse]
    activities: list[ActivityResponse]

    @classmethod
    def from_generated(cls, plan: GeneratedPlan, plan_id: int | None = None) -> "PlanResponse":
        return cls(
            id=plan_id,
            user_id=plan.user_id,
            name=plan.name,
            description=plan.description,
            categories=[CategoryResponse(id=c.id, name=c.name) for c in plan.categories],
            activities=[
                ActivityResponse(
                    order=a.order,
                    exercise_id=a.exercise_id,
                    exercise_name=a.exercise.name,
                    sets=[
                        SetResponse(
                            order=s.order,
                            repetitions=s.repetitions,
                            weight=s.weight,
                            rest_after_seconds=s.rest_after_seconds,
                        )
                        for s in a.sets
                    ],
                )
                for a in plan.activities
            ],
        )

    @classmethod
    def from_row(cls, row: TrainingPlan) -> "PlanResponse":
        return cls(
            id=row.id,
            user_id=row.user_id or "",
            name=row.name,
            description=row.description,
            categories=[CategoryResponse(id=c.id, name=c.name) for c in row.categories],
            activities=[
                ActivityResponse(
                    order=a.order,
                    exercise_id=a.exercise_id,
                    exercise_name=a.exercise.name,
                    sets=[
                        SetResponse(
                            order=s.order,
                            repetitions=s.repetitions,
                            weight=s.weight,
                            rest_after_seconds=s.rest_after_seconds,
                        )
                        for s in a.sets
                    ],
                )
                for a in row.activities
            ],
        )


def categories_response(categories: list[Category]) -> list[CategoryResponse]:
    return [CategoryResponse(id=c.id, name=c.name) for c in categories]
