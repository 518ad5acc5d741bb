"""Catalog endpoints: visible exercises and plan categories."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.dependencies.auth import get_current_user_id
from app.api.schemas.plans import CategoryResponse, ExerciseResponse, categories_response
from app.catalog.repository import SqlCategorySupplier, SqlExerciseCatalog
from app.db.session import get_db
from app.domains.plan_generator.enums import Equipment
from app.domains.plan_generator.generator import filter_by_equipment

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/exercises", response_model=list[ExerciseResponse])
def list_exercises(
    equipment: list[Equipment] | None = Query(None, description="Only exercises usable with this equipment"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> list[ExerciseResponse]:
    """List library exercises plus the current user's own exercises."""
    exercises = SqlExerciseCatalog(db).fetch_all_visible_exercises(user_id)
    if equipment:
        exercises = filter_by_equipment(exercises, equipment)
    return [ExerciseResponse.from_domain(e) for e in exercises]


@router.get("/plan-categories", response_model=list[CategoryResponse])
def list_plan_categories(db: Session = Depends(get_db)) -> list[CategoryResponse]:
    return categories_response(SqlCategorySupplier(db).fetch_all_plan_categories())
