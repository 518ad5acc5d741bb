"""Training plan generation endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.orm import Session

from app.api.dependencies.auth import get_current_user_id
from app.api.schemas.plans import GeneratePlanRequest, PlanResponse
from app.catalog.repository import SqlCategorySupplier, SqlExerciseCatalog
from app.config.settings import settings
from app.db.session import get_db
from app.domains.plan_generator.errors import PlanGeneratorError
from app.domains.plan_generator.generator import PlanGenerator
from app.plans.repository import get_user_plan, save_generated_plan

router = APIRouter(prefix="/plans", tags=["plans"])


@router.post("/generate", response_model=PlanResponse, status_code=status.HTTP_201_CREATED)
def generate_plan(
    request: GeneratePlanRequest,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> PlanResponse:
    """Generate a single training session for the current user.

    Weights are filled in when rep maxes are supplied. The plan is saved
    unless persist is false.

    Args:
        request: Generation inputs
        user_id: Current authenticated user ID
        db: Database session

    Returns:
        PlanResponse with the generated plan (id set when saved)

    Raises:
        HTTPException: 422 if the inputs cannot produce a plan
    """
    logger.info(
        "Plan generation requested",
        user_id=user_id,
        goal=request.goal.value,
        experience=request.experience.value,
        weekly_days=request.weekly_days,
    )

    generator = PlanGenerator(SqlExerciseCatalog(db), SqlCategorySupplier(db))
    try:
        plan = generator.generate_plan(
            user_id=user_id,
            goal=request.goal,
            experience=request.experience,
            weekly_days=request.weekly_days,
            available_equipment=request.available_equipment,
            push_pull_day=request.push_pull_day,
            upper_lower_day=request.upper_lower_day,
            adjust_for_frequency=settings.plan_frequency_adjustment,
        )
    except PlanGeneratorError as e:
        logger.warning("Plan generation rejected", user_id=user_id, error=str(e))
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e

    if request.rep_maxes:
        PlanGenerator.apply_weights(plan, request.rep_maxes, request.goal, request.experience)

    plan_id = None
    if request.persist:
        plan_id = save_generated_plan(db, plan)
        db.commit()

    return PlanResponse.from_generated(plan, plan_id=plan_id)


@router.get("/{plan_id}", response_model=PlanResponse)
def get_plan(
    plan_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> PlanResponse:
    """Return a saved plan owned by the current user.

    Raises:
        HTTPException: 404 if the plan does not exist or belongs to another user
    """
    row = get_user_plan(db, plan_id, user_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
    return PlanResponse.from_row(row)
