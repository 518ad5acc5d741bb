"""Stage logging for the plan generator.

generate_plan binds user_id once with logger.contextualize, so stage events
only carry the fields of their own stage (workout type, day, counts).
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from enum import StrEnum

from loguru import logger


class GeneratorStage(StrEnum):
    FETCH_CATALOG = "fetch_catalog"
    SELECT_STRUCTURE = "select_structure"
    SELECT_EXERCISES = "select_exercises"
    BUILD_ACTIVITIES = "build_activities"
    ASSEMBLE = "assemble"
    APPLY_WEIGHTS = "apply_weights"


def log_stage(stage: GeneratorStage, **fields: str | int | float | None) -> None:
    """Log the outcome of a completed stage with its own fields."""
    logger.info("Generator stage completed: {stage}", stage=stage.value, **fields)


def log_stage_failure(stage: GeneratorStage, error: Exception) -> None:
    logger.warning(
        "Generator stage failed: {stage}",
        stage=stage.value,
        error_type=type(error).__name__,
        error=str(error),
    )


@contextmanager
def timed_stage(stage: GeneratorStage) -> Iterator[None]:
    """Log the wall time of a stage at debug level, also when it raises."""
    started = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = round((time.perf_counter() - started) * 1000, 3)
        logger.debug("Generator stage timing: {stage}", stage=stage.value, duration_ms=duration_ms)
