from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, ForeignKey, Index, Integer, String, Table, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all database models."""


exercise_secondary_categories = Table(
    "exercise_secondary_categories",
    Base.metadata,
    Column("exercise_id", Integer, ForeignKey("exercises.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("exercise_categories.id", ondelete="CASCADE"), primary_key=True),
)

training_plan_category_links = Table(
    "training_plan_category_links",
    Base.metadata,
    Column("plan_id", Integer, ForeignKey("training_plans.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("training_plan_categories.id", ondelete="CASCADE"), primary_key=True),
)


class ExerciseCategory(Base):
    """Muscle group an exercise is filed under (Chest, Back, Legs, ...)."""

    __tablename__ = "exercise_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(String(200), nullable=True)


class Exercise(Base):
    """Library and user-authored exercises in one table.

    Schema:
    - user_id: NULL for library exercises, the author's user id otherwise
    - primary_category_id: exactly one primary muscle group
    - secondary_categories: additional muscle groups (join table), never the primary
    - required_equipment: Equipment enum value ("none" means bodyweight)

    Movement type (compound/isolation) is derived from the secondary
    categories and intentionally not stored.
    """

    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    user_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    primary_category_id: Mapped[int] = mapped_column(Integer, ForeignKey("exercise_categories.id"), nullable=False)
    required_equipment: Mapped[str] = mapped_column(String, nullable=False, default="none")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    primary_category: Mapped[ExerciseCategory] = relationship("ExerciseCategory", lazy="joined")
    secondary_categories: Mapped[list[ExerciseCategory]] = relationship(
        "ExerciseCategory",
        secondary=exercise_secondary_categories,
        order_by="ExerciseCategory.id",
    )

    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_exercise_owner_name"),
    )


class TrainingPlanCategory(Base):
    """Plan tag (Full Body, Strength, Split Routine, ...)."""

    __tablename__ = "training_plan_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(String(200), nullable=True)


class TrainingPlan(Base):
    """Library (user_id NULL) or user-made training plan."""

    __tablename__ = "training_plans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    user_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    categories: Mapped[list[TrainingPlanCategory]] = relationship(
        "TrainingPlanCategory",
        secondary=training_plan_category_links,
        order_by="TrainingPlanCategory.id",
    )
    activities: Mapped[list[PlanActivity]] = relationship(
        "PlanActivity",
        back_populates="plan",
        cascade="all, delete-orphan",
        order_by="PlanActivity.order",
    )


class PlanActivity(Base):
    """Exercise slot within a training plan; order is 1-based and gapless."""

    __tablename__ = "plan_activities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    plan_id: Mapped[int] = mapped_column(Integer, ForeignKey("training_plans.id", ondelete="CASCADE"), nullable=False)
    exercise_id: Mapped[int] = mapped_column(Integer, ForeignKey("exercises.id"), nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False)

    plan: Mapped[TrainingPlan] = relationship("TrainingPlan", back_populates="activities")
    exercise: Mapped[Exercise] = relationship("Exercise")
    sets: Mapped[list[ExerciseSet]] = relationship(
        "ExerciseSet",
        back_populates="activity",
        cascade="all, delete-orphan",
        order_by="ExerciseSet.order",
    )

    __table_args__ = (
        Index("idx_plan_activities_plan_order", "plan_id", "order"),
    )


class ExerciseSet(Base):
    """One prescribed set of a plan activity."""

    __tablename__ = "exercise_sets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    activity_id: Mapped[int] = mapped_column(Integer, ForeignKey("plan_activities.id", ondelete="CASCADE"), nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False)
    repetitions: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    rest_after_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)

    activity: Mapped[PlanActivity] = relationship("PlanActivity", back_populates="sets")
