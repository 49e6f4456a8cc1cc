"""SQLAlchemy models for meals and meal foods."""

import uuid

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Uuid,
)
from sqlalchemy.orm import relationship

from nutritrack.infrastructure.database import Base


class MealModel(Base):
    """Database representation of a logged meal."""

    __tablename__ = "meals"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    meal_date = Column(Date, nullable=False)
    meal_type = Column(String(30), nullable=False)
    created_at = Column(DateTime, nullable=False)

    foods = relationship(
        "MealFoodModel",
        back_populates="meal",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class MealFoodModel(Base):
    """Food item eaten as part of a meal."""

    __tablename__ = "meal_foods"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    meal_id = Column(
        Uuid, ForeignKey("meals.id", ondelete="CASCADE"), nullable=False, index=True
    )
    food_id = Column(Integer, nullable=True)
    food_name = Column(String(255), nullable=False)
    quantity = Column(Float, nullable=False, default=0)
    unit = Column(String(20), nullable=False, default="g")
    calories = Column(Integer, nullable=False, default=0)
    protein = Column(Float, nullable=False, default=0)
    carbs = Column(Float, nullable=False, default=0)
    fat = Column(Float, nullable=False, default=0)
    fiber = Column(Float, nullable=False, default=0)
    sugar = Column(Float, nullable=False, default=0)
    sodium = Column(Float, nullable=False, default=0)
    calcium = Column(Float, nullable=False, default=0)
    iron = Column(Float, nullable=False, default=0)
    potassium = Column(Float, nullable=False, default=0)
    serving_size = Column(String(50), nullable=False, default="100 g")

    meal = relationship("MealModel", back_populates="foods")


__all__ = ["MealFoodModel", "MealModel"]
