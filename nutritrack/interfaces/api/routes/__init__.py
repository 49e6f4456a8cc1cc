from fastapi import FastAPI

from .auth import router as auth_router
from .goals import router as goals_router
from .health import router as health_router
from .meals import foods_router as meal_foods_router
from .meals import router as meals_router
from .notifications import router as notifications_router
from .nutrition import router as nutrition_router
from .profile import router as profile_router
from .workouts import router as workouts_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(meals_router)
    app.include_router(meal_foods_router)
    app.include_router(workouts_router)
    app.include_router(goals_router)
    app.include_router(notifications_router)
    app.include_router(nutrition_router)
