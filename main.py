import logging
from contextlib import asynccontextmanager

from anyio import to_thread
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nutritrack.application.use_cases.notifications import (
    Clock,
    NotificationPolicy,
    Notifier,
    build_reminder_jobs,
)
from nutritrack.config import Settings, get_settings
from nutritrack.infrastructure.database import (
    create_db_engine,
    create_session_factory,
    initialize_database,
)
from nutritrack.infrastructure.nutrition_client import NutritionService
from nutritrack.infrastructure.scheduler import NotificationScheduler
from nutritrack.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema and run the reminder jobs while the app is serving."""

    state = app.state
    initialize_database(state.engine)
    if state.settings.scheduler_enabled:
        state.scheduler.start()
    try:
        yield
    finally:
        await to_thread.run_sync(state.scheduler.shutdown)
        state.engine.dispose()


def create_app(
    settings: Settings | None = None,
    *,
    clock: Clock | None = None,
    nutrition_service: NutritionService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    engine = create_db_engine(settings)
    session_factory = create_session_factory(engine)
    policy = NotificationPolicy.from_settings(settings, clock=clock)
    notifier = Notifier(policy)

    app = FastAPI(title="NutriTrack API", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.notifier = notifier
    app.state.nutrition_service = nutrition_service or NutritionService.from_settings(settings)
    app.state.scheduler = NotificationScheduler(
        build_reminder_jobs(settings, session_factory, notifier), timezone=policy.timezone
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
