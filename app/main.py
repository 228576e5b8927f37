# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.errors import register_error_handlers
from app.core.log import configure_logging
from app.db.session import engine, SessionLocal
from app.db.base import Base

# Import models so SQLAlchemy knows about them (for create_all)
from app.models.user import User  # noqa: F401
from app.models.survey import Survey, Question, Response  # noqa: F401

# Routers
from app.api.routes import router as api_router
from app.api.survey_routes import router as survey_router

# Seeder
from app.db.seed import seed_demo_survey

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)
    app = FastAPI(title=settings.APP_NAME)

    if settings.uses_default_secret and settings.APP_ENV not in ("dev", "test"):
        logger.warning("JWT_SECRET is the built-in default; set it for %s", settings.APP_ENV)

    # CORS
    origins = [o.strip() for o in settings.BACKEND_CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Ensure tables exist (uses the SQLite file from .env)
    if settings.AUTO_CREATE_SCHEMA:
        Base.metadata.create_all(bind=engine)

    # Seed the demo survey if the store is empty
    if settings.SEED_DEMO_SURVEY:
        with SessionLocal() as db:
            inserted = seed_demo_survey(db)
            if inserted:
                logger.info("seeded demo survey with %d questions", inserted)

    # API routes
    app.include_router(api_router)       # /, /health, /auth/register, /auth/login
    app.include_router(survey_router)    # /surveys/*

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
