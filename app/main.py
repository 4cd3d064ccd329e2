import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.database import SessionLocal, check_db_connection, init_db
from app.seed import seed_reference_data
from app.utils.exceptions import AppException
from app.middleware.error_handler import (
    app_exception_handler,
    validation_exception_handler,
    store_error_handler,
    generic_exception_handler,
)

from app.api.v1 import missions
from app.api.v1 import availability

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=VERSION,
        description="Mission tracking and driver / vehicle / engineer availability API",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # ─── CORS ─────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ─── Exception Handlers ───────────────────────────────────────────────────
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # ─── Routers ──────────────────────────────────────────────────────────────
    PREFIX = settings.API_PREFIX
    app.include_router(missions.router,     prefix=PREFIX, tags=["Missions"])
    app.include_router(availability.router, prefix=PREFIX, tags=["Availability"])

    # ─── Startup ──────────────────────────────────────────────────────────────
    @app.on_event("startup")
    def on_startup():
        ok = check_db_connection()
        logger.info("✅ DB connected" if ok else "❌ DB connection FAILED")
        if not ok:
            return
        init_db()
        if settings.SEED_DEMO_DATA:
            with SessionLocal() as db:
                if seed_reference_data(db):
                    logger.info("Demo drivers, vehicles and engineers added")

    # ─── Banner / Health ──────────────────────────────────────────────────────
    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def banner():
        return "Task Tracker Backend is now running..."

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok", "app": settings.APP_NAME, "version": VERSION}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.APP_PORT,
                reload=settings.is_development)
