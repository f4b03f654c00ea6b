"""FastAPI 애플리케이션 진입점. 저장소 서비스, 미들웨어, API 라우터, 정적 프론트엔드 서빙을 등록합니다."""

import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from app.config import Settings, settings
from app.database import Database
from app.middleware.error_handlers import register_error_handlers
from app.routers import auth, posts, updates, downloads, comments
from app.services import auth_service
from app.utils.helpers import UPLOAD_URL_PREFIX

logger = logging.getLogger(__name__)

FRONTEND_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "frontend")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    logging.basicConfig(level=app_settings.LOG_LEVEL)
    database = Database(app_settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # startup failures propagate and stop the server
        database.create_all()
        os.makedirs(app_settings.UPLOAD_DIR, exist_ok=True)
        db = database.session()
        try:
            auth_service.ensure_admin(db, app_settings)
        finally:
            db.close()
        if app_settings.uses_default_secret:
            logger.warning("JWT_SECRET is using the built-in default; set it in the environment for production")
        logger.info("Nexo backend ready (database=%s)", database.url)
        yield
        database.dispose()

    app = FastAPI(
        title="Nexo",
        description="Posts, updates, downloads and moderated comments",
        version="1.0.0",
        docs_url="/docs" if app_settings.DEBUG else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # Register all routers
    app.include_router(auth.router)
    app.include_router(posts.router)
    app.include_router(updates.router)
    app.include_router(downloads.router)
    app.include_router(comments.router)

    @app.get("/api/health")
    def health_check():
        return {"status": "ok", "service": "Nexo"}

    # Static file serving for uploads; the directory is created in the lifespan
    app.mount(
        UPLOAD_URL_PREFIX,
        StaticFiles(directory=app_settings.UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

    # Serve frontend static files
    if os.path.exists(FRONTEND_DIR):
        app.mount("/", StaticFiles(directory=FRONTEND_DIR, html=True), name="frontend")

    return app


app = create_app()
