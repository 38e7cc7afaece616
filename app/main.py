import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.config import settings
from app.core.errors import register_error_handlers
from app.core.logging_config import configure_logging
from app.db.session import init_db

from app.api.auth.routes import router as auth_router
from app.api.todo.project.routes import router as todo_project_router
from app.api.todo.task.routes import router as todo_task_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Task board API started (env=%s)", settings.ENV)
    yield


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)
    if settings.ENV == "prod" and settings.SECRET_KEY == "default-secret-change-in-production":
        logger.warning("SECRET_KEY is the built-in default; set it in the environment")

    # "/projects/" is a plain 404 envelope, not a redirect
    app = FastAPI(title="Task Board API", lifespan=lifespan, redirect_slashes=False)

    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(auth_router, prefix="/auth", tags=["Auth"])
    app.include_router(todo_project_router, prefix="/projects", tags=["Projects"])
    app.include_router(todo_task_router, prefix="/projects/{project_id}/tasks", tags=["Tasks"])

    @app.get("/ping")
    def ping():
        return {"success": True, "message": "pong", "data": None}

    return app


app = create_app()
