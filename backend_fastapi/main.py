import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import register_error_handlers
from backend_fastapi.api.routes.health import router as health_router
from backend_fastapi.api.routes.tasks import router as tasks_router
from core.domain.ports.task_repository import TaskRepository
from core.logging_config import configure_logging
from infrastructure.container import build_task_repository

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def _cors_origins() -> list[str]:
    cors_origins = os.getenv("CORS_ORIGINS", "*")
    if cors_origins == "*":
        return ["*"]
    return [origin.strip() for origin in cors_origins.split(",")]


def create_app(repository: TaskRepository | None = None) -> FastAPI:
    """
    Build the API around a single task store.

    The store belongs to the returned application: it is created here (from
    ``TASK_STORE`` when not given) and closed when the application shuts down.
    """
    configure_logging()
    store = repository if repository is not None else build_task_repository()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Task store ready (%s)", type(store).__name__)
        yield
        store.close()
        logger.info("Task store closed")

    app = FastAPI(title="Task Manager API", lifespan=lifespan)
    app.state.task_repository = store

    # Permissive CORS unless narrowed through the environment
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "false").lower() == "true",
        allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
        allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
    )

    register_error_handlers(app)
    app.include_router(tasks_router, prefix="/api")
    app.include_router(health_router)
    return app


app = create_app()
