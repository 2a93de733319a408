"""Quizmaker - FastAPI app entry point. Route handlers mount onto ``app``."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from quizmaker.core.config import get_settings
from quizmaker.core.exceptions import ConsistencyError, QuizmakerError
from quizmaker.core.logging import setup_logging
from quizmaker.db.base import Base
from quizmaker.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    Base.metadata.create_all(bind=engine)
    logger.info("Application startup complete")
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Quiz authoring backend: users, sessions, MCQs and attempts",
    lifespan=lifespan,
)


@app.exception_handler(QuizmakerError)
async def quizmaker_error_handler(request: Request, exc: QuizmakerError):
    """Render domain errors as ``{"error": code, "message": text}``."""
    if isinstance(exc, ConsistencyError):
        logger.error("Consistency error: %s", exc.message, extra={"path": request.url.path})
        message = "An unexpected error occurred" if not settings.debug else exc.message
        return JSONResponse(status_code=exc.status_code, content={"error": exc.code, "message": message})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.code, "message": exc.message})


@app.get("/health")
async def health():
    return {"status": "ok"}
