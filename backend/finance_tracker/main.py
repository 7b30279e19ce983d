import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .api import api_router
from .config import ensure_data_dir, get_settings
from .database import close_database, init_database, is_database_open
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    if not is_database_open():
        ensure_data_dir(settings)
        init_database(settings.SQLALCHEMY_DATABASE_URL)
    yield
    # Cleanup on shutdown
    close_database()


app = FastAPI(
    title="Personal Finance Tracker",
    description="Income and expense tracking with monthly budgets and reports",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(SQLAlchemyError)
async def ledger_store_error_handler(request: Request, exc: SQLAlchemyError):
    """Report database failures as a transient outage; no retry happens here."""
    logger.error("Ledger store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=503, content={"detail": "Ledger store unavailable"})


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}
