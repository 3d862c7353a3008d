import logging
import os
import time
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import register_exception_handlers
from backend_fastapi.api.routes.health import router as health_router
from backend_fastapi.api.routes.todos import router as todos_router
from infrastructure.logging_config import setup_logging
from infrastructure.mongo.session.client import close_client

# Load environment variables from .env file
load_dotenv()
setup_logging(os.getenv("LOG_LEVEL", "info"))

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Todo List API started")
    yield
    logger.info("Shutting down gracefully...")
    close_client()


app = FastAPI(title="Todo List API", lifespan=lifespan)

# Configure CORS for frontend from environment variables
cors_origins = os.getenv("CORS_ORIGINS", "*")
if cors_origins == "*":
    origins = ["*"]
else:
    origins = [origin.strip() for origin in cors_origins.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
    allow_methods=os.getenv("CORS_ALLOW_METHODS", "GET,POST,PUT,DELETE").split(","),
    allow_headers=os.getenv("CORS_ALLOW_HEADERS", "Content-Type,Accept").split(","),
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {status_code} "
            f"({elapsed_ms:.1f}ms)"
        )


register_exception_handlers(app)

app.include_router(todos_router)
app.include_router(health_router)
