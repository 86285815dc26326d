"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.api import auth, posts
from src.api.dependencies import get_token_issuer
from src.api.errors import register_exception_handlers
from src.config import get_settings

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Refuse to start without a signing secret
    get_token_issuer()
    logger.info(f"Blog API started ({settings.environment})")
    yield


app = FastAPI(
    title="Blog API",
    description="Users, JWT authentication and paginated posts",
    version="1.0.0",
    lifespan=lifespan,
)

allowed_origins = [settings.frontend_url] if settings.frontend_url else []
if settings.is_development:
    allowed_origins += ["http://localhost:3000", "http://localhost:5173"]

if allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        # The 500 body is rendered outside this middleware; log its line here
        elapsed = time.perf_counter() - start
        logger.info(f"{request.method} {request.url.path} - 500 - {elapsed:.4f}s")
        raise
    elapsed = time.perf_counter() - start
    logger.info(f"{request.method} {request.url.path} - {response.status_code} - {elapsed:.4f}s")
    return response


# Register routers
app.include_router(auth.router)
app.include_router(posts.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
