"""
FastAPI Application Entry Point

Integrates:
  - Trivia event-stream relay
  - Suggested topics (cached)
  - Health checks
  - Static frontend (public/)
  - Middleware for logging & error handling

Run: uvicorn main:app --reload --host 0.0.0.0 --port 3000
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

from api.dependencies import close_upstream_client
from api.errors import GatewayError
from api.suggestions import router as suggestions_router
from api.trivia import router as trivia_router
from config import Config

# Setup logging
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    logger.info("=" * 60)
    logger.info("Trivia gateway starting up...")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    logger.info(f"Upstream model: {Config.OPENROUTER_MODEL}")
    logger.info(f"Server is running on http://localhost:{Config.PORT}")
    logger.info("=" * 60)
    Config.validate()

    yield

    # Shutdown
    logger.info("Trivia gateway shutting down...")
    await close_upstream_client()


# Create FastAPI app
app = FastAPI(
    title="Trivia Gateway API",
    description="Server-side gateway for trivia generation and topic suggestions",
    version="1.0.0",
    lifespan=lifespan,
)

if Config.CORS_ALLOW_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ALLOW_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )


# Middleware for logging
class RequestLoggingMiddleware:
    """
    Log all requests.

    Plain ASGI so `send` passes straight through: a streamed response that
    fails mid-way is never finished off with a clean terminator here.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            logger.debug(f"{scope['method']} {scope['path']}")
        await self.app(scope, receive, send)


app.add_middleware(RequestLoggingMiddleware)


# Only answers when the response has not started; otherwise the connection is dropped
@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Request error: {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# Include routers
app.include_router(trivia_router)
app.include_router(suggestions_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """Readiness health check (Kubernetes readiness probe)."""
    if Config.validate():
        return {"status": "ready"}
    return {"status": "not_ready", "reason": "OPENROUTER_API_KEY is not set"}


@app.get("/config/info")
async def config_info():
    """Get non-sensitive configuration info."""
    return {
        "environment": Config.ENVIRONMENT,
        "model": Config.OPENROUTER_MODEL,
        "api_key_loaded": bool(Config.OPENROUTER_API_KEY),
        "port": Config.PORT,
    }


# Static frontend; mounted last so the API routes above take precedence
static_dir = Path(Config.STATIC_DIR)
if static_dir.is_dir():
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
else:
    logger.warning(f"Static directory '{static_dir}' not found; frontend not served")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=Config.PORT,
    )
