"""
FastAPI application for the admin email composer.

Run: uvicorn main:app --reload --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from api import router as email_router
from config import Config
from infra import bootstrap_infrastructure

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    infra = bootstrap_infrastructure()
    Config.validate()
    logger.info(
        f"Email composer ready: {infra!r}",
        extra={"app_name": Config.APP_NAME, "environment": Config.ENVIRONMENT},
    )
    yield


app = FastAPI(
    title="Email Composer API",
    description="Tiered email generation for the admin dashboard",
    version="1.0.0",
    lifespan=lifespan,
)

# Admin dashboard is served from a separate origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "X-Admin-Token"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as e:
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {e}",
            exc_info=True,
        )
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(email_router)


@app.get("/health/live")
async def health_live():
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """Ready once the admin token is set; generation itself degrades to templates."""
    missing = Config.missing_settings()
    if missing:
        return {"status": "not_ready", "missing": missing}
    return {"status": "ready"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=Config.API_PORT,
        reload=Config.ENVIRONMENT == "development",
    )
