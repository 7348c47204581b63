"""
Civic Heroes - report civic issues, upvote them, rank the community's heroes
Main FastAPI application
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.errors import DataUnavailable
from app.database import engine, Base
from app import models  # noqa: F401  (registers tables on Base.metadata)
from app.routers import leaderboards, reports, users

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(name)s %(levelname)s: %(message)s",
)
logger = logging.getLogger("civic-heroes")

# Create database tables on startup
@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield

app = FastAPI(
    title="Civic Heroes",
    description="Report civic issues, upvote them, and rank the community's heroes",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(DataUnavailable)
async def data_unavailable_handler(request: Request, exc: DataUnavailable):
    logger.error(f"Data unavailable for {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc)})

# Leaderboard stays at root level: GET /leaderboard
app.include_router(leaderboards.router, tags=["leaderboard"])
app.include_router(reports.router, prefix="/api/v1/reports", tags=["reports"])
app.include_router(users.router, prefix="/api/v1/users", tags=["users"])

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
