"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.db.database import engine, Base
from app.db.redis import close_redis

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables (dev only; use Alembic in production)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("BuddyBe API started (%s)", settings.APP_ENV)
    yield
    # Shutdown: close connections
    await engine.dispose()
    await close_redis()


app = FastAPI(
    title="BuddyBe API",
    description="Backend API for BuddyBe - friendship style quiz, contact reminders and friendship score",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # TODO: restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Routes ---
from app.api.routes import user, friends, quiz, reminders, score  # noqa: E402

app.include_router(user.router, prefix="/api/user", tags=["user"])
app.include_router(friends.router, prefix="/api/friends", tags=["friends"])
app.include_router(quiz.router, prefix="/api/quiz", tags=["quiz"])
app.include_router(reminders.router, prefix="/api/reminders", tags=["reminders"])
app.include_router(score.router, prefix="/api/score", tags=["score"])


@app.get("/health")
async def health_check():
    return {"status": "ok"}
