# reflect_server/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from reflect_server.config.settings import settings
from reflect_server.db.database import engine, Base
from reflect_server.routers import health, stats, journals, chat_message, profile, moods

# create_all must see every model
import reflect_server.models  # noqa: F401

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine) # creates missing tables only, never alters existing ones


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    - on startup, check that the database answers
    - no background jobs
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("database connection OK")
    except Exception as e:
        # the API still starts; requests will surface the storage error
        logger.error(f"database connection check failed: {e}")

    if not settings.auth_jwks_url:
        logger.warning("AUTH_JWKS_URL is not set; every authenticated request will be rejected")

    yield
    logger.info("shutting down")


app = FastAPI(title="Reflect & Connect API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(stats.router)
app.include_router(journals.router)
app.include_router(chat_message.router)
app.include_router(profile.router)
app.include_router(moods.router)


@app.get("/")
async def root():
    return {
        "message": "Reflect & Connect API is running",
        "version": "1.0.0"
    }
