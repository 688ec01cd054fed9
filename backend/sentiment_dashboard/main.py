import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from sqlalchemy import text
from sqlalchemy.orm import Session

from sentiment_dashboard.config import LOG_LEVEL, SEED_ON_STARTUP
from sentiment_dashboard.database import Base, engine, get_db
from sentiment_dashboard import models  # noqa: F401  registers tables on Base
from sentiment_dashboard.routes_dashboard import router as dashboard_router
from sentiment_dashboard.routes_impact import router as impact_router
from sentiment_dashboard.routes_prioritization import router as prioritization_router
from sentiment_dashboard.seed import is_empty, seed_database

# Logging setup (structured-ish JSON)
logging.basicConfig(
    level=LOG_LEVEL,
    format='{"time":"%(asctime)s","level":"%(levelname)s","message":"%(message)s","module":"%(name)s"}',
)
logger = logging.getLogger(__name__)

_MAX_LOG_LINE = 80


def create_db_and_tables():
    try:
        logger.info("Connecting to database to create tables...")
        Base.metadata.create_all(bind=engine)
        logger.info("Tables created successfully.")
    except Exception as e:
        logger.error(f"Error creating tables: {e}")
        raise

    if SEED_ON_STARTUP and is_empty(engine):
        seed_database(engine)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    create_db_and_tables()
    yield


app = FastAPI(title="Customer Sentiment Dashboard API", lifespan=lifespan)


@app.middleware("http")
async def log_api_requests(request: Request, call_next):
    t0 = time.time()
    response = await call_next(request)
    path = request.url.path
    if path.startswith("/api"):
        line = f"{request.method} {path} {response.status_code} in {int((time.time() - t0) * 1000)}ms"
        if len(line) > _MAX_LOG_LINE:
            line = line[: _MAX_LOG_LINE - 1] + "…"
        logger.info(line)
    return response


app.include_router(dashboard_router, prefix="/api")
app.include_router(prioritization_router, prefix="/api")
app.include_router(impact_router, prefix="/api")


@app.get("/")
def read_root():
    return {"message": "Customer Sentiment Dashboard API is running."}


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        return {"status": "ok", "database_connection": "successful"}
    except Exception as e:
        return {"status": "error", "database_connection": "failed", "error": str(e)}
