import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dlr.config import settings
from dlr.database import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Dynamic line rating service started (limit %.0f C)", settings.conductor_max_temp_c)
    yield


app = FastAPI(
    title="DLR",
    description="Dynamic line rating: conductor temperature and ampacity from ambient conditions",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from dlr.routers import conductor, rating  # noqa: E402

app.include_router(rating.router, prefix="/api/v1")
app.include_router(conductor.router, prefix="/api/v1")


@app.get("/health")
async def health():
    return {"status": "ok"}
