import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.routers import posts
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.FETCH_TIMEOUT_SECONDS))


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http_client = create_http_client()
    logger.info(f"Serving markdown sources from {settings.content_base_url}")

    try:
        yield
    finally:
        await app.state.http_client.aclose()
        logger.info("HTTP client closed")


app = FastAPI(
    title="Blog API",
    description="Markdown blog posts rendered to highlighted HTML",
    lifespan=lifespan,
)

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "Blog API is running"}
