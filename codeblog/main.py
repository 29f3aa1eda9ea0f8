import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from codeblog.routers import posts
from codeblog.services.content_index import ContentIndex
from codeblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    index = ContentIndex.from_settings(settings)
    index.load_all()
    app.state.content_index = index
    logger.info(f"Content index loaded from {settings.content_path}")

    try:
        yield
    finally:
        app.state.content_index = None
        logger.info("Content index released")


app = FastAPI(
    title="codeblog preview",
    description="Serves the blog's post index as JSON",
    lifespan=lifespan,
)

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "codeblog preview is running"}
