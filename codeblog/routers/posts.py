import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from codeblog import dependencies as deps
from codeblog.errors import PostNotFoundError
from codeblog.schemas.blog import PostRecord, PostSummary
from codeblog.services.content_index import ContentIndex

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(index: ContentIndex = Depends(deps.get_content_index)):
    """Get all posts metadata, newest first."""
    try:
        return index.list_posts()
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostRecord)
def get_post(slug: str, index: ContentIndex = Depends(deps.get_content_index)):
    """Get a single post by slug."""
    try:
        return index.get_by_slug(slug)
    except PostNotFoundError:
        logger.warning(f"Post not found: {slug}")
        raise HTTPException(status_code=404, detail="Post not found")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/slugs", response_model=List[str])
def list_slugs(index: ContentIndex = Depends(deps.get_content_index)):
    """Get every slug the static export needs a page for."""
    try:
        return index.list_slugs()
    except Exception as e:
        logger.error(f"Unexpected error listing slugs: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve slugs")
