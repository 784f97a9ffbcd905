import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.errors import LoadErrorKind
from app.result import Err
from app.schemas.blog import PostMetadata, PostPage
from app.services.content_loader import ContentLoader
from app.services.post_directory import PostDirectory

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostMetadata])
def list_posts(directory: PostDirectory = Depends(deps.get_post_directory)):
    """Get all posts metadata, in authoring order."""
    try:
        return list(directory.get_snapshot())
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostMetadata)
def get_post_metadata(
    slug: str, directory: PostDirectory = Depends(deps.get_post_directory)
):
    """Get a single post's metadata by slug."""
    try:
        post = directory.get(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/blog/{slug}", response_model=PostPage)
async def get_post(
    slug: str,
    loader: ContentLoader = Depends(deps.get_content_loader),
    fetch_text=Depends(deps.get_text_fetcher),
):
    """Render a single post by slug."""
    try:
        result = await loader.render(slug, fetch_text)
    except Exception as e:
        logger.error(f"Unexpected error loading post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to load post")

    if isinstance(result, Err):
        if result.error.kind is LoadErrorKind.NOT_FOUND:
            raise HTTPException(status_code=404, detail="Post not found")
        raise HTTPException(status_code=500, detail="Failed to render post")

    return PostPage.from_rendered(result.value)
