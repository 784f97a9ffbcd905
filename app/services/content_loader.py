import logging
import urllib.parse

from app.errors import LoadError, LoadErrorKind
from app.result import Err, Ok, Result
from app.schemas.blog import RenderedPost
from app.services.markdown_renderer import MarkdownRenderer
from app.services.text_fetcher import FetchText

logger = logging.getLogger(__name__)


def resolve_markdown_path(slug: str) -> str:
    return f"/{urllib.parse.quote(slug, safe='')}.md"


class ContentLoader:
    def __init__(self, renderer: MarkdownRenderer):
        self.renderer = renderer

    async def render(
        self, slug: str, fetch_text: FetchText
    ) -> Result[RenderedPost, LoadError]:
        """Fetch the markdown source for `slug` and render it to HTML."""
        path = resolve_markdown_path(slug)

        fetched = await fetch_text(path)
        if isinstance(fetched, Err):
            error = fetched.error
            logger.warning(
                f"Failed to fetch {path} for post {slug} "
                f"(status={error.status_code}): {error.detail}"
            )
            return Err(
                LoadError(
                    kind=LoadErrorKind.NOT_FOUND,
                    slug=slug,
                    detail=error.detail or "Post not found",
                    status_code=error.status_code,
                )
            )

        try:
            html = self.renderer.render(fetched.value)
        except Exception as e:
            logger.exception(f"Failed to render post {slug}")
            return Err(
                LoadError(kind=LoadErrorKind.RENDER_FAILED, slug=slug, detail=str(e))
            )

        logger.debug(f"Rendered post {slug} ({len(html)} chars)")
        return Ok(RenderedPost(slug=slug, html=html))
