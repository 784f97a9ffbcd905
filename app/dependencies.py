import httpx
from fastapi import Depends, Request

from app.posts_catalog import post_directory
from app.services.content_loader import ContentLoader
from app.services.markdown_renderer import MarkdownRenderer
from app.services.post_directory import PostDirectory
from app.services.text_fetcher import HttpTextFetcher
from app.settings import settings


def get_post_directory() -> PostDirectory:
    return post_directory


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_text_fetcher(client=Depends(get_http_client)):
    return HttpTextFetcher(client, settings.content_base_url)


def get_content_loader() -> ContentLoader:
    renderer = MarkdownRenderer(lang_prefix=settings.HIGHLIGHT_LANG_PREFIX)
    return ContentLoader(renderer)
