from app.dependencies import get_content_loader, get_post_directory, get_text_fetcher
from app.posts_catalog import post_directory
from app.services.content_loader import ContentLoader
from app.services.text_fetcher import HttpTextFetcher
from app.settings import settings


def test_get_post_directory_returns_shared_instance():
    assert get_post_directory() is post_directory
    assert get_post_directory() is get_post_directory()


def test_get_text_fetcher_wraps_client():
    class FakeClient:
        pass

    client = FakeClient()
    fetcher = get_text_fetcher(client=client)

    assert isinstance(fetcher, HttpTextFetcher)
    assert fetcher.client is client
    assert fetcher.base_url == settings.content_base_url


def test_get_content_loader_uses_configured_prefix():
    loader = get_content_loader()

    assert isinstance(loader, ContentLoader)
    assert loader.renderer.lang_prefix == settings.HIGHLIGHT_LANG_PREFIX
