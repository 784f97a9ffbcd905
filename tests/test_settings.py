from pathlib import Path

from app.settings import Settings, choose_env_file


def test_content_base_url_strips_trailing_slash():
    s = Settings(CONTENT_BASE_URL="https://blog.example.com/")
    assert s.content_base_url == "https://blog.example.com"


def test_defaults_match_highlight_class_prefix():
    s = Settings()
    assert s.HIGHLIGHT_LANG_PREFIX == "hlhjs language-"
    assert s.FETCH_TIMEOUT_SECONDS > 0


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
