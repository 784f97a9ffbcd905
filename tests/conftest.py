import textwrap

from app.errors import FetchError
from app.result import Err, Ok


class FakeFetcher:
    """
    In-memory stand-in for the text fetch capability.
    Paths missing from `docs` fail with `status_code`.
    """

    def __init__(self, docs: dict[str, str] | None = None, status_code: int = 404):
        self.docs = docs or {}
        self.status_code = status_code
        self.calls = []

    async def __call__(self, path: str):
        self.calls.append(path)
        if path in self.docs:
            return Ok(textwrap.dedent(self.docs[path]).lstrip())
        return Err(
            FetchError(
                path=path,
                status_code=self.status_code,
                detail=f"Unexpected status {self.status_code}",
            )
        )


class FakeHighlighter:
    """Records hook calls and returns the code upper-cased."""

    def __init__(self, language: str = "shout"):
        self.language = language
        self.calls = []

    def __call__(self, code, lang=None):
        from app.services.markdown_renderer import HighlightResult

        self.calls.append((code, lang))
        return HighlightResult(language=lang or self.language, markup=code.upper())


def exploding_highlighter(code, lang=None):
    raise RuntimeError("highlighter blew up")
