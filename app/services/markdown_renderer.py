import html
import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

import markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

DEFAULT_LANG_PREFIX = "hlhjs language-"
PLAINTEXT = "plaintext"


@dataclass(frozen=True)
class HighlightResult:
    language: str
    markup: str


HighlightHook = Callable[[str, Optional[str]], HighlightResult]


def highlight_code(code: str, lang: Optional[str] = None) -> HighlightResult:
    """
    Highlight a code block with Pygments.
    Unknown or missing language tags fall back to plain text.
    """
    language = PLAINTEXT
    # stripnl=False keeps leading and trailing blank lines as written
    lexer = TextLexer(stripnl=False)
    if lang:
        try:
            lexer = get_lexer_by_name(lang, stripnl=False)
            language = lang
        except ClassNotFound:
            logger.debug(f"No lexer for language '{lang}', using {PLAINTEXT}")

    markup = highlight(code, lexer, HtmlFormatter(nowrap=True))
    return HighlightResult(language=language, markup=markup)


class CodeHighlightPreprocessor(Preprocessor):
    FENCED_BLOCK_RE = re.compile(
        r"""
        (?P<indent>^[ ]*)                   # list item indentation
        (?P<fence>~{3,}|`{3,})[ ]*          # opening fence
        \.?(?P<lang>[\w#.+-]*)[^`\n]*\n     # first word of the info string
        (?P<code>.*?)(?<=\n)                # the code block
        [ ]*(?P=fence)[ ]*$                 # closing fence
        """,
        re.MULTILINE | re.DOTALL | re.VERBOSE,
    )

    def __init__(self, md, highlight_hook: HighlightHook, lang_prefix: str):
        super().__init__(md)
        self.highlight_hook = highlight_hook
        self.lang_prefix = lang_prefix

    def run(self, lines):
        text = "\n".join(lines)
        while True:
            m = self.FENCED_BLOCK_RE.search(text)
            if not m:
                break
            indent = m.group("indent")
            code = m.group("code")
            if indent:
                code = re.sub(rf"(?m)^[ ]{{0,{len(indent)}}}", "", code)
            result = self.highlight_hook(code, m.group("lang") or None)
            css_class = html.escape(f"{self.lang_prefix}{result.language}")
            block = f'<pre><code class="{css_class}">{result.markup}</code></pre>'
            placeholder = self.md.htmlStash.store(block)
            text = f"{text[:m.start()]}\n{indent}{placeholder}\n{text[m.end():]}"
        return text.split("\n")


class CodeHighlightExtension(Extension):
    """Fenced code blocks rendered through a highlighting hook."""

    def __init__(self, **kwargs):
        self.config = {
            "highlight": [highlight_code, "Callable(code, lang) -> HighlightResult"],
            "lang_prefix": [DEFAULT_LANG_PREFIX, "Prefix for the code element class"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        md.registerExtension(self)
        md.preprocessors.register(
            CodeHighlightPreprocessor(
                md, self.getConfig("highlight"), self.getConfig("lang_prefix")
            ),
            "code_highlight",
            25,
        )


class MarkdownRenderer:
    def __init__(
        self,
        highlight: HighlightHook = highlight_code,
        lang_prefix: str = DEFAULT_LANG_PREFIX,
    ):
        self.highlight = highlight
        self.lang_prefix = lang_prefix

    def render(self, text: str) -> str:
        # A fresh instance per call keeps renders independent of each other
        md = markdown.Markdown(
            extensions=[
                CodeHighlightExtension(
                    highlight=self.highlight, lang_prefix=self.lang_prefix
                ),
                "tables",
                "pymdownx.tilde",
                "pymdownx.magiclink",
                "mdx_truly_sane_lists",
            ],
            extension_configs={
                # ~~strike~~ only, like GFM
                "pymdownx.tilde": {"subscript": False},
                "mdx_truly_sane_lists": {"nested_indent": 2},
            },
            output_format="html",
        )
        return md.convert(text)
