"""codeblock – syntax highlighting and code presentation for shell samples.

Public API
----------
- render(source, language="bash", theme="github-dark", *, line_numbers=False,
         first_line=1) -> RenderedBlock
- render_cached(text, language="bash", theme="github-dark") -> RenderedBlock
- to_html(block) -> str
- tokenize(source, language) -> list[StyledLine]
- get_theme(name) / resolve_style(name, token_class) / list_themes()
- register_theme(theme) / theme_from_pygments(name, style_name=None)
- supported_languages() -> list[str]
"""

from codeblock.errors import (  # noqa: F401
    HighlightError,
    MissingStyleForClass,
    UnknownTheme,
    UnsupportedLanguage,
)
from codeblock.lang import supported_languages  # noqa: F401
from codeblock.model import SourceDocument, StyledLine, Token, TokenClass  # noqa: F401
from codeblock.stages.render import (  # noqa: F401
    RenderedBlock,
    RenderedLine,
    RenderedToken,
    render,
    render_cached,
    to_html,
)
from codeblock.stages.theme import (  # noqa: F401
    DEFAULT_THEME,
    Theme,
    TokenStyle,
    get_theme,
    list_themes,
    register_theme,
    resolve_style,
    theme_from_pygments,
)
from codeblock.stages.tokenize import tokenize  # noqa: F401

__version__ = "0.1.0"
