"""Compose tokenized lines and a resolved theme into a RenderedBlock."""

from __future__ import annotations

import functools
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from codeblock.lang import DEFAULT_LANGUAGE, normalize_language
from codeblock.model import SourceDocument, TokenClass
from codeblock.stages.theme import DEFAULT_THEME, TokenStyle, get_theme
from codeblock.stages.tokenize import tokenize_document
from codeblock.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RenderedToken:
    """A token's text with the style its class resolved to."""

    text: str
    token_class: TokenClass
    style: TokenStyle


@dataclass(frozen=True)
class RenderedLine:
    tokens: tuple[RenderedToken, ...]
    number: int | None = None

    @property
    def text(self) -> str:
        return "".join(t.text for t in self.tokens)


@dataclass(frozen=True)
class RenderedBlock:
    """Self-contained, display-independent result of rendering.

    ``palette`` lists the style of every class used in the block, in order
    of first use.
    """

    language: str
    theme: str
    background: str
    foreground: str
    palette: tuple[tuple[TokenClass, TokenStyle], ...]
    lines: tuple[RenderedLine, ...]

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "language": self.language,
            "theme": self.theme,
            "background": self.background,
            "foreground": self.foreground,
            "palette": {c.value: s.to_dict() for c, s in self.palette},
            "lines": [
                {
                    "number": line.number,
                    "tokens": [
                        {"text": t.text, "class": t.token_class.value}
                        for t in line.tokens
                    ],
                }
                for line in self.lines
            ],
        }


def render(
    source: str | Iterable[str] | SourceDocument,
    language: str = DEFAULT_LANGUAGE,
    theme: str = DEFAULT_THEME,
    *,
    line_numbers: bool = False,
    first_line: int = 1,
) -> RenderedBlock:
    """Tokenize ``source`` and bind every token to ``theme``'s styles.

    Raises UnsupportedLanguage or UnknownTheme before anything is built.
    """
    resolved = get_theme(theme)
    language = normalize_language(language)
    document = SourceDocument.coerce(source)
    styled_lines = tokenize_document(document, language)

    styles: dict[TokenClass, TokenStyle] = {}
    lines: list[RenderedLine] = []
    for index, line in enumerate(styled_lines):
        tokens = []
        for token in line.tokens:
            style = styles.get(token.token_class)
            if style is None:
                style = styles[token.token_class] = resolved.style_for(token.token_class)
            tokens.append(RenderedToken(token.text, token.token_class, style))
        number = first_line + index if line_numbers else None
        lines.append(RenderedLine(tuple(tokens), number))

    logger.debug(
        "rendered %d lines (%s, %s) with %d token classes",
        len(lines), language, resolved.name, len(styles),
    )
    return RenderedBlock(
        language=language,
        theme=resolved.name,
        background=resolved.background,
        foreground=resolved.foreground,
        palette=tuple(styles.items()),
        lines=tuple(lines),
    )


@functools.lru_cache(maxsize=128)
def render_cached(
    text: str, language: str = DEFAULT_LANGUAGE, theme: str = DEFAULT_THEME
) -> RenderedBlock:
    """Memoized ``render`` for raw text; blocks are immutable so sharing is safe."""
    return render(text, language, theme)
