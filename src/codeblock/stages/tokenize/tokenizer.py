"""Split a source document into classified tokens, line by line."""

from __future__ import annotations

from collections.abc import Iterable

from pygments.token import (
    Comment,
    Generic,
    Keyword,
    Name,
    Operator,
    Punctuation,
    String,
    _TokenType,
)

from codeblock.lang import DEFAULT_LANGUAGE, get_lexer, normalize_language
from codeblock.model import SourceDocument, StyledLine, Token, TokenClass
from codeblock.utils.logger import get_logger

logger = get_logger(__name__)

# Checked in order; the first ancestor match wins.
CLASS_TABLE: tuple[tuple[_TokenType, TokenClass], ...] = (
    (Comment, TokenClass.COMMENT),
    (Generic.Prompt, TokenClass.PROMPT),
    (Generic.Output, TokenClass.OUTPUT),
    (Keyword, TokenClass.KEYWORD),
    (Name.Function, TokenClass.COMMAND),
    (Name.Attribute, TokenClass.OPTION),
    (Name.Variable, TokenClass.VARIABLE),
    (String, TokenClass.STRING),
    (Operator, TokenClass.OPERATOR),
    (Punctuation, TokenClass.OPERATOR),
    (Name, TokenClass.ARGUMENT),
)


def classify(ttype: _TokenType) -> TokenClass:
    """Map a Pygments token type to a TokenClass; unknown types are TEXT."""
    for parent, token_class in CLASS_TABLE:
        if ttype in parent:
            return token_class
    return TokenClass.TEXT


def _append(row: list[Token], text: str, token_class: TokenClass) -> None:
    if row and row[-1].token_class is token_class:
        row[-1] = Token(row[-1].text + text, token_class)
    else:
        row.append(Token(text, token_class))


def tokenize_document(document: SourceDocument, language: str) -> list[StyledLine]:
    """Tokenize every line of ``document`` with a fresh lexer."""
    lexer = get_lexer(language)
    if not document.lines:
        return []

    text = document.text + "\n"
    rows: list[list[Token]] = [[]]
    for _, ttype, value in lexer.get_tokens_unprocessed(text):
        token_class = classify(ttype)
        for index, fragment in enumerate(value.split("\n")):
            if index:
                rows.append([])
            if fragment:
                _append(rows[-1], fragment, token_class)

    # The final newline opens a row that has no source line.
    rows.pop()
    logger.debug(
        "tokenized %d lines as %s", len(rows), normalize_language(language)
    )
    return [StyledLine(tuple(row)) for row in rows]


def tokenize(
    source: str | Iterable[str] | SourceDocument,
    language: str = DEFAULT_LANGUAGE,
) -> list[StyledLine]:
    """Tokenize raw text, a sequence of lines, or a SourceDocument."""
    return tokenize_document(SourceDocument.coerce(source), language)
