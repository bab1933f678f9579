"""Language registry and Pygments lexer mapping shared across stages."""

from __future__ import annotations

from pathlib import Path

from pygments.lexer import Lexer
from pygments.lexers.special import TextLexer

from codeblock.errors import UnsupportedLanguage
from codeblock.lexers import ShellConsoleLexer, ShellTranscriptLexer

DEFAULT_LANGUAGE = "bash"
FALLBACK_LANGUAGE = "text"

LEXER_MAP: dict[str, type[Lexer]] = {
    "bash": ShellTranscriptLexer,
    "console": ShellConsoleLexer,
    "text": TextLexer,
}

ALIASES = {
    "sh": "bash",
    "shell": "bash",
    "zsh": "bash",
    "shell-session": "console",
    "shellsession": "console",
    "plaintext": "text",
    "plain": "text",
    "txt": "text",
}

EXT_MAP = {
    ".sh": "bash",
    ".bash": "bash",
    ".zsh": "bash",
    ".console": "console",
    ".txt": "text",
}


def supported_languages() -> list[str]:
    """Canonical language ids, sorted."""
    return sorted(LEXER_MAP)


def normalize_language(language: str) -> str:
    """Resolve aliases and case; raise UnsupportedLanguage if unknown."""
    key = language.strip().lower()
    key = ALIASES.get(key, key)
    if key not in LEXER_MAP:
        raise UnsupportedLanguage(language, supported_languages())
    return key


def get_lexer(language: str) -> Lexer:
    """Return a fresh lexer instance for ``language``."""
    return LEXER_MAP[normalize_language(language)]()


def guess_language(filename: str, default: str = DEFAULT_LANGUAGE) -> str:
    """Guess a language id from a file suffix."""
    return EXT_MAP.get(Path(filename).suffix.lower(), default)
