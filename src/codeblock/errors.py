"""Shared exception classes for the codeblock pipeline."""

from __future__ import annotations


class HighlightError(Exception):
    """Base class for all highlighting failures."""


class UnsupportedLanguage(HighlightError):
    """Raised when a language identifier has no registered grammar."""

    def __init__(self, language: str, supported: list[str] | None = None) -> None:
        self.language = language
        self.supported = sorted(supported or [])
        message = f"Unsupported language: {language!r}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)


class UnknownTheme(HighlightError):
    """Raised when a theme identifier has no registered style mapping."""

    def __init__(self, theme: str, available: list[str] | None = None) -> None:
        self.theme = theme
        self.available = sorted(available or [])
        message = f"Unknown theme: {theme!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class MissingStyleForClass(HighlightError):
    """Raised at theme registration when a token class has no style."""

    def __init__(self, theme: str, token_class: str) -> None:
        self.theme = theme
        self.token_class = token_class
        super().__init__(
            f"Theme {theme!r} defines no style for token class {token_class!r}"
        )
