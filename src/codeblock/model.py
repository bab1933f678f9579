"""Source documents, tokens and lines produced by the tokenizer."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class TokenClass(str, Enum):
    """Semantic class of a token; themes style each one."""

    TEXT = "text"
    COMMENT = "comment"
    KEYWORD = "keyword"
    COMMAND = "command"
    ARGUMENT = "argument"
    OPTION = "option"
    STRING = "string"
    VARIABLE = "variable"
    OPERATOR = "operator"
    PROMPT = "prompt"
    OUTPUT = "output"

    @classmethod
    def parse(cls, value: str) -> TokenClass:
        """Look up a class by its string value, e.g. ``"comment"``."""
        try:
            return cls(value.lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown token class {value!r} (valid: {valid})") from None


@dataclass(frozen=True)
class SourceDocument:
    """An immutable sequence of text lines."""

    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> SourceDocument:
        # splitlines: "" -> no lines, and a final newline adds no empty line
        return cls(tuple(text.splitlines()))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> SourceDocument:
        collected = tuple(lines)
        for line in collected:
            if "\n" in line or "\r" in line:
                raise ValueError(f"Line contains a line break: {line!r}")
        return cls(collected)

    @classmethod
    def coerce(cls, source: str | Iterable[str] | SourceDocument) -> SourceDocument:
        """Accept raw text, an iterable of lines, or a document."""
        if isinstance(source, SourceDocument):
            return source
        if isinstance(source, str):
            return cls.from_text(source)
        return cls.from_lines(source)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class Token:
    """A classified span of one line."""

    text: str
    token_class: TokenClass


@dataclass(frozen=True)
class StyledLine:
    """The tokens of one source line, in order."""

    tokens: tuple[Token, ...]
    number: int | None = None

    @property
    def text(self) -> str:
        return "".join(t.text for t in self.tokens)
