"""Pygments grammars for shell transcripts.

``ShellTranscriptLexer`` tracks command position so the first word of a
simple command (``brew`` in ``brew install migraine``) gets a different
token type from the words that follow it.  ``ShellConsoleLexer`` handles
prompt/output transcripts by lexing each prompt line on its own.
"""

from __future__ import annotations

import re

from pygments.lexer import Lexer, RegexLexer, bygroups, default, include, words
from pygments.token import (
    Comment,
    Generic,
    Keyword,
    Name,
    Operator,
    String,
    Whitespace,
)

__all__ = ["ShellTranscriptLexer", "ShellConsoleLexer"]

RESERVED_WORDS = (
    "if", "then", "else", "elif", "fi", "case", "esac", "for", "select",
    "while", "until", "do", "done", "in", "function", "time", "coproc",
)

# A bare word may not start with '#' (comment) or '=' but may contain them.
_WORD = r"[^\s;|&<>()'\"`$\\#=][^\s;|&<>()'\"`$\\]*"
_VARIABLE = r"\$(?:[A-Za-z_]\w*|[0-9@*#?$!-])"


class ShellTranscriptLexer(RegexLexer):
    """Lexer for bash-style command lines."""

    name = "Shell Transcript"
    aliases = ["bash", "sh", "shell", "zsh"]
    filenames = ["*.sh", "*.bash", "*.zsh"]

    tokens = {
        "basic": [
            (r"[ \t]+", Whitespace),
            (r"\\\n", String.Escape),
            (r"#.*$", Comment.Single),
        ],
        "quoting": [
            (r"\\.", String.Escape),
            (r"\$'(?:\\.|[^'\\])*'", String.Single),
            (r"'[^']*'", String.Single),
            (r'"', String.Double, "double-quoted"),
            (r"\$\(", Name.Variable, "subshell"),
            (r"`[^`]*`", Name.Variable),
            (r"\$\{[^}\n]*\}", Name.Variable),
            (_VARIABLE, Name.Variable),
            (r"\$", Name),
        ],
        "redirect": [
            # An unterminated here-document runs to the end of the input.
            (
                r"<<-?[ \t]*(['\"]?)\\?(\w+)\1[^\n]*"
                r"(?:\n(?![ \t]*\2$)[^\n]*)*(?:\n[ \t]*\2$)?",
                String.Heredoc,
            ),
            (r"\d*(?:<<<|<>|>>|>&|<&|>\||[<>])(?:\d+|-)?", Operator),
        ],
        "root": [
            include("basic"),
            (r"\n", Whitespace),
            (words(RESERVED_WORDS, suffix=r"(?=[\s;&|()]|$)"), Keyword),
            (r"([A-Za-z_]\w*)(\+?=)", bygroups(Name.Variable, Operator), "value"),
            (r"&&|\|\||;;?|\|&?|&|[()!{}]", Operator),
            (_WORD, Name.Function, "args"),
            default("args"),
        ],
        "args": [
            (r"\n", Whitespace, "#pop"),
            include("basic"),
            (r"&&|\|\||;;?|\|&?|&", Operator, "#pop"),
            (r"(?=\))", Whitespace, "#pop"),
            include("redirect"),
            (r"-{1,2}[^\s;|&<>()'\"`$\\=]*", Name.Attribute),
            (r"([A-Za-z_]\w*)(=)", bygroups(Name.Variable, Operator)),
            include("quoting"),
            (r"[(=]", Operator),
            (_WORD, Name),
        ],
        "value": [
            include("quoting"),
            (_WORD, Name),
            default("#pop"),
        ],
        "double-quoted": [
            (r'"', String.Double, "#pop"),
            (r'\\[\\"$`\n]', String.Escape),
            (r"\$\{[^}\n]*\}", Name.Variable),
            (_VARIABLE, Name.Variable),
            (r"\$\(", Name.Variable, "subshell"),
            (r'[^"\\$]+', String.Double),
            (r"[\\$]", String.Double),
        ],
        "subshell": [
            (r"\)", Name.Variable, "#pop"),
            include("root"),
        ],
    }


class ShellConsoleLexer(Lexer):
    """Lexer for interactive transcripts: prompt lines and their output."""

    name = "Shell Console"
    aliases = ["console", "shell-session", "shellsession"]
    filenames = ["*.console"]

    _prompt_re = re.compile(r"[$%>] ")

    def get_tokens_unprocessed(self, text):
        shell = ShellTranscriptLexer(**self.options)
        pos = 0
        lines = text.split("\n")
        for index, line in enumerate(lines):
            match = self._prompt_re.match(line)
            if match:
                yield pos, Generic.Prompt, match.group()
                offset = pos + match.end()
                for start, ttype, value in shell.get_tokens_unprocessed(line[match.end():]):
                    yield offset + start, ttype, value
            elif line.strip():
                yield pos, Generic.Output, line
            elif line:
                yield pos, Whitespace, line
            pos += len(line)
            if index < len(lines) - 1:
                yield pos, Whitespace, "\n"
                pos += 1
