"""CLI subcommand registration for the tokenize stage."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from codeblock.errors import HighlightError
from codeblock.lang import ALIASES, DEFAULT_LANGUAGE, guess_language


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``tokenize`` subcommand and its sub-actions."""
    tk = subparsers.add_parser("tokenize", help="Split source into classified tokens")
    tk_sub = tk.add_subparsers(dest="action")

    # --- tokenize text ---
    tt = tk_sub.add_parser("text", help="Tokenize text given on the command line")
    tt.add_argument("text", help="Source text (use $'...' for multiple lines)")
    tt.add_argument(
        "--language",
        default=DEFAULT_LANGUAGE,
        help=f"Language id (default: {DEFAULT_LANGUAGE})",
    )

    # --- tokenize file ---
    tf = tk_sub.add_parser("file", help="Tokenize the contents of a file")
    tf.add_argument("path", help="Path to the source file")
    tf.add_argument(
        "--language",
        default=None,
        help="Language id (guessed from the file suffix if omitted)",
    )

    # --- tokenize languages ---
    tk_sub.add_parser("languages", help="List supported languages")


def _lines_to_dict(lines) -> list[dict[str, Any]]:
    return [
        {
            "text": line.text,
            "tokens": [
                {"text": t.text, "class": t.token_class.value} for t in line.tokens
            ],
        }
        for line in lines
    ]


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate tokenize action."""
    from codeblock.stages.tokenize import supported_languages, tokenize

    if args.action == "languages":
        return {"languages": supported_languages(), "aliases": dict(ALIASES)}

    if args.action in ("text", "file"):
        if args.action == "file":
            source = Path(args.path).read_text(encoding="utf-8")
            language = args.language or guess_language(args.path)
        else:
            source = args.text
            language = args.language
        try:
            lines = tokenize(source, language)
        except HighlightError as e:
            return {"error": str(e)}
        return {
            "language": language,
            "line_count": len(lines),
            "lines": _lines_to_dict(lines),
        }

    return {"error": f"Unknown tokenize action: {args.action}"}
