"""CLI subcommand registration for the render stage."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from codeblock.errors import HighlightError
from codeblock.lang import DEFAULT_LANGUAGE, guess_language
from codeblock.stages.theme import DEFAULT_THEME


def _add_common(parser: argparse.ArgumentParser, language_default: str | None) -> None:
    if language_default:
        language_help = f"Language id (default: {language_default})"
    else:
        language_help = "Language id (guessed from the file suffix if omitted)"
    parser.add_argument("--language", default=language_default, help=language_help)
    parser.add_argument(
        "--theme",
        default=DEFAULT_THEME,
        help=f"Theme name (default: {DEFAULT_THEME})",
    )
    parser.add_argument(
        "--line-numbers", action="store_true", help="Number the rendered lines"
    )
    parser.add_argument(
        "--format",
        choices=["json", "html"],
        default="json",
        help="Output format (default: json)",
    )


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``render`` subcommand and its sub-actions."""
    rd = subparsers.add_parser("render", help="Render a themed code block")
    rd_sub = rd.add_subparsers(dest="action")

    # --- render text ---
    rt = rd_sub.add_parser("text", help="Render text given on the command line")
    rt.add_argument("text", help="Source text")
    _add_common(rt, DEFAULT_LANGUAGE)

    # --- render file ---
    rf = rd_sub.add_parser("file", help="Render the contents of a file")
    rf.add_argument("path", help="Path to the source file")
    _add_common(rf, None)


def run(args: argparse.Namespace) -> dict[str, Any] | str:
    """Dispatch to the appropriate render action."""
    from codeblock.stages.render import render, to_html

    if args.action not in ("text", "file"):
        return {"error": f"Unknown render action: {args.action}"}

    if args.action == "file":
        source = Path(args.path).read_text(encoding="utf-8")
        language = args.language or guess_language(args.path)
    else:
        source = args.text
        language = args.language

    try:
        block = render(
            source,
            language,
            args.theme,
            line_numbers=args.line_numbers,
        )
    except HighlightError as e:
        return {"error": str(e)}

    if args.format == "html":
        return to_html(block)
    return block.to_dict()
