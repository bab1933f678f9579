"""CLI subcommand registration for the theme stage."""

from __future__ import annotations

import argparse
from typing import Any

from codeblock.errors import HighlightError
from codeblock.model import TokenClass


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``theme`` subcommand and its sub-actions."""
    th = subparsers.add_parser("theme", help="Inspect registered themes")
    th_sub = th.add_subparsers(dest="action")

    # --- theme list ---
    th_sub.add_parser("list", help="List registered themes")

    # --- theme show ---
    ts = th_sub.add_parser("show", help="Show every style of a theme")
    ts.add_argument("name", help="Theme name")

    # --- theme style ---
    tc = th_sub.add_parser("style", help="Resolve the style of one token class")
    tc.add_argument("name", help="Theme name")
    tc.add_argument(
        "token_class",
        choices=[c.value for c in TokenClass],
        help="Token class",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate theme action."""
    from codeblock.stages.theme import (
        DEFAULT_THEME,
        get_theme,
        list_themes,
        resolve_style,
    )

    if args.action == "list":
        return {"themes": list_themes(), "default": DEFAULT_THEME}

    try:
        if args.action == "show":
            return get_theme(args.name).to_dict()

        if args.action == "style":
            style = resolve_style(args.name, args.token_class)
            return {
                "theme": args.name,
                "class": args.token_class,
                "style": style.to_dict(),
            }
    except HighlightError as e:
        return {"error": str(e)}

    return {"error": f"Unknown theme action: {args.action}"}
