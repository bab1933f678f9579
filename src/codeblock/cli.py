"""CLI entry point for codeblock."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from codeblock.lang import DEFAULT_LANGUAGE


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="codeblock",
        description="Tokenize, theme and render shell code samples",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    sub = parser.add_subparsers(dest="command")

    # --- Register stage subcommands ---
    from codeblock.stages.tokenize.cli import register as register_tokenize
    from codeblock.stages.theme.cli import register as register_theme
    from codeblock.stages.render.cli import register as register_render

    register_tokenize(sub)
    register_theme(sub)
    register_render(sub)

    # --- Site sub-commands ---
    demo = sub.add_parser("demo", help="Render the home page code sample")
    demo.add_argument("--theme", default=None, help="Theme name")
    demo.add_argument(
        "--language",
        default=None,
        help=f"Language id (default: {DEFAULT_LANGUAGE})",
    )
    demo.add_argument(
        "--format",
        choices=["json", "html"],
        default="json",
        help="Output format (default: json)",
    )
    sub.add_parser("site", help="Show the documentation site configuration")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    if args.command is None:
        parser.print_help()
        return 1

    # --- Dispatch ---
    if args.command == "demo":
        from codeblock.site import HOME_DEMO_LANGUAGE, render_demo
        from codeblock.stages.render import to_html
        from codeblock.stages.theme import DEFAULT_THEME

        block = render_demo(
            language=args.language or HOME_DEMO_LANGUAGE,
            theme=args.theme or DEFAULT_THEME,
        )
        result = to_html(block) if args.format == "html" else block.to_dict()
        return _emit(result)

    if args.command == "site":
        from codeblock.site import MIGRAINE_SITE

        return _emit(MIGRAINE_SITE.to_dict())

    # Stage subcommands with two-level dispatch
    stage_dispatch = {
        "tokenize": "codeblock.stages.tokenize.cli",
        "theme": "codeblock.stages.theme.cli",
        "render": "codeblock.stages.render.cli",
    }

    if args.command in stage_dispatch:
        # Check if action was provided
        if not getattr(args, "action", None):
            # Re-parse to show stage-specific help
            parser.parse_args([args.command, "--help"])
            return 1

        import importlib
        cli_mod = importlib.import_module(stage_dispatch[args.command])
        return _emit(cli_mod.run(args))

    return 1


def _emit(result) -> int:
    """Write a result to stdout: markup as-is, everything else as JSON."""
    if isinstance(result, str):
        sys.stdout.write(result)
        print()
        return 0
    json.dump(result, sys.stdout, indent=2, ensure_ascii=False)
    print()
    return 1 if "error" in result else 0


if __name__ == "__main__":
    raise SystemExit(main())
