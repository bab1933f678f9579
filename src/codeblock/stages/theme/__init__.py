"""Theme stage – map token classes to concrete styles.

Public API
----------
- get_theme(name) -> Theme
- resolve_style(name, token_class) -> TokenStyle
- list_themes() -> list[str]
- register_theme(theme) -> Theme
- theme_from_pygments(name, style_name=None) -> Theme
"""

from __future__ import annotations

from codeblock.model import TokenClass
from codeblock.stages.theme.registry import (  # noqa: F401
    STYLE_TOKENS,
    Theme,
    ThemeRegistry,
    TokenStyle,
    theme_from_pygments,
)

DEFAULT_THEME = "github-dark"

BUILTIN_THEMES = (
    "github-dark",
    "monokai",
    "one-dark",
    "nord",
    "gruvbox-dark",
    "solarized-light",
)

_registry = ThemeRegistry()
for _name in BUILTIN_THEMES:
    _registry.register(theme_from_pygments(_name))


def get_theme(name: str) -> Theme:
    """Return a registered theme, or raise UnknownTheme."""
    return _registry.get(name)


def resolve_style(name: str, token_class: TokenClass | str) -> TokenStyle:
    """Return the style theme ``name`` binds to ``token_class``."""
    if not isinstance(token_class, TokenClass):
        token_class = TokenClass.parse(token_class)
    return _registry.get(name).style_for(token_class)


def list_themes() -> list[str]:
    return _registry.names()


def register_theme(theme: Theme) -> Theme:
    """Add a theme to the default registry after checking it is complete."""
    return _registry.register(theme)
