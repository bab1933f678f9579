"""Theme definitions and the registry that validates them.

A theme binds every ``TokenClass`` to a concrete ``TokenStyle``.  Themes are
checked for totality when they are registered, so lookups at render time
never fall through to an undefined style.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pygments.styles import get_style_by_name
from pygments.token import Comment, Generic, Keyword, Name, Operator, String, Token
from pygments.util import ClassNotFound

from codeblock.errors import MissingStyleForClass, UnknownTheme
from codeblock.model import TokenClass
from codeblock.utils.logger import get_logger

logger = get_logger(__name__)

# Pygments token type whose style colours each class.
STYLE_TOKENS = {
    TokenClass.TEXT: Token.Text,
    TokenClass.COMMENT: Comment.Single,
    TokenClass.KEYWORD: Keyword,
    TokenClass.COMMAND: Name.Function,
    TokenClass.ARGUMENT: Name,
    TokenClass.OPTION: Name.Attribute,
    TokenClass.STRING: String,
    TokenClass.VARIABLE: Name.Variable,
    TokenClass.OPERATOR: Operator,
    TokenClass.PROMPT: Generic.Prompt,
    TokenClass.OUTPUT: Generic.Output,
}


def _hex(color: str | None) -> str | None:
    """Normalize a Pygments colour ('e6edf3') to '#e6edf3'."""
    if not color:
        return None
    if color.startswith(("#", "var", "calc")):
        return color
    return f"#{color}"


@dataclass(frozen=True)
class TokenStyle:
    """Concrete visual style for one token class."""

    color: str
    background: str | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "color": self.color,
            "background": self.background,
            "bold": self.bold,
            "italic": self.italic,
            "underline": self.underline,
        }

    def css(self) -> str:
        """Inline CSS declarations for this style."""
        parts = [f"color:{self.color}"]
        if self.background:
            parts.append(f"background-color:{self.background}")
        if self.bold:
            parts.append("font-weight:bold")
        if self.italic:
            parts.append("font-style:italic")
        if self.underline:
            parts.append("text-decoration:underline")
        return ";".join(parts)


@dataclass(frozen=True)
class Theme:
    """A named mapping from token class to style."""

    name: str
    background: str
    foreground: str
    styles: Mapping[TokenClass, TokenStyle] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "styles", MappingProxyType(dict(self.styles)))

    def missing_classes(self) -> list[TokenClass]:
        return [c for c in TokenClass if c not in self.styles]

    def style_for(self, token_class: TokenClass) -> TokenStyle:
        try:
            return self.styles[token_class]
        except KeyError:
            raise MissingStyleForClass(self.name, token_class.value) from None

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "background": self.background,
            "foreground": self.foreground,
            "styles": {c.value: s.to_dict() for c, s in self.styles.items()},
        }


def theme_from_pygments(name: str, style_name: str | None = None) -> Theme:
    """Build a Theme from a Pygments style.

    Every class must get a colour from the style, directly or inherited from
    a parent token type; otherwise MissingStyleForClass is raised.
    """
    style_name = style_name or name
    try:
        style = get_style_by_name(style_name)
    except ClassNotFound:
        raise UnknownTheme(style_name) from None

    styles: dict[TokenClass, TokenStyle] = {}
    for token_class, ttype in STYLE_TOKENS.items():
        spec = style.style_for_token(ttype)
        color = _hex(spec["color"])
        if color is None:
            raise MissingStyleForClass(name, token_class.value)
        styles[token_class] = TokenStyle(
            color=color,
            background=_hex(spec["bgcolor"]),
            bold=spec["bold"],
            italic=spec["italic"],
            underline=spec["underline"],
        )

    return Theme(
        name=name,
        background=style.background_color,
        foreground=styles[TokenClass.TEXT].color,
        styles=styles,
    )


def _key(name: str) -> str:
    return name.strip().lower()


class ThemeRegistry:
    """Named themes, each validated for totality on registration.

    Names are matched case-insensitively, like language ids.
    """

    def __init__(self) -> None:
        self._themes: dict[str, Theme] = {}

    def register(self, theme: Theme) -> Theme:
        missing = theme.missing_classes()
        if missing:
            raise MissingStyleForClass(theme.name, missing[0].value)
        key = _key(theme.name)
        if key in self._themes:
            raise ValueError(f"Theme {theme.name!r} is already registered")
        self._themes[key] = theme
        logger.debug("registered theme %s", theme.name)
        return theme

    def get(self, name: str) -> Theme:
        try:
            return self._themes[_key(name)]
        except KeyError:
            raise UnknownTheme(name, self.names()) from None

    def names(self) -> list[str]:
        return sorted(theme.name for theme in self._themes.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _key(name) in self._themes

    def __len__(self) -> int:
        return len(self._themes)
