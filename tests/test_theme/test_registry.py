"""Tests for theme construction and registry validation — real Pygments styles."""

import pytest

from codeblock.errors import MissingStyleForClass, UnknownTheme
from codeblock.model import TokenClass
from codeblock.stages.theme.registry import (
    STYLE_TOKENS,
    Theme,
    ThemeRegistry,
    TokenStyle,
    _hex,
    theme_from_pygments,
)


def _complete_theme(name="custom"):
    return Theme(
        name=name,
        background="#000000",
        foreground="#ffffff",
        styles={c: TokenStyle(color="#ffffff") for c in TokenClass},
    )


class TestHex:
    def test_adds_hash(self):
        assert _hex("e6edf3") == "#e6edf3"

    def test_keeps_prefixed(self):
        assert _hex("#E06C75") == "#E06C75"

    def test_empty_is_none(self):
        assert _hex("") is None
        assert _hex(None) is None


class TestTokenStyle:
    def test_css_plain(self):
        assert TokenStyle(color="#ffffff").css() == "color:#ffffff"

    def test_css_full(self):
        style = TokenStyle(
            color="#ff0000", background="#000000", bold=True, italic=True, underline=True
        )
        assert style.css() == (
            "color:#ff0000;background-color:#000000;font-weight:bold;"
            "font-style:italic;text-decoration:underline"
        )


class TestThemeFromPygments:
    def test_github_dark(self):
        theme = theme_from_pygments("github-dark")
        assert theme.background == "#0d1117"
        assert theme.foreground == "#e6edf3"
        comment = theme.style_for(TokenClass.COMMENT)
        assert comment.color == "#8b949e"
        assert comment.italic
        command = theme.style_for(TokenClass.COMMAND)
        assert command.color == "#d2a8ff"
        assert command.bold

    def test_alias_name(self):
        theme = theme_from_pygments("midnight", "monokai")
        assert theme.name == "midnight"
        assert theme.background == "#272822"
        assert theme.foreground == "#f8f8f2"

    def test_style_without_base_colour_is_rejected(self):
        # "vs" never colours plain text, so the text class has no style
        with pytest.raises(MissingStyleForClass) as exc:
            theme_from_pygments("vs")
        assert exc.value.token_class == "text"
        assert exc.value.theme == "vs"

    def test_unknown_pygments_style(self):
        with pytest.raises(UnknownTheme):
            theme_from_pygments("no-such-style-xyz")

    def test_every_class_has_a_token_type(self):
        assert set(STYLE_TOKENS) == set(TokenClass)


class TestTheme:
    def test_styles_are_read_only(self):
        theme = _complete_theme()
        with pytest.raises(TypeError):
            theme.styles[TokenClass.TEXT] = TokenStyle(color="#000000")

    def test_style_for_missing_class(self):
        theme = Theme("partial", "#000000", "#ffffff", {})
        with pytest.raises(MissingStyleForClass):
            theme.style_for(TokenClass.COMMENT)

    def test_to_dict(self):
        data = _complete_theme().to_dict()
        assert data["name"] == "custom"
        assert set(data["styles"]) == {c.value for c in TokenClass}


class TestThemeRegistry:
    def test_register_and_get(self):
        registry = ThemeRegistry()
        theme = registry.register(_complete_theme())
        assert registry.get("custom") is theme
        assert "custom" in registry
        assert len(registry) == 1

    def test_incomplete_theme_rejected(self):
        registry = ThemeRegistry()
        styles = {c: TokenStyle(color="#ffffff") for c in TokenClass}
        del styles[TokenClass.PROMPT]
        with pytest.raises(MissingStyleForClass) as exc:
            registry.register(Theme("broken", "#000000", "#ffffff", styles))
        assert exc.value.token_class == "prompt"
        assert "broken" not in registry

    def test_duplicate_rejected(self):
        registry = ThemeRegistry()
        registry.register(_complete_theme())
        with pytest.raises(ValueError):
            registry.register(_complete_theme())

    def test_lookup_ignores_case(self):
        registry = ThemeRegistry()
        theme = registry.register(_complete_theme("Custom"))
        assert registry.get("custom") is theme
        assert registry.get(" CUSTOM ") is theme
        assert "cUsToM" in registry
        assert registry.names() == ["Custom"]

    def test_duplicate_differing_in_case_rejected(self):
        registry = ThemeRegistry()
        registry.register(_complete_theme("custom"))
        with pytest.raises(ValueError):
            registry.register(_complete_theme("CUSTOM"))

    def test_unknown_theme(self):
        registry = ThemeRegistry()
        registry.register(_complete_theme("a"))
        with pytest.raises(UnknownTheme) as exc:
            registry.get("b")
        assert exc.value.available == ["a"]

    def test_names_sorted(self):
        registry = ThemeRegistry()
        for name in ("zeta", "alpha"):
            registry.register(_complete_theme(name))
        assert registry.names() == ["alpha", "zeta"]
