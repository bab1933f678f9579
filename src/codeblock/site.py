"""Site configuration for the Migraine documentation and its home page demo.

The configuration is plain data.  ``render_demo`` is the page-composition
side of the pipeline: it renders the home page transcript and decides what
to do when the requested language or theme is not available.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from codeblock.errors import UnknownTheme, UnsupportedLanguage
from codeblock.lang import FALLBACK_LANGUAGE
from codeblock.stages.render import RenderedBlock, render
from codeblock.stages.theme import DEFAULT_THEME
from codeblock.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Logo:
    src: str
    alt: str
    width: int = 32
    height: int = 32


@dataclass(frozen=True)
class Link:
    url: str


@dataclass(frozen=True)
class MetaTag:
    """A ``<meta>`` tag; ``attribute`` is ``"name"`` or ``"property"``."""

    attribute: str
    key: str
    content: str

    def __post_init__(self) -> None:
        if self.attribute not in ("name", "property"):
            raise ValueError(f"Unsupported meta attribute: {self.attribute!r}")


@dataclass(frozen=True)
class PageMetadata:
    title: str
    description: str
    image: str | None = None


@dataclass(frozen=True)
class SiteConfig:
    logo: Logo
    project: Link
    chat: Link
    docs_repository_base: str
    footer_text: str
    head: tuple[MetaTag, ...] = ()
    page: PageMetadata | None = None

    def meta(self, key: str) -> str | None:
        """Content of the head meta tag with this name/property."""
        for tag in self.head:
            if tag.key == key:
                return tag.content
        return None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


MIGRAINE_SITE = SiteConfig(
    logo=Logo(
        src="https://github.com/user-attachments/assets/1f1f90d0-3a85-44c8-b84a-b23838bf35c2",
        alt="migraine-logo",
    ),
    project=Link("https://github.com/tesh254/migraine"),
    chat=Link("https://discord.gg/SmGENKen"),
    docs_repository_base="https://github.com/tesh254/migraine-docs",
    footer_text="Made with ❤️ by Erick Wachira",
    head=(
        MetaTag("name", "viewport", "width=device-width, initial-scale=1.0"),
        MetaTag("property", "og:title", "Migraine"),
        MetaTag(
            "property",
            "og:description",
            (
                "migraine is a robust CLI tool used to organize and automate complex "
                "workflows with templated commands. Users can define, store, and run "
                "sequences of shell commands efficiently, featuring variable "
                "substitution, pre-flight checks, and discrete actions"
            ),
        ),
    ),
    page=PageMetadata(
        title="Migraine",
        description="Migraine CLI",
        image="/mg_logo.png",
    ),
)

HOME_DEMO_LANGUAGE = "bash"

HOME_DEMO_CODE = """\
# Install Migraine
brew install migraine

# Create a new workflow from a template
migraine workflow new

# Run a workflow with variables
migraine run my_workflow -v PROJECT_PATH=/path/to/project

# Execute specific actions
migraine run my_workflow -a deploy"""


def render_demo(
    code: str = HOME_DEMO_CODE,
    *,
    language: str = HOME_DEMO_LANGUAGE,
    theme: str = DEFAULT_THEME,
) -> RenderedBlock:
    """Render a page code sample, degrading instead of failing.

    An unknown theme falls back to the default theme and an unsupported
    language falls back to plain text.
    """
    try:
        return render(code, language, theme)
    except UnknownTheme as e:
        if theme == DEFAULT_THEME:
            raise
        logger.warning("%s; falling back to %s", e, DEFAULT_THEME)
        return render_demo(code, language=language, theme=DEFAULT_THEME)
    except UnsupportedLanguage as e:
        logger.warning("%s; rendering as %s", e, FALLBACK_LANGUAGE)
        return render(code, FALLBACK_LANGUAGE, theme)
