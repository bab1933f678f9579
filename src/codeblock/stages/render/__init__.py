"""Render stage – themed, structured code blocks.

Public API
----------
- render(source, language="bash", theme="github-dark", *, line_numbers=False,
         first_line=1) -> RenderedBlock
- render_cached(text, language="bash", theme="github-dark") -> RenderedBlock
- to_html(block) -> str
"""

from codeblock.stages.render.html import to_html  # noqa: F401
from codeblock.stages.render.renderer import (  # noqa: F401
    RenderedBlock,
    RenderedLine,
    RenderedToken,
    render,
    render_cached,
)
