"""Convert a RenderedBlock to an HTML ``<pre>`` fragment.

This is the markup layer; nothing in the tokenize/theme/render core imports
it.  Tokens carry inline styles, so the fragment needs no stylesheet.
"""

from __future__ import annotations

from html import escape

from codeblock.stages.render.renderer import RenderedBlock, RenderedLine


def _render_line(line: RenderedLine) -> str:
    parts = ['<span class="line"']
    if line.number is not None:
        parts.append(f' data-line="{line.number}"')
    parts.append(">")
    for token in line.tokens:
        parts.append(
            f'<span class="{token.token_class.value}" style="{token.style.css()}">'
            f"{escape(token.text, quote=False)}</span>"
        )
    parts.append("</span>")
    return "".join(parts)


def to_html(block: RenderedBlock) -> str:
    """Return ``<pre><code>`` markup with one ``span.line`` per line."""
    pre_style = f"background-color:{block.background};color:{block.foreground}"
    body = "\n".join(_render_line(line) for line in block.lines)
    return (
        f'<pre class="codeblock {escape(block.theme)}" style="{pre_style}" '
        f'data-language="{escape(block.language)}">'
        f"<code>{body}</code></pre>"
    )
