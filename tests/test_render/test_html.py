"""Tests for the HTML markup layer."""

from codeblock.stages.render import render, to_html


class TestToHtml:
    def test_pre_wrapper(self):
        html = to_html(render("ls", "bash", "github-dark"))
        assert html.startswith(
            '<pre class="codeblock github-dark" '
            'style="background-color:#0d1117;color:#e6edf3" data-language="bash">'
            "<code>"
        )
        assert html.endswith("</code></pre>")

    def test_one_span_per_line(self, migraine_transcript):
        html = to_html(render(migraine_transcript))
        assert html.count('<span class="line"') == 5
        assert '<span class="line"></span>' in html

    def test_token_spans(self):
        html = to_html(render("brew install", "bash", "github-dark"))
        assert (
            '<span class="command" style="color:#d2a8ff;font-weight:bold">brew</span>'
            in html
        )
        assert '<span class="argument"' in html

    def test_escapes_text(self):
        html = to_html(render("echo '<b>' && ls"))
        assert "&lt;b&gt;" in html
        assert "&amp;&amp;" in html
        assert "<b>" not in html

    def test_line_numbers(self):
        html = to_html(render("a\nb", line_numbers=True))
        assert 'data-line="1"' in html
        assert 'data-line="2"' in html

    def test_empty_block(self):
        assert "<code></code>" in to_html(render(""))
