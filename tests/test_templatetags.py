"""Tests for the highlight template filters."""

from django.template import Context, Template

from tests.conftest import requires_pandoc


def render(source: str, **context) -> str:
    return Template("{% load highlight_tags %}" + source).render(Context(context))


class TestHighlightFilters:
    def test_highlight_json(self) -> None:
        result = render("{{ data|highlight_json }}", data={"ok": True})
        assert '<span class="key">"ok":</span> <span class="boolean">true</span>' in result

    def test_highlight_yaml(self) -> None:
        result = render("{{ text|highlight_yaml }}", text="a: ~")
        assert result == '<b class="key">a:</b> <span class="null">~</span>'

    def test_highlight_markdown(self) -> None:
        result = render("{{ text|highlight_markdown }}", text="> <b>quoted</b>")
        assert result == (
            '<blockquote class="markdown-blockquote">&lt;b&gt;quoted&lt;/b&gt;</blockquote>'
        )

    def test_highlight_data_with_format(self) -> None:
        result = render('{{ data|highlight_data:"yaml" }}', data={"n": 2})
        assert result == '<b class="key">n:</b> <span class="number">2</span>\n'

    def test_highlight_response_strips_fence(self) -> None:
        result = render("{{ text|highlight_response }}", text="```md\n**hi**\n```")
        assert result == '<strong class="markdown-bold">hi</strong>'

    def test_highlight_blocks(self) -> None:
        html = '<pre class="highlight-yml">a: 1</pre>'
        result = render("{{ html|highlight_blocks }}", html=html)
        assert '<span class="number">1</span>' in result
        assert "highlighted" in result

    @requires_pandoc
    def test_markdown_filter(self) -> None:
        result = render("{{ text|markdown }}", text='```json\n{"a": 1}\n```\n')
        assert 'class="key"' in result
