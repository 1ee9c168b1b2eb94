"""Tests for the pandoc render pipeline. Skipped without a pandoc binary."""

from highlighter.markdown.config import get_pandoc_config
from highlighter.markdown.renderer import render_markdown
from tests.conftest import requires_pandoc


class TestPandocConfig:
    def test_pandoc_highlighting_disabled(self) -> None:
        config = get_pandoc_config()
        assert "--no-highlight" in config["extra_args"]
        assert config["format"].startswith("markdown+")

    def test_extra_args_from_settings(self, settings) -> None:
        settings.HIGHLIGHTER = {"PANDOC_EXTRA_ARGS": ["--wrap=none"]}
        assert get_pandoc_config()["extra_args"][-1] == "--wrap=none"


@requires_pandoc
class TestRenderMarkdown:
    def test_fenced_json_highlighted(self) -> None:
        context = {}
        html = render_markdown('Result:\n\n```json\n{"a": 1}\n```\n', context)
        assert 'class="key"' in html
        assert 'class="number"' in html
        assert [r.format for r in context["highlight_results"]] == ["json"]

    def test_fenced_yaml_highlighted(self) -> None:
        html = render_markdown("```yaml\nenabled: true\n```\n")
        assert '<span class="boolean">true</span>' in html

    def test_unknown_language_left_plain(self) -> None:
        context = {}
        html = render_markdown("```python\nx = 1\n```\n", context)
        assert "<span" not in html
        assert context["highlight_results"][0].ok is False
