# highlighter/templatetags/highlight_tags.py

from django import template
from django.utils.safestring import mark_safe

from highlighter.markdown.postprocessors.syntax_highlighter import syntax_highlighter_default
from highlighter.markdown.renderer import render_markdown
from highlighter.syntax import (
    highlight_data,
    highlight_json,
    highlight_markdown,
    highlight_text,
    highlight_yaml,
)

register = template.Library()


@register.filter(name="highlight_json")
def highlight_json_filter(value):
    """Highlight parsed data, or a string holding valid JSON."""
    return mark_safe(highlight_json(value))


@register.filter(name="highlight_yaml")
def highlight_yaml_filter(value):
    return mark_safe(highlight_yaml(str(value)))


@register.filter(name="highlight_markdown")
def highlight_markdown_filter(value):
    return mark_safe(highlight_markdown(str(value)))


@register.filter(name="highlight_data")
def highlight_data_filter(value, output_format="json"):
    """Usage: {{ result|highlight_data:"yaml" }}"""
    return mark_safe(highlight_data(value, output_format))


@register.filter(name="highlight_response")
def highlight_response_filter(value, output_format="text"):
    """Highlight a model response, stripping an enclosing code fence."""
    return mark_safe(highlight_text(str(value), output_format))


@register.filter(name="highlight_blocks", is_safe=True)
def highlight_blocks_filter(value):
    """Highlight the hinted <pre> blocks of an already rendered HTML fragment."""
    return mark_safe(syntax_highlighter_default(str(value), {}))


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))
