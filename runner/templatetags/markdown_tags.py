# runner/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from runner.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.simple_tag(takes_context=True)
def markdown_with_context(context, value):
    """Template tag that passes template context to processors"""
    processor_context = {
        "request": context.get("request"),
        "note": context.get("note"),
    }
    return mark_safe(render_markdown(value, context=processor_context))
