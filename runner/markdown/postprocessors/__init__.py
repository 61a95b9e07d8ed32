# runner/markdown/postprocessors/__init__.py

from .code_runner import code_runner_default
from .sanitizer import sanitize_html

POSTPROCESSORS = [
    sanitize_html,
    code_runner_default,  # Render python blocks and stream executed output into them
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
