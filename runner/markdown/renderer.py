# runner/markdown/renderer.py
"""
Note rendering entry point.

Python fences never reach Pandoc: the code_blocks preprocessor swaps them for
placeholders, Pandoc and bleach handle the rest of the note, and the
code_runner postprocessor fills the placeholders back in with the source view
and the output of every "# run" block.
"""

import pypandoc

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors


def render_markdown(text, context=None):
    """
    Render note markdown to HTML, executing its "# run" python blocks.

    Blocks are executed synchronously: the returned HTML already holds their
    output, so callers on the request path should go through the
    render_note_html task instead.

    Args:
        text: Note markdown
        context: Optional dict shared by the processors. Tests and callers can
            inject "settings_provider", "highlighter" and "process_launcher";
            the code_blocks preprocessor stores the lifted sources in it.
    """
    context = context or {}

    text = apply_preprocessors(text, context)

    pandoc_config = get_pandoc_config()
    html = pypandoc.convert_text(
        text,
        to="html5",
        format="markdown",
        extra_args=pandoc_config["extra_args"],
        filters=pandoc_config.get("filters", []),
    )

    return apply_postprocessors(html, context)
