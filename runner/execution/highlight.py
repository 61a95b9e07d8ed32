"""
Optional syntax highlighting for rendered code blocks.

Pygments is looked up when a block is rendered, not at import time. If it is
missing (or has no lexer for the language) the highlighter returns None and
the block falls back to plain text.
"""

import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class Highlighter(Protocol):
    def highlight(self, source: str, language: str) -> Optional[str]: ...


class PygmentsHighlighter:
    """Highlight source into inline <span> markup using Pygments CSS classes."""

    def __init__(self, css_class_prefix: str = ""):
        self.css_class_prefix = css_class_prefix

    def highlight(self, source: str, language: str) -> Optional[str]:
        try:
            from pygments import highlight
            from pygments.formatters.html import HtmlFormatter
            from pygments.lexers import get_lexer_by_name
            from pygments.util import ClassNotFound
        except ImportError:
            logger.debug("Pygments not installed - rendering plain source")
            return None

        try:
            lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
        except ClassNotFound:
            logger.debug(f"No Pygments lexer for language '{language}'")
            return None

        formatter = HtmlFormatter(nowrap=True, classprefix=self.css_class_prefix)
        markup = highlight(source, lexer, formatter)
        # Pygments terminates the last line even with ensurenl=False
        if markup.endswith("\n") and not source.endswith("\n"):
            markup = markup[:-1]
        return markup
