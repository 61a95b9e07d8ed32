"""
Block processor: decides how a fenced Python block is rendered.

For every block:
1. Render the source as <pre><code> when show_source_in_preview is enabled,
   highlighted if a highlighter is available, plain text otherwise
2. Start an execution when the trimmed source begins with the "# run" marker

The marker must be the first non-whitespace content of the block. A marker
further down the block does not trigger execution.
"""

import logging
from typing import Awaitable, Optional

from .config import SettingsProvider
from .highlight import Highlighter
from .runner import ProcessRunner, RunResult
from .sink import BlockSink

logger = logging.getLogger(__name__)

EXECUTION_MARKER = "# run"
LANGUAGE = "python"


def should_execute(source: str) -> bool:
    return source.strip().startswith(EXECUTION_MARKER)


class BlockProcessor:
    def __init__(
        self,
        settings: SettingsProvider,
        runner: Optional[ProcessRunner] = None,
        highlighter: Optional[Highlighter] = None,
        language: str = LANGUAGE,
    ):
        self.settings = settings
        self.runner = runner or ProcessRunner(settings)
        self.highlighter = highlighter
        self.language = language

    def process(self, source: str, block: BlockSink) -> Optional[Awaitable[RunResult]]:
        """
        Render one code block.

        Returns the pending run when the block is executed, None otherwise.
        The run has not started yet; the caller awaits it (typically together
        with the other blocks of the same document).
        """
        config = self.settings.get_config()

        if config.show_source_in_preview:
            highlighted = None
            if self.highlighter is not None:
                highlighted = self.highlighter.highlight(source, self.language)
            block.add_source(source, self.language, highlighted)

        if not should_execute(source):
            return None

        logger.debug("Execution marker found, scheduling code block run")
        output = block.add_output_area()
        return self.runner.run(source, output)
