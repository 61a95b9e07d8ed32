# runner/markdown/postprocessors/code_runner.py
"""
Postprocessor that renders the python blocks lifted out by the
code_blocks preprocessor, and executes the ones starting with "# run".

This postprocessor:
- Replaces each runner-block placeholder with a <div class="python-block">
- Lets the BlockProcessor add the source view and, for executed blocks, a
  <pre class="python-output"> area
- Awaits every run of the document together, then serialises the HTML

Dependencies can be supplied through the render context:
- settings_provider: SettingsProvider, read once per document
  (default: the RunnerSettings row)
- highlighter: Highlighter (default: Pygments)
- process_launcher: ProcessLauncher (default: asyncio subprocesses)
"""

import asyncio
import logging
from typing import Awaitable, List, Optional, Set

from asgiref.sync import async_to_sync
from bs4 import BeautifulSoup

from runner.execution import (
    BlockProcessor,
    DatabaseSettingsProvider,
    ProcessRunner,
    PygmentsHighlighter,
    RunResult,
    StaticSettingsProvider,
)
from runner.execution.sink import SoupBlockSink

from ..preprocessors.code_blocks import (
    CODE_BLOCKS_KEY,
    PLACEHOLDER_CLASS,
    PLACEHOLDER_ID_PREFIX,
    TOKEN_KEY,
)

logger = logging.getLogger(__name__)

BLOCK_CLASS = "python-block"


def _placeholder_index(element_id: Optional[str], token: str) -> Optional[int]:
    """Block index of a placeholder id carrying this render's token."""
    prefix = f"{PLACEHOLDER_ID_PREFIX}{token}-"
    if not element_id or not element_id.startswith(prefix):
        return None
    suffix = element_id[len(prefix):]
    if not suffix.isdigit():
        return None
    return int(suffix)


def build_block_processor(context: dict) -> BlockProcessor:
    provider = context.get("settings_provider") or DatabaseSettingsProvider()
    # Read once here: the runs execute inside an event loop, where the ORM is off limits
    settings = StaticSettingsProvider(provider.get_config())
    highlighter = context.get("highlighter", PygmentsHighlighter())
    runner = ProcessRunner(settings, launcher=context.get("process_launcher"))
    return BlockProcessor(settings, runner=runner, highlighter=highlighter)


async def _await_runs(runs: List[Awaitable[RunResult]]) -> List[RunResult]:
    return await asyncio.gather(*runs)


def run_code_blocks(html: str, context: dict) -> str:
    """
    Render and execute the python blocks of a document.

    Args:
        html: HTML string to process
        context: Context dictionary, must hold the sources and the placeholder
            token stored by the code_blocks preprocessor

    Returns:
        HTML with every python block rendered and executed output filled in

    Only placeholders carrying the token are rendered, each block at most once.
    """
    blocks = context.get(CODE_BLOCKS_KEY) or []
    token = context.get(TOKEN_KEY)
    if not blocks or not token:
        return html

    soup = BeautifulSoup(html, "html.parser")
    processor = build_block_processor(context)

    pending: List[Awaitable[RunResult]] = []
    rendered: Set[int] = set()
    for placeholder in soup.find_all("div", class_=PLACEHOLDER_CLASS):
        index = _placeholder_index(placeholder.get("id"), token)
        if index is None or index >= len(blocks) or index in rendered:
            continue
        rendered.add(index)

        placeholder.clear()
        del placeholder["id"]
        placeholder["class"] = [BLOCK_CLASS]

        run = processor.process(blocks[index], SoupBlockSink(soup, placeholder))
        if run is not None:
            pending.append(run)

        if not placeholder.contents:
            placeholder.decompose()

    if pending:
        logger.debug(f"Executing {len(pending)} code block(s)")
        async_to_sync(_await_runs)(pending)

    return str(soup)


def code_runner_default(html: str, context: dict) -> str:
    """
    Default configuration for code_runner.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return run_code_blocks(html, context)
