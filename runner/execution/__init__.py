from .blocks import EXECUTION_MARKER, BlockProcessor, should_execute
from .config import (
    DatabaseSettingsProvider,
    RunnerConfig,
    SettingsProvider,
    StaticSettingsProvider,
)
from .highlight import Highlighter, PygmentsHighlighter
from .runner import ProcessRunner, RunResult, RunState

__all__ = (
    "EXECUTION_MARKER",
    "BlockProcessor",
    "DatabaseSettingsProvider",
    "Highlighter",
    "ProcessRunner",
    "PygmentsHighlighter",
    "RunResult",
    "RunState",
    "RunnerConfig",
    "SettingsProvider",
    "StaticSettingsProvider",
    "should_execute",
)
