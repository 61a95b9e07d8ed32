"""
Process runner: executes one code block and streams its output.

A run goes through IDLE -> RUNNING -> COMPLETED (exit code) or FAILED (error).

Output handling:
- The output area is cleared when the run starts
- stdout chunks accumulate in one lazily created text element
- stderr chunks accumulate, prefixed with "Error: ", in one lazily created
  error element
- On close, the exit code line is appended to the last element of the output
  area when show_exit_status is enabled
- Spawn or runtime errors end up as an "An error occurred: " line at the end
  of the output area; a process whose streams fail is killed and reaped

Nothing is raised to the caller. Every outcome terminates in the output area
and in the returned RunResult.
"""

import asyncio
import codecs
import enum
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from . import sink as sinks
from .config import RunnerConfig, SettingsProvider
from .process import (
    AsyncioProcessLauncher,
    ProcessHandle,
    ProcessLauncher,
    StreamReader,
    build_invocation,
)

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 4096


class RunState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class RunResult:
    state: RunState
    exit_code: Optional[int] = None
    error: Optional[BaseException] = None


class BlockRun:
    """Output state of a single execution of a block."""

    def __init__(self, source: str, output: sinks.OutputSink, config: RunnerConfig):
        self.source = source
        self.output = output
        self.config = config
        self.state = RunState.IDLE
        self.text_element: Optional[sinks.OutputElement] = None
        self.error_element: Optional[sinks.OutputElement] = None
        # Most recently created element, i.e. the one at the end of the output area
        self.trailing_element: Optional[sinks.OutputElement] = None

    def _create(self, kind: str) -> sinks.OutputElement:
        element = self.output.create_element(kind)
        self.trailing_element = element
        return element

    def start(self) -> None:
        self.output.clear()
        self.state = RunState.RUNNING

    def write_stdout(self, text: str) -> None:
        if self.text_element is None:
            self.text_element = self._create(sinks.TEXT)
        self.text_element.append(text)

    def write_stderr(self, text: str) -> None:
        if self.error_element is None:
            self.error_element = self._create(sinks.ERROR)
        self.error_element.append(f"Error: {text}")

    def complete(self, exit_code: int) -> RunResult:
        if self.config.show_exit_status:
            element = self.trailing_element or self._create(sinks.PLAIN)
            element.append(f"\nPython exited with code: {exit_code}")
        self.state = RunState.COMPLETED
        return RunResult(self.state, exit_code=exit_code)

    def fail(self, error: BaseException) -> RunResult:
        if self.error_element is None or self.error_element is not self.trailing_element:
            self.error_element = self._create(sinks.ERROR)
        self.error_element.append(f"\nAn error occurred: {error}")
        self.state = RunState.FAILED
        return RunResult(self.state, error=error)


class ProcessRunner:
    """
    Run code blocks with the configured interpreter.

    Args:
        settings: Provider read once at the start of every run
        launcher: Process capability (default: asyncio subprocesses)
        chunk_size: Maximum bytes read from a stream at a time
    """

    def __init__(
        self,
        settings: SettingsProvider,
        launcher: Optional[ProcessLauncher] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.settings = settings
        self.launcher = launcher or AsyncioProcessLauncher()
        self.chunk_size = chunk_size

    async def run(self, source: str, output: sinks.OutputSink) -> RunResult:
        config = self.settings.get_config()
        block_run = BlockRun(source, output, config)
        block_run.start()

        command, args = build_invocation(config, source)
        logger.debug(f"Running code block with '{command}' ({len(source)} chars)")

        try:
            process = await self.launcher.spawn(command, args)
        except Exception as e:
            logger.debug(f"Could not start '{command}': {e}")
            return block_run.fail(e)

        pumps = [
            asyncio.ensure_future(self._pump(process.stdout, block_run.write_stdout)),
            asyncio.ensure_future(self._pump(process.stderr, block_run.write_stderr)),
        ]
        try:
            await asyncio.gather(*pumps)
            exit_code = await process.wait()
        except Exception as e:
            logger.debug(f"Code block run with '{command}' failed: {e}")
            for pump in pumps:
                pump.cancel()
            await self._reap(process)
            return block_run.fail(e)

        logger.debug(f"Code block run with '{command}' exited with code {exit_code}")
        return block_run.complete(exit_code)

    async def _reap(self, process: ProcessHandle) -> None:
        """Kill a process whose output could not be read, and wait for it."""
        if process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                pass
        try:
            await process.wait()
        except Exception as e:
            logger.warning(f"Failed to reap code block process: {e}")

    async def _pump(self, stream: StreamReader, write: Callable[[str], None]) -> None:
        """Forward decoded chunks of a stream until EOF."""
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while True:
            chunk = await stream.read(self.chunk_size)
            if not chunk:
                break
            text = decoder.decode(chunk)
            if text:
                write(text)
        tail = decoder.decode(b"", final=True)
        if tail:
            write(tail)
