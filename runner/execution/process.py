"""
External process capability for code execution.

The runner only needs a command, its arguments and two readable output
streams, so it depends on ProcessLauncher rather than on asyncio directly.
"""

import asyncio
from typing import List, Optional, Protocol, Sequence, Tuple

from .config import RunnerConfig


class StreamReader(Protocol):
    async def read(self, n: int = -1) -> bytes: ...


class ProcessHandle(Protocol):
    stdout: StreamReader
    stderr: StreamReader
    returncode: Optional[int]

    def kill(self) -> None: ...

    async def wait(self) -> int: ...


class ProcessLauncher(Protocol):
    async def spawn(self, command: str, args: Sequence[str]) -> ProcessHandle: ...


class AsyncioProcessLauncher:
    """Spawn processes on the running event loop with piped stdout/stderr."""

    async def spawn(self, command: str, args: Sequence[str]) -> ProcessHandle:
        return await asyncio.create_subprocess_exec(
            command,
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )


def build_invocation(config: RunnerConfig, source: str) -> Tuple[str, List[str]]:
    """
    Build the interpreter command line for a block.

    The whole block is passed as a single inline-script argument, with
    unbuffered output so chunks arrive as the script writes them:

        <interpreter_path> -u -c <source>
    """
    return config.interpreter_path, ["-u", "-c", source]
