"""
Archiver: runs monolith once per request and captures what it prints.

stdin is written and closed while stdout and stderr are drained by separate
tasks; reading the pipes one after another can deadlock once monolith fills
an OS pipe buffer.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from monolith_api.config import MonolithConfig
from monolith_api.models import ArchiveRequest, ProcessResult
from monolith_api.services.arguments import build_arguments
from monolith_api.utils import format_command_line

logger = logging.getLogger(__name__)


async def _feed_stdin(stream: asyncio.StreamWriter, text: str | None) -> None:
    try:
        if text:
            stream.write(text.encode("utf-8", errors="replace"))
            await stream.drain()
    except (BrokenPipeError, ConnectionResetError):
        # monolith exited before reading all input
        logger.debug("monolith closed stdin early")
    finally:
        stream.close()


async def _drain(stream: asyncio.StreamReader) -> str:
    data = await stream.read()
    return data.decode("utf-8", errors="replace")


class Archiver:
    def __init__(self, config: MonolithConfig):
        self.config = config

    async def run(self, args: Sequence[str], stdin_text: str | None = None) -> ProcessResult:
        # Raises OSError (e.g. FileNotFoundError) when the executable cannot be started,
        # ValueError when an argument contains a NUL byte
        process = await asyncio.create_subprocess_exec(
            self.config.executable,
            *args,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )

        try:
            _, stdout, stderr = await asyncio.gather(
                _feed_stdin(process.stdin, stdin_text),
                _drain(process.stdout),
                _drain(process.stderr),
            )
            exit_code = await process.wait()
        except BaseException:
            if process.returncode is None:
                logger.warning("Archive interrupted, killing monolith (pid %s)", process.pid)
                process.kill()
            await process.wait()
            raise

        return ProcessResult(stdout=stdout, stderr=stderr, exit_code=exit_code)

    async def archive(self, request: ArchiveRequest) -> ProcessResult:
        args = build_arguments(request)
        logger.debug("Executing command: %s", format_command_line(self.config.executable, args))

        stdin_text = None
        if request.uses_stdin:
            logger.debug("Writing HTML to stdin (length: %d characters)", len(request.stdin_html))
            stdin_text = request.stdin_html

        result = await self.run(args, stdin_text)
        logger.info("Process completed with exit code: %d", result.exit_code)
        return result
