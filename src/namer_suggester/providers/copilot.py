"""GitHub Copilot CLI provider (``gh copilot``) driven via subprocess."""

from __future__ import annotations

import asyncio
import logging

from namer_suggester.constants import (
    COPILOT_PROBE_TIMEOUT,
    COPILOT_SUGGEST_TIMEOUT,
    ProviderName,
)
from namer_suggester.prompts import build_cli_prompt
from namer_suggester.providers.base import BaseAIProvider
from namer_suggester.providers.schemas import PromptContext

logger = logging.getLogger(__name__)

GH_EXECUTABLE = "gh"


class CopilotProvider(BaseAIProvider):
    """Asks the locally installed Copilot CLI extension for names.

    The process is started and reaped inside each call; a call that
    exceeds its timeout is killed.
    """

    key = ProviderName.COPILOT
    label = "GitHub Copilot CLI"

    def __init__(
        self,
        executable: str = GH_EXECUTABLE,
        probe_timeout: float = COPILOT_PROBE_TIMEOUT,
        suggest_timeout: float = COPILOT_SUGGEST_TIMEOUT,
    ) -> None:
        self._executable = executable
        self._probe_timeout = probe_timeout
        self._suggest_timeout = suggest_timeout

    async def is_available(self) -> bool:
        try:
            returncode, _ = await self._run(
                ["copilot", "--version"], None, self._probe_timeout
            )
        except (OSError, TimeoutError) as exc:
            logger.debug("event=copilot_probe_failed error=%s", exc)
            return False
        return returncode == 0

    async def _complete(self, context: PromptContext) -> str | None:
        returncode, stdout = await self._run(
            ["copilot", "suggest"],
            build_cli_prompt(context),
            self._suggest_timeout,
        )
        if returncode != 0:
            msg = f"gh copilot suggest exited with status {returncode}"
            raise RuntimeError(msg)
        return stdout.strip()

    def build_prompt(self, context: PromptContext) -> str:
        return build_cli_prompt(context)

    async def _run(
        self, args: list[str], stdin_text: str | None, timeout: float
    ) -> tuple[int | None, str]:
        """Run ``gh <args>``; raises TimeoutError after killing the process."""
        proc = await asyncio.create_subprocess_exec(
            self._executable,
            *args,
            stdin=(
                asyncio.subprocess.PIPE
                if stdin_text is not None
                else asyncio.subprocess.DEVNULL
            ),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.DEVNULL,
        )
        payload = stdin_text.encode("utf-8") if stdin_text is not None else None
        try:
            stdout, _ = await asyncio.wait_for(
                proc.communicate(payload), timeout=timeout
            )
        except TimeoutError:
            proc.kill()
            await proc.wait()
            raise
        return proc.returncode, stdout.decode("utf-8", errors="replace")
