"""
ScriptedProvider -- an in-process backend for tests, demos and dry runs.

Behaves like any other Provider but never touches the network. Each
invoke() consumes the next scripted step:

  - a str        -> returned as the raw reply
  - an Exception -> raised (simulates transport / HTTP failures)
  - a float      -> sleeps that many seconds first (simulates a slow backend),
                    then returns the reply set by `reply_after_delay`

When the script runs out the last step repeats.
"""

import asyncio
from typing import Union

from .providers import ProviderResult

Step = Union[str, BaseException, float]


class ScriptedProvider:
    """Deterministic Provider used where a real backend would be.

    Usage:
        fake = ScriptedProvider("groq", ['{"topics": ["a", "b"]}'])
        orchestrator = ProviderOrchestrator([fake])
    """

    def __init__(
        self,
        provider_id: str = "fake",
        script: list[Step] | None = None,
        available: bool = True,
        reply_after_delay: str = "",
    ):
        self._id = provider_id
        self._script: list[Step] = list(script or [""])
        self._available = available
        self._reply_after_delay = reply_after_delay
        self.calls: list[tuple[str, str, float]] = []
        self.cancelled = 0

    @property
    def id(self) -> str:
        return self._id

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def is_available(self) -> bool:
        return self._available

    async def invoke(
        self, system_prompt: str, user_prompt: str, timeout: float
    ) -> ProviderResult:
        index = min(len(self.calls), len(self._script) - 1)
        step = self._script[index]
        self.calls.append((system_prompt, user_prompt, timeout))

        if isinstance(step, BaseException):
            raise step
        if isinstance(step, (int, float)) and not isinstance(step, bool):
            try:
                await asyncio.sleep(step)
            except asyncio.CancelledError:
                self.cancelled += 1
                raise
            step = self._reply_after_delay

        return ProviderResult(success=True, payload=step, provider_id=self._id)
