"""
ProviderOrchestrator -- ordered, time-boxed fallback across backends.

Walks the static provider list in priority order and returns the first
successful reply:

  for each provider:
    unavailable          -> skip (debug log)
    invoke under timeout -> success: return it
    timeout / error      -> log, next candidate (no retry)
  all exhausted          -> ProviderResult.failure(...)  (never raises)

Candidates are tried strictly one at a time, never in parallel.

Each attempt runs inside its own asyncio.wait_for scope, so a timed-out
request is cancelled before the next candidate starts. An optional outer
deadline caps the whole call; once spent, remaining candidates are
abandoned and the caller falls back to the builtin generator.
"""

import asyncio
import logging
import time
from typing import Sequence

from ..config import PipelineConfig
from .errors import ProviderError, ProviderTimeoutError
from .providers import Provider, ProviderResult

logger = logging.getLogger(__name__)

BUILTIN_PROVIDER_ID = "builtin"

# Below this much remaining budget a new attempt is not started.
MIN_ATTEMPT_SECONDS = 0.05


class ProviderOrchestrator:
    """
    Tries each configured provider in order until one answers.

    Usage:
        orchestrator = ProviderOrchestrator(build_providers(config), config=config)
        result = await orchestrator.try_providers(system_prompt, user_prompt)
        if result.success:
            parsed = parse_structured(result.payload)
    """

    def __init__(
        self,
        providers: Sequence[Provider],
        config: PipelineConfig | None = None,
    ):
        self._providers: tuple[Provider, ...] = tuple(providers)
        self._config = config or PipelineConfig()

    @property
    def providers(self) -> tuple[Provider, ...]:
        return self._providers

    @property
    def config(self) -> PipelineConfig:
        return self._config

    def available_providers(self) -> list[str]:
        """Ids of providers that are currently usable, in priority order."""
        available = []
        for provider in self._providers:
            try:
                if provider.is_available():
                    available.append(provider.id)
            except Exception as e:
                logger.warning(f"[Orchestrator] {provider.id} availability check failed: {e}")
        return available

    async def try_providers(
        self,
        system_prompt: str,
        user_prompt: str,
        deadline: float | None = None,
    ) -> ProviderResult:
        """
        Attempt providers in priority order; first success wins.

        Args:
            system_prompt: Operation-specific instructions.
            user_prompt: Sanitized, wrapped user payload.
            deadline: Seconds allowed for the whole call. Defaults to
                config.outer_deadline; None there means no outer budget.

        Returns:
            ProviderResult. success=False (with per-candidate errors) when
            every candidate was skipped or missed.
        """
        budget = deadline if deadline is not None else self._config.outer_deadline
        started = time.monotonic()
        errors: list[str] = []

        for provider in self._providers:
            try:
                available = provider.is_available()
            except Exception as e:
                logger.warning(f"[Orchestrator] {provider.id} availability check failed: {e}")
                available = False
            if not available:
                logger.debug(f"[Orchestrator] Skipping {provider.id} (not configured)")
                continue

            timeout = self._config.provider_timeout
            if budget is not None:
                remaining = budget - (time.monotonic() - started)
                if remaining < MIN_ATTEMPT_SECONDS:
                    logger.warning(
                        f"[Orchestrator] Outer deadline of {budget:.1f}s spent, "
                        f"abandoning remaining providers"
                    )
                    errors.append(f"{provider.id}: outer deadline exceeded")
                    break
                timeout = min(timeout, remaining)

            result = await self._attempt(provider, system_prompt, user_prompt, timeout, errors)
            if result is not None:
                return result

        if errors:
            logger.warning(
                f"[Orchestrator] All providers exhausted ({len(errors)} attempted), "
                f"falling back to {BUILTIN_PROVIDER_ID}"
            )
        else:
            logger.debug(f"[Orchestrator] No providers available, using {BUILTIN_PROVIDER_ID}")
        return ProviderResult.failure(errors)

    async def _attempt(
        self,
        provider: Provider,
        system_prompt: str,
        user_prompt: str,
        timeout: float,
        errors: list[str],
    ) -> ProviderResult | None:
        """One bounded attempt. Returns the result, or None after logging a miss."""
        start = time.monotonic()
        logger.debug(f"[Orchestrator] Trying {provider.id} (timeout={timeout:.1f}s)")
        try:
            result = await asyncio.wait_for(
                provider.invoke(system_prompt, user_prompt, timeout),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            error: Exception = ProviderTimeoutError(
                provider.id, f"no reply within {timeout:.1f}s"
            )
        except Exception as e:
            error = e
        else:
            if result.success and result.payload and result.payload.strip():
                logger.info(
                    f"[Orchestrator] {provider.id} succeeded "
                    f"({(time.monotonic() - start) * 1000:.0f}ms)"
                )
                return ProviderResult(
                    success=True, payload=result.payload, provider_id=provider.id
                )
            error = ProviderError(provider.id, "empty or unsuccessful reply")

        summary = f"{provider.id}: {type(error).__name__}"
        errors.append(summary)
        logger.warning(f"[Orchestrator] {provider.id} failed: {type(error).__name__}: {error}")
        return None

    def status(self) -> dict:
        """Service status: which providers are live, and that builtin always is."""
        providers = self.available_providers() + [BUILTIN_PROVIDER_ID]
        return {
            "configured": True,
            "providers": providers,
            "primaryProvider": providers[0],
            "hasBuiltinFallback": True,
        }
