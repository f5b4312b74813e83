"""Provider failure taxonomy.

All of these are local: the orchestrator catches them, logs, and moves on
to the next candidate. None of them reaches a pipeline caller.
"""


class ProviderError(Exception):
    """Base class for a single failed provider attempt."""

    def __init__(self, provider_id: str, message: str):
        self.provider_id = provider_id
        super().__init__(f"{provider_id}: {message}")


class ProviderUnavailableError(ProviderError):
    """Credentials, URL or SDK missing. The candidate is skipped."""


class ProviderTimeoutError(ProviderError):
    """The attempt exceeded its own timeout and was cancelled."""


class ProviderResponseError(ProviderError):
    """Non-2xx status, transport failure, or an empty/unusable reply."""
