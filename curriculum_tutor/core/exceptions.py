"""
Error taxonomy for the tutoring core.

Only provider outages are raised as exceptions. Moderation outages and
malformed structured output are handled where they occur (see
the policy table in ``curriculum_tutor.core.policy``).
"""


class TutorError(Exception):
    """Base class for all errors raised by the tutoring core."""


class ProviderUnavailable(TutorError):
    """An embedding, vector index or generation provider call failed."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider} provider unavailable: {message}")
