"""
Moderation Gate

Screens generated text before it reaches the student.

Fails open: if the moderation provider itself errors, the content passes
(flagged=False) and the error is logged. A normal flagged result is not an
error; the orchestrator substitutes a safe message.
"""

import logging

from curriculum_tutor.services.llm.base import ModerationProvider
from curriculum_tutor.services.llm.models import ModerationResult

logger = logging.getLogger(__name__)


class ModerationGate:
    def __init__(self, provider: ModerationProvider):
        self.provider = provider

    async def check(self, text: str) -> ModerationResult:
        try:
            result = await self.provider.moderate(text)
        except Exception as e:
            logger.error(f"[Moderation] Check failed, failing open: {e}")
            return ModerationResult(flagged=False, categories=[])

        if result.flagged:
            logger.warning(f"[Moderation] Content flagged: {', '.join(result.categories)}")
        return result

    async def validate_response(self, text: str) -> bool:
        """True when the text may be shown to the student."""
        result = await self.check(text)
        return not result.flagged
