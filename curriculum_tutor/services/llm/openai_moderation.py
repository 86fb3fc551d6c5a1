"""
OpenAI Moderation API Provider

- client.moderations.create()
- response.results[0].flagged
- response.results[0].categories (category -> bool)
"""

from openai import AsyncOpenAI

from curriculum_tutor.services.llm.base import ModerationProvider
from curriculum_tutor.services.llm.models import ModerationResult


class OpenAIModerationProvider(ModerationProvider):
    provider_name = "openai_moderation"

    def __init__(
        self,
        api_key: str,
        model: str = "omni-moderation-latest",
        client: AsyncOpenAI | None = None,
    ):
        self.client = client or AsyncOpenAI(api_key=api_key)
        self.model = model

    async def moderate(self, text: str) -> ModerationResult:
        response = await self.client.moderations.create(model=self.model, input=text)
        result = response.results[0]

        categories = result.categories.model_dump(by_alias=True)
        return ModerationResult(
            flagged=result.flagged,
            categories=[name for name, hit in categories.items() if hit],
        )
