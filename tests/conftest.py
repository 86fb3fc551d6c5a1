# /tests/conftest.py
#
# Fake provider collaborators. Every orchestrator takes its gateways through
# the constructor, so tests wire these in place of OpenAI and ChromaDB.

import pytest

from curriculum_tutor.core.exceptions import ProviderUnavailable
from curriculum_tutor.models.answer import TokenUsage
from curriculum_tutor.models.chunk import VectorMatch, VectorRecord
from curriculum_tutor.services.llm.base import LLMProvider, ModerationProvider
from curriculum_tutor.services.llm.generation import ResponseGenerator
from curriculum_tutor.services.llm.models import LLMResponse, ModerationResult
from curriculum_tutor.services.llm.moderation import ModerationGate
from curriculum_tutor.services.rag.embedder import EmbeddingProvider
from curriculum_tutor.services.rag.retriever import Retriever
from curriculum_tutor.services.rag.vector_store import VectorIndex


class FakeEmbedder(EmbeddingProvider):
    provider_name = "fake_embeddings"

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.embed_calls: list[str] = []
        self.batch_calls: list[list[str]] = []

    async def embed(self, text):
        self.embed_calls.append(text)
        if self.fail:
            raise ProviderUnavailable("embedding", "connection refused")
        return [float(len(text)), 1.0, 0.0]

    async def embed_batch(self, texts):
        self.batch_calls.append(list(texts))
        return [[float(i), 1.0, 0.0] for i, _ in enumerate(texts)]


class FakeVectorIndex(VectorIndex):
    """
    Two modes:
    - matches: filter stored matches by exact metadata equality, best-first
    - scripted: return a fixed list per filter (keyed by sorted filter items)
    """

    provider_name = "fake_index"

    def __init__(self, matches=None, scripted=None, fail: bool = False):
        self.matches: list[VectorMatch] = list(matches or [])
        self.scripted = scripted
        self.fail = fail
        self.query_calls: list[dict] = []
        self.upserts: list[tuple[str, list[VectorRecord]]] = []
        self.deletes: list[tuple[str, dict]] = []

    async def upsert(self, namespace, records):
        self.upserts.append((namespace, list(records)))

    async def query(self, namespace, vector, top_k, filter=None, include_metadata=True):
        self.query_calls.append(
            {"namespace": namespace, "vector": vector, "top_k": top_k, "filter": filter}
        )
        if self.fail:
            raise ProviderUnavailable("vector_index", "index unreachable")
        if self.scripted is not None:
            return list(self.scripted.get(tuple(sorted((filter or {}).items())), []))[:top_k]

        hits = [
            m for m in self.matches
            if all(m.metadata.get(k) == v for k, v in (filter or {}).items())
        ]
        hits.sort(key=lambda m: m.score, reverse=True)
        return hits[:top_k]

    async def delete_many(self, namespace, filter):
        self.deletes.append((namespace, filter))

    async def describe_stats(self, namespace):
        return {"namespace": namespace, "vector_count": len(self.matches)}


class FakeLLM(LLMProvider):
    provider_name = "fake_llm"

    def __init__(self, text: str = "A plain answer.", fail: bool = False):
        self.text = text
        self.fail = fail
        self.calls: list[dict] = []

    async def chat(self, messages, max_output_tokens, temperature):
        self.calls.append(
            {
                "messages": messages,
                "max_output_tokens": max_output_tokens,
                "temperature": temperature,
            }
        )
        if self.fail:
            raise ProviderUnavailable("generation", "rate limited")
        return LLMResponse(
            text=self.text,
            usage=TokenUsage(prompt_tokens=10, completion_tokens=5, total_tokens=15),
        )


class FakeModeration(ModerationProvider):
    provider_name = "fake_moderation"

    def __init__(self, flagged: bool = False, fail: bool = False):
        self.flagged = flagged
        self.fail = fail
        self.calls: list[str] = []

    async def moderate(self, text):
        self.calls.append(text)
        if self.fail:
            raise RuntimeError("moderation endpoint timed out")
        return ModerationResult(
            flagged=self.flagged,
            categories=["harassment"] if self.flagged else [],
        )


def make_match(id, score, topic_id="t1", course_id="c1", text=None):
    return VectorMatch(
        id=id,
        score=score,
        metadata={
            "text": text or f"Curriculum text for {id}",
            "topicId": topic_id,
            "courseId": course_id,
        },
    )


@pytest.fixture
def embedder():
    return FakeEmbedder()


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def moderator():
    return FakeModeration()


@pytest.fixture
def generator(llm):
    return ResponseGenerator(llm, default_max_tokens=1024, default_temperature=0.7)


@pytest.fixture
def moderation(moderator):
    return ModerationGate(moderator)


@pytest.fixture
def index():
    return FakeVectorIndex(
        matches=[
            make_match("t1_chunk_0", 0.92, text="Photosynthesis converts **light energy** into chemical energy."),
            make_match("t1_chunk_1", 0.81, text="**Chlorophyll** absorbs red and blue light."),
            make_match("t2_chunk_0", 0.78, topic_id="t2"),
            make_match("t1_chunk_2", 0.40),
        ]
    )


@pytest.fixture
def retriever(embedder, index):
    return Retriever(embedder, index, namespace="curriculum", top_k=5, min_relevance_score=0.7)
