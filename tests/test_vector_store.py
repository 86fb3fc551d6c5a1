# /tests/test_vector_store.py

import uuid
from unittest.mock import MagicMock

import chromadb
import pytest

from curriculum_tutor.core.exceptions import ProviderUnavailable
from curriculum_tutor.models.chunk import VectorRecord
from curriculum_tutor.services.rag.vector_store import (
    ChromaVectorIndex,
    VectorStoreManager,
    build_where,
)
from tests.conftest import FakeVectorIndex, make_match

@pytest.fixture
def namespace():
    return f"test_{uuid.uuid4().hex[:12]}"


@pytest.fixture
def chroma_index():
    return ChromaVectorIndex(client=chromadb.EphemeralClient())


def _record(id, values, topic_id, course_id="c1"):
    return VectorRecord(
        id=id,
        values=values,
        metadata={"text": f"text of {id}", "topicId": topic_id, "courseId": course_id},
    )


def test_build_where():
    assert build_where(None) is None
    assert build_where({}) is None
    assert build_where({"topicId": "t1"}) == {"topicId": {"$eq": "t1"}}
    assert build_where({"topicId": "t1", "courseId": "c1"}) == {
        "$and": [{"topicId": {"$eq": "t1"}}, {"courseId": {"$eq": "c1"}}]
    }


@pytest.mark.asyncio
async def test_chroma_query_scores_and_filters(chroma_index, namespace):
    await chroma_index.upsert(
        namespace,
        [
            _record("same", [1.0, 0.0, 0.0], "t1"),
            _record("orthogonal", [0.0, 1.0, 0.0], "t1"),
            _record("other_topic", [1.0, 0.0, 0.0], "t2"),
        ],
    )

    matches = await chroma_index.query(namespace, [1.0, 0.0, 0.0], top_k=5, filter={"topicId": "t1"})

    assert [m.id for m in matches] == ["same", "orthogonal"]
    assert matches[0].score == pytest.approx(1.0, abs=1e-4)
    assert matches[1].score == pytest.approx(0.0, abs=1e-4)
    assert matches[0].metadata["text"] == "text of same"


@pytest.mark.asyncio
async def test_chroma_delete_and_stats(chroma_index, namespace):
    await chroma_index.upsert(
        namespace,
        [
            _record("a", [1.0, 0.0, 0.0], "t1"),
            _record("b", [0.0, 1.0, 0.0], "t2"),
        ],
    )
    assert (await chroma_index.describe_stats(namespace))["vector_count"] == 2

    await chroma_index.delete_many(namespace, {"topicId": "t1"})

    assert (await chroma_index.describe_stats(namespace))["vector_count"] == 1


@pytest.mark.asyncio
async def test_chroma_delete_requires_filter(chroma_index, namespace):
    with pytest.raises(ValueError):
        await chroma_index.delete_many(namespace, {})


@pytest.mark.asyncio
async def test_chroma_query_result_mapping_with_client_double():
    collection = MagicMock()
    collection.query.return_value = {
        "ids": [["x", "y"]],
        "distances": [[0.1, 0.4]],
        "metadatas": [[{"topicId": "t1"}, None]],
    }
    client = MagicMock()
    client.get_or_create_collection.return_value = collection
    index = ChromaVectorIndex(client=client)

    matches = await index.query("curriculum", [0.1, 0.2], top_k=2, filter={"courseId": "c1"})

    assert [(m.id, round(m.score, 2)) for m in matches] == [("x", 0.9), ("y", 0.6)]
    assert matches[1].metadata == {}
    assert collection.query.call_args.kwargs["where"] == {"courseId": {"$eq": "c1"}}
    assert collection.query.call_args.kwargs["n_results"] == 2


@pytest.mark.asyncio
async def test_manager_deletes_by_topic_and_course():
    index = FakeVectorIndex()
    manager = VectorStoreManager(index, "curriculum")

    await manager.delete_topic_vectors("t1")
    await manager.delete_course_vectors("c1")

    assert index.deletes == [("curriculum", {"topicId": "t1"}), ("curriculum", {"courseId": "c1"})]


@pytest.mark.asyncio
async def test_manager_has_vectors_probes_with_zero_vector():
    index = FakeVectorIndex(matches=[make_match("m", 0.0, topic_id="t1")])
    manager = VectorStoreManager(index, "curriculum", dimension=4)

    assert await manager.has_vectors("t1") is True
    assert await manager.has_vectors("t404") is False
    assert index.query_calls[0]["vector"] == [0.0, 0.0, 0.0, 0.0]
    assert index.query_calls[0]["top_k"] == 1


@pytest.mark.asyncio
async def test_manager_stats():
    manager = VectorStoreManager(FakeVectorIndex(matches=[make_match("m", 0.9)]), "curriculum")

    assert await manager.get_stats() == {"namespace": "curriculum", "vector_count": 1}


# --- Failure mapping ---

@pytest.mark.asyncio
async def test_chroma_dimension_mismatch_is_provider_unavailable(chroma_index, namespace):
    await chroma_index.upsert(namespace, [_record("a", [1.0, 0.0, 0.0], "t1")])

    with pytest.raises(ProviderUnavailable) as exc_info:
        await chroma_index.query(namespace, [1.0, 0.0], top_k=1)

    assert exc_info.value.provider == "vector_index"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, call",
    [
        ("upsert", lambda index: index.upsert("curriculum", [_record("a", [1.0], "t1")])),
        ("query", lambda index: index.query("curriculum", [1.0], top_k=1)),
        ("delete", lambda index: index.delete_many("curriculum", {"topicId": "t1"})),
        ("count", lambda index: index.describe_stats("curriculum")),
    ],
)
async def test_chroma_client_errors_are_wrapped(method, call):
    collection = MagicMock()
    getattr(collection, method).side_effect = ValueError("collection is broken")
    client = MagicMock()
    client.get_or_create_collection.return_value = collection

    with pytest.raises(ProviderUnavailable) as exc_info:
        await call(ChromaVectorIndex(client=client))

    assert exc_info.value.provider == "vector_index"
    assert isinstance(exc_info.value.__cause__, ValueError)
