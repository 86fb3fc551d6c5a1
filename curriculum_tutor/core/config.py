from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # OpenAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"  # Cost-effective default, gpt-4o for production
    embedding_model: str = "text-embedding-3-small"
    moderation_model: str = "omni-moderation-latest"

    # Generation defaults
    default_max_tokens: int = 1024
    default_temperature: float = 0.7

    # Vector store
    chroma_persist_dir: str = "chroma_data"
    vector_namespace: str = "curriculum"
    embedding_dimension: int = 1536  # text-embedding-3-small
    upsert_batch_size: int = 100

    # Chunking
    chunk_size: int = 1000
    chunk_overlap: int = 200
    sentences_per_chunk: int = 5

    # Retrieval
    top_k_results: int = 5
    min_relevance_score: float = 0.7
    assessment_soft_top_k: int = 2
    content_top_k: int = 5

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()
