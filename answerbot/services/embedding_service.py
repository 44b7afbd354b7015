"""
Embedding Service - Vector embeddings from the OpenAI embeddings API.

RESPONSIBILITY:
Converts question text (and, in the offline corpus builder, documentation
pages) into the same embedding space as the precomputed corpus.

The model must match the one the corpus was built with
(text-embedding-ada-002 by default), otherwise vector lengths differ and
ranking fails fast.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from openai import AsyncOpenAI, OpenAIError

from answerbot.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


@dataclass
class EmbeddingConfig:
    """Configuration for embedding service."""
    api_key: str = ""
    model: str = "text-embedding-ada-002"
    batch_size: int = 100


class OpenAIEmbeddingProvider:
    """
    Embedding provider backed by the OpenAI embeddings endpoint.

    The client is created lazily so constructing the provider never
    touches the network.
    """

    def __init__(self, api_key: str, model_name: str, client: Optional[Any] = None):
        """
        Initialize the provider.

        Args:
            api_key: OpenAI API key
            model_name: Embedding model name
            client: Preconfigured AsyncOpenAI-compatible client
        """
        self.model_name = model_name
        self._api_key = api_key
        self._client = client
        logger.debug(f"Initialized OpenAIEmbeddingProvider with model: {model_name}")

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key, max_retries=0)
        return self._client

    async def embed_text(self, text: str) -> List[float]:
        """
        Generate embedding for a single text.

        Args:
            text: Text to embed

        Returns:
            Vector embedding as list of floats
        """
        result = await self.client.embeddings.create(input=text, model=self.model_name)
        return list(result.data[0].embedding)

    async def embed_batch(self, texts: List[str]) -> List[List[float]]:
        """
        Generate embeddings for multiple texts in one request.

        Args:
            texts: List of texts to embed

        Returns:
            List of vector embeddings, in input order
        """
        result = await self.client.embeddings.create(input=texts, model=self.model_name)
        ordered = sorted(result.data, key=lambda item: item.index)
        return [list(item.embedding) for item in ordered]


class EmbeddingService:
    """
    Main embedding service.

    Usage:
        service = EmbeddingService(EmbeddingConfig(api_key="sk-..."))

        # Single embedding
        embedding = await service.embed("How do I compute a mean?")

        # Batch embeddings
        embeddings = await service.embed_many(["readme 1", "readme 2"])
    """

    def __init__(
        self,
        config: Optional[EmbeddingConfig] = None,
        provider: Optional[OpenAIEmbeddingProvider] = None
    ):
        """
        Initialize embedding service.

        Args:
            config: Embedding configuration
            provider: Provider override (tests inject fakes here)
        """
        self.config = config or EmbeddingConfig()
        self._provider = provider or OpenAIEmbeddingProvider(
            api_key=self.config.api_key,
            model_name=self.config.model
        )

    async def embed(self, text: str) -> List[float]:
        """
        Generate embedding for text.

        Raises:
            EmbeddingError: if the API call fails or returns no vector
        """
        try:
            embedding = await self._provider.embed_text(text)
        except OpenAIError as exc:
            raise EmbeddingError(f"Embedding request failed: {exc}") from exc

        if not embedding:
            raise EmbeddingError("Embedding request returned an empty vector")
        return embedding

    async def embed_many(self, texts: List[str]) -> List[List[float]]:
        """
        Generate embeddings for multiple texts with batching.

        Raises:
            EmbeddingError: if any batch fails
        """
        results: List[List[float]] = []
        for batch_start in range(0, len(texts), self.config.batch_size):
            batch = texts[batch_start:batch_start + self.config.batch_size]
            try:
                results.extend(await self._provider.embed_batch(batch))
            except OpenAIError as exc:
                raise EmbeddingError(f"Batch embedding request failed: {exc}") from exc
        return results
