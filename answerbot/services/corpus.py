"""
Corpus Store - Read-only access to the precomputed documentation embeddings.

RESPONSIBILITY:
Loads embeddings.json once per run and answers similarity queries against
it. The file is produced offline by the corpus builder; this side only
reads it.

FILE FORMAT:
    [{"package": "...", "content": "...", "embedding": [0.1, ...]}, ...]
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from pydantic import TypeAdapter, ValidationError

from answerbot.core.exceptions import CorpusError
from answerbot.models.schemas import DocumentEmbedding, ScoredCandidate
from answerbot.services.similarity import DEFAULT_THRESHOLD, DEFAULT_TOP_N, rank

logger = logging.getLogger(__name__)

_CORPUS_ADAPTER = TypeAdapter(List[DocumentEmbedding])


@dataclass
class CorpusConfig:
    """Configuration for the corpus store."""
    path: str = "embeddings.json"
    top_n: int = DEFAULT_TOP_N
    threshold: float = DEFAULT_THRESHOLD


def parse_corpus(data: object) -> Tuple[DocumentEmbedding, ...]:
    """Validate decoded JSON against the corpus schema."""
    return tuple(_CORPUS_ADAPTER.validate_python(data))


def load_corpus(path: str) -> Tuple[DocumentEmbedding, ...]:
    """
    Read and validate a corpus file.

    Args:
        path: Path to the embeddings JSON file

    Returns:
        Immutable sequence of documentation embeddings

    Raises:
        CorpusError: if the file is missing, not JSON, or off-schema
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CorpusError(f"Cannot read corpus file: {exc}", path=path) from exc

    try:
        return parse_corpus(json.loads(raw))
    except json.JSONDecodeError as exc:
        raise CorpusError(f"Corpus file is not valid JSON: {exc}", path=path) from exc
    except ValidationError as exc:
        raise CorpusError(
            f"Corpus file does not match the expected schema: {exc.error_count()} error(s)",
            path=path
        ) from exc


class CorpusStore:
    """
    Holds the corpus for the duration of a run.

    Usage:
        store = CorpusStore(CorpusConfig(path="embeddings.json"))
        results = store.search(question_embedding)
    """

    def __init__(
        self,
        config: Optional[CorpusConfig] = None,
        documents: Optional[Sequence[DocumentEmbedding]] = None
    ):
        """
        Initialize the store.

        Args:
            config: Corpus configuration
            documents: Preloaded documents; the file is not read when given
        """
        self.config = config or CorpusConfig()
        self._documents: Optional[Tuple[DocumentEmbedding, ...]] = (
            tuple(documents) if documents is not None else None
        )

    @property
    def documents(self) -> Tuple[DocumentEmbedding, ...]:
        """Lazy load the corpus on first use."""
        if self._documents is None:
            logger.info(f"Loading corpus from {self.config.path}")
            self._documents = load_corpus(self.config.path)
            logger.info(f"Loaded {len(self._documents)} documentation embeddings")
        return self._documents

    def search(
        self,
        embedding: Sequence[float],
        top_n: Optional[int] = None,
        threshold: Optional[float] = None
    ) -> List[ScoredCandidate]:
        """
        Rank the corpus against a query embedding.

        Args:
            embedding: Query embedding
            top_n: Result limit (defaults to config)
            threshold: Minimum score, exclusive (defaults to config)
        """
        return rank(
            embedding,
            self.documents,
            top_n=self.config.top_n if top_n is None else top_n,
            threshold=self.config.threshold if threshold is None else threshold
        )
