"""
Similarity Ranker - Picks the documentation entries closest to a question.

OpenAI embeddings are unit-length, so the dot product is the cosine
similarity; vectors are never re-normalized here.
"""

from typing import List, Sequence

from answerbot.models.schemas import DocumentEmbedding, ScoredCandidate

DEFAULT_TOP_N = 3
DEFAULT_THRESHOLD = 0.6


def dot_product(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Dot product of two equal-length vectors.

    Raises:
        ValueError: if the vectors differ in length
    """
    if len(x) != len(y):
        raise ValueError(
            f"Embedding length mismatch: {len(x)} != {len(y)}"
        )
    return sum(a * b for a, b in zip(x, y))


def rank(
    query: Sequence[float],
    corpus: Sequence[DocumentEmbedding],
    top_n: int = DEFAULT_TOP_N,
    threshold: float = DEFAULT_THRESHOLD
) -> List[ScoredCandidate]:
    """
    Rank corpus entries by similarity to the query embedding.

    Args:
        query: Question embedding
        corpus: Documentation embeddings, in corpus order
        top_n: Maximum number of results
        threshold: Scores must be strictly greater than this

    Returns:
        At most top_n candidates, highest score first. Equal scores keep
        corpus order. Empty when nothing clears the threshold.
    """
    scored = [
        ScoredCandidate(document=doc, score=dot_product(query, doc.embedding))
        for doc in corpus
    ]

    # list.sort is stable, so ties stay in corpus order
    scored.sort(key=lambda c: c.score, reverse=True)

    return [c for c in scored if c.score > threshold][:top_n]
