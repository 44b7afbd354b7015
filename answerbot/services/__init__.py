"""
Services Layer for the Answer Bot
=================================

- text_sanitizer: README markdown to prompt-safe text
- similarity: Dot-product ranking of corpus entries
- CorpusStore: The precomputed documentation embeddings
- EmbeddingService / CompletionService: OpenAI clients
- GitHubService: Issue and discussion comments
- corpus_builder: Offline job that rebuilds the corpus

DEPENDENCY FLOW:
----------------
    EmbeddingService ──┐
                       ├──► Search Tool
    CorpusStore ───────┘
    GitHubService ─────────► History Tool, Orchestrator
    CompletionService ─────► Answer Generator
"""

from answerbot.services.completion_service import CompletionService
from answerbot.services.corpus import CorpusStore
from answerbot.services.embedding_service import EmbeddingService
from answerbot.services.github_service import GitHubService

__all__ = [
    "CompletionService",
    "CorpusStore",
    "EmbeddingService",
    "GitHubService",
]
