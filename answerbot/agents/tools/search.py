"""
Search Tool - Semantic search over the documentation corpus.

FLOW:
1. Embed the question
2. Rank the corpus against the embedding
3. Store the top candidates on the context
"""

import logging
from typing import List

from answerbot.agents.base import AgentContext, BaseTool, ToolType
from answerbot.models.schemas import ScoredCandidate
from answerbot.services.corpus import CorpusStore
from answerbot.services.embedding_service import EmbeddingService

logger = logging.getLogger(__name__)


class DocumentSearchTool(BaseTool):
    """Finds the documentation entries most relevant to the question."""

    name = ToolType.SEARCH.value
    description = "Finds relevant documentation using semantic similarity"

    def __init__(self, embedding_service: EmbeddingService, corpus: CorpusStore):
        """
        Initialize the search tool.

        Args:
            embedding_service: Service to generate the question embedding
            corpus: Loaded documentation corpus
        """
        self.embedding_service = embedding_service
        self.corpus = corpus

    async def execute(self, context: AgentContext) -> List[ScoredCandidate]:
        context.log(f"Search: Embedding question '{context.question[:50]}...'")
        embedding = await self.embedding_service.embed(context.question)

        results = self.corpus.search(embedding)
        context.search_results = results

        summary = ", ".join(f"{c.package} ({c.score:.3f})" for c in results) or "none"
        context.log(f"Search: {len(results)} relevant packages: {summary}")
        logger.info(f"Most similar packages: {summary}")
        return results
