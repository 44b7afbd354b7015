"""
Orchestrator - Coordinates one run of the answer pipeline.

COMPLETE FLOW:
==============
1. Trigger event (issue, issue comment, discussion, discussion comment)
        │
        ▼
2. SEARCH TOOL
   - Embeds the question
   - Ranks the documentation corpus
        │
        ▼
3. HISTORY TOOL (comment events only)
   - Loads earlier thread comments
        │
        ▼
4. ANSWER GENERATOR AGENT
   - Assembles the prompt, requests a completion, appends the disclaimer
        │
        ▼
5. Post the answer to the thread

Every step waits on the previous one. Any failure ends the run: the
orchestrator posts a fixed apology to the same thread (when the thread is
known), logs the original error and reports the run as failed. A thread
never gets both an answer and an apology.
"""

import logging
from typing import Any, Dict, Optional

from answerbot.agents.answer_generator import AnswerGeneratorAgent
from answerbot.agents.base import AgentContext
from answerbot.agents.tools.history import ConversationHistoryTool
from answerbot.agents.tools.search import DocumentSearchTool
from answerbot.core.exceptions import AppException, UnsupportedEventError
from answerbot.models.events import Destination, parse_event
from answerbot.models.schemas import AnswerResult
from answerbot.services.corpus import CorpusStore
from answerbot.services.embedding_service import EmbeddingService
from answerbot.services.github_service import GitHubService

logger = logging.getLogger(__name__)

APOLOGY_MESSAGE = "Sorry, I was not able to answer your question."


class Orchestrator:
    """
    Runs the pipeline for a single triggering event.

    Usage:
        orchestrator = Orchestrator(embedding_service, corpus, github, answer_generator)
        result = await orchestrator.answer("issue_comment", payload, "owner/repo")
    """

    def __init__(
        self,
        embedding_service: EmbeddingService,
        corpus: CorpusStore,
        github: GitHubService,
        answer_generator: AnswerGeneratorAgent
    ):
        """
        Initialize the orchestrator with all dependencies.

        Args:
            embedding_service: Service for the question embedding
            corpus: Documentation corpus to rank
            github: GitHub client for history and posting
            answer_generator: Agent producing the final answer
        """
        self.github = github
        self.search = DocumentSearchTool(embedding_service=embedding_service, corpus=corpus)
        self.history = ConversationHistoryTool(github=github)
        self.answer_generator = answer_generator

    async def answer(
        self,
        event_name: str,
        payload: Dict[str, Any],
        repository: Optional[str] = None
    ) -> AnswerResult:
        """
        Answer the question carried by a webhook event.

        Args:
            event_name: GITHUB_EVENT_NAME
            payload: Webhook payload
            repository: GITHUB_REPOSITORY ("owner/repo")

        Returns:
            AnswerResult; success is False when any step failed
        """
        destination: Optional[Destination] = None
        context: Optional[AgentContext] = None

        try:
            event = parse_event(event_name, payload, repository)
            destination = event.destination
            logger.debug(f"Triggered by {event.event_name}, replying to {destination.describe()}")

            context = AgentContext(event=event)
            await self.search.execute(context)
            if event.has_history:
                await self.history.execute(context)
            await self.answer_generator.run(context)

            await self.github.post_comment(destination, context.final_answer)
            logger.info(f"Successfully created comment on {destination.describe()}")
            context.log("Orchestrator: Answer posted")

            return AnswerResult(
                success=True,
                answer=context.final_answer,
                destination=destination.describe(),
                execution_log=context.execution_log
            )

        except UnsupportedEventError as exc:
            logger.error(exc.message)
            return self._build_error_response(exc, None, context)

        except Exception as exc:
            logger.error(f"Failed to answer question: {exc}", exc_info=True)
            if destination is not None:
                await self._post_apology(destination)
            return self._build_error_response(exc, destination, context)

    async def _post_apology(self, destination: Destination) -> None:
        """Best effort; a failure here must not hide the original error."""
        try:
            await self.github.post_comment(destination, APOLOGY_MESSAGE)
            logger.info(f"Posted apology comment on {destination.describe()}")
        except AppException as exc:
            logger.error(f"Could not post apology comment: {exc.message}")

    def _build_error_response(
        self,
        exc: Exception,
        destination: Optional[Destination],
        context: Optional[AgentContext]
    ) -> AnswerResult:
        message = exc.message if isinstance(exc, AppException) else str(exc) or type(exc).__name__
        return AnswerResult(
            success=False,
            error=message,
            destination=destination.describe() if destination else None,
            execution_log=context.execution_log if context else []
        )
