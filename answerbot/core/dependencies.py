"""
Dependencies - Builds the services for one run from explicit settings.

Nothing here is a module-level singleton: every service receives its
configuration through its constructor, so tests can build isolated
instances without touching process state.
"""

from typing import Optional

import httpx

from answerbot.agents.answer_generator import AnswerGeneratorAgent
from answerbot.agents.orchestrator import Orchestrator
from answerbot.core.config import Settings
from answerbot.models.schemas import CompletionOptions, ProjectProfile
from answerbot.services.completion_service import CompletionConfig, CompletionService
from answerbot.services.corpus import CorpusConfig, CorpusStore
from answerbot.services.embedding_service import EmbeddingConfig, EmbeddingService
from answerbot.services.github_service import GitHubConfig, GitHubService


def get_embedding_service(settings: Settings) -> EmbeddingService:
    return EmbeddingService(EmbeddingConfig(
        api_key=settings.openai_api_key,
        model=settings.embedding_model
    ))


def get_completion_service(settings: Settings) -> CompletionService:
    return CompletionService(CompletionConfig(
        api_key=settings.openai_api_key,
        model=settings.completion_model
    ))


def get_corpus_store(settings: Settings) -> CorpusStore:
    return CorpusStore(CorpusConfig(
        path=settings.embeddings_path,
        top_n=settings.top_n,
        threshold=settings.similarity_threshold
    ))


def get_github_service(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> GitHubService:
    return GitHubService(
        GitHubConfig(
            token=settings.github_token,
            api_url=settings.github_api_url,
            graphql_url=settings.github_graphql_url
        ),
        transport=transport
    )


def build_orchestrator(
    settings: Settings,
    github: Optional[GitHubService] = None
) -> Orchestrator:
    """
    Wire the full pipeline.

    Args:
        settings: Settings for this run
        github: GitHub service override (defaults to one built from settings)
    """
    answer_generator = AnswerGeneratorAgent(
        completion_service=get_completion_service(settings),
        options=CompletionOptions(
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            top_p=settings.top_p
        ),
        project=ProjectProfile(
            name=settings.project_name,
            language=settings.project_language,
            platforms=settings.project_platforms,
            short_name=settings.project_short_name
        ),
        ask_command=settings.ask_command
    )
    return Orchestrator(
        embedding_service=get_embedding_service(settings),
        corpus=get_corpus_store(settings),
        github=github or get_github_service(settings),
        answer_generator=answer_generator
    )
