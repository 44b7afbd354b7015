"""
Core Module - Configuration, exceptions and dependency wiring.
"""

from answerbot.core.config import Settings, get_settings
from answerbot.core.exceptions import (
    AppException,
    CompletionError,
    ConfigurationError,
    CorpusError,
    EmbeddingError,
    GitHubAPIError,
    UnsupportedEventError,
)

__all__ = [
    "Settings",
    "get_settings",
    "AppException",
    "CompletionError",
    "ConfigurationError",
    "CorpusError",
    "EmbeddingError",
    "GitHubAPIError",
    "UnsupportedEventError",
]
