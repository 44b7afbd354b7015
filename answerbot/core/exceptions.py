"""
Exceptions - Error taxonomy for the answer bot.

Every failure inside the pipeline surfaces as an AppException subclass so
the orchestrator can catch it once, post the apology comment and mark the
run failed.

Categories:
- ConfigurationError: required settings missing (fatal, before any call)
- UnsupportedEventError: trigger kind the bot does not answer
- CorpusError: embeddings file unreadable or malformed
- EmbeddingError / CompletionError: OpenAI call failed
- GitHubAPIError: REST or GraphQL call failed
"""

from typing import Optional


class AppException(Exception):
    """Base exception for application errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[dict] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(AppException):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str, missing: Optional[list] = None):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details={"missing": missing} if missing else {}
        )


class UnsupportedEventError(AppException):
    """Raised when the triggering event is not one the bot answers."""

    def __init__(self, event_name: str):
        super().__init__(
            message=f"Unsupported event name: {event_name}",
            error_code="UNSUPPORTED_EVENT",
            details={"event_name": event_name}
        )


class CorpusError(AppException):
    """Raised when the embeddings corpus cannot be loaded."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(
            message=message,
            error_code="CORPUS_ERROR",
            details={"path": path} if path else {}
        )


class EmbeddingError(AppException):
    """Raised when generating an embedding fails."""

    def __init__(self, message: str):
        super().__init__(message=message, error_code="EMBEDDING_ERROR")


class CompletionError(AppException):
    """Raised when the completion request fails or returns nothing."""

    def __init__(self, message: str):
        super().__init__(message=message, error_code="COMPLETION_ERROR")


class GitHubAPIError(AppException):
    """Raised when a GitHub REST or GraphQL call fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(
            message=message,
            error_code="GITHUB_API_ERROR",
            details={"status_code": status_code} if status_code else {}
        )
        self.status_code = status_code
