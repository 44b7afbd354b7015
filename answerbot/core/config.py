"""
Application Configuration - Environment settings and constants.

Loads configuration from environment variables (and an optional .env file).
Uses Pydantic Settings for validation and type safety.

GitHub Actions passes action inputs as INPUT_<NAME> variables, so the two
secrets are accepted under both their plain and INPUT_ names.
"""

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from answerbot.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Usage:
        from answerbot.core.config import get_settings
        settings = get_settings()
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Required secrets
    openai_api_key: str = Field(
        validation_alias=AliasChoices("INPUT_OPENAI_API_KEY", "OPENAI_API_KEY")
    )
    github_token: str = Field(
        validation_alias=AliasChoices("INPUT_GITHUB_TOKEN", "GITHUB_TOKEN")
    )

    # Application
    app_name: str = "Documentation Answer Bot"
    log_level: str = "INFO"

    # Corpus
    embeddings_path: str = "embeddings.json"

    # Retrieval
    top_n: int = 3
    similarity_threshold: float = 0.6

    # OpenAI models
    embedding_model: str = "text-embedding-ada-002"
    completion_model: str = "gpt-3.5-turbo-instruct"
    max_tokens: int = 1500
    temperature: float = 0.5
    top_p: float = 1.0

    # GitHub endpoints
    github_api_url: str = "https://api.github.com"
    github_graphql_url: str = "https://api.github.com/graphql"

    # Prompt wording
    project_name: str = "stdlib-js / @stdlib"
    project_language: str = "JavaScript"
    project_platforms: str = "JavaScript and Node.js"
    project_short_name: str = "stdlib"
    ask_command: str = "/ask"

    @field_validator("openai_api_key", "github_token")
    @classmethod
    def require_non_empty(cls, v: str) -> str:
        """Reject blank secrets (unset action inputs arrive as empty strings)."""
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


def get_settings(**overrides) -> Settings:
    """
    Build the settings for this run.

    Not cached: one run builds one Settings object and passes it down.

    Raises:
        ConfigurationError: if a required value is missing or invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        missing = [".".join(str(p) for p in err["loc"]) for err in exc.errors()]
        raise ConfigurationError(
            f"Invalid or missing configuration: {', '.join(missing)}",
            missing=missing
        ) from exc
