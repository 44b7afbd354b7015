"""
Core Domain Schemas - Shared data models used across the application.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DocumentEmbedding(BaseModel):
    """One documentation entry of the precomputed corpus."""
    model_config = ConfigDict(frozen=True)

    package: str
    content: str
    embedding: List[float]


class ScoredCandidate(BaseModel):
    """A corpus entry paired with its similarity to the question."""
    model_config = ConfigDict(frozen=True)

    document: DocumentEmbedding
    score: float

    @property
    def package(self) -> str:
        return self.document.package


class ConversationTurn(BaseModel):
    """A prior comment in the issue or discussion thread."""
    author_login: str
    body: str = ""


class ProjectProfile(BaseModel):
    """Wording that names the documented project in the prompt."""
    model_config = ConfigDict(frozen=True)

    name: str = "stdlib-js / @stdlib"
    language: str = "JavaScript"
    platforms: str = "JavaScript and Node.js"
    short_name: str = "stdlib"


class CompletionOptions(BaseModel):
    """Sampling options for the completion request."""
    max_tokens: int = Field(default=1500, gt=0)
    temperature: float = Field(default=0.5, ge=0.0, le=2.0)
    top_p: float = Field(default=1.0, ge=0.0, le=1.0)


class AnswerResult(BaseModel):
    """Outcome of a single run."""
    success: bool
    answer: Optional[str] = None
    destination: Optional[str] = None
    error: Optional[str] = None
    execution_log: List[str] = Field(default_factory=list)
