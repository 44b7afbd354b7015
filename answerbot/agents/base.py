"""
Base classes for the answer pipeline.

Tools fetch or compute data (search the corpus, load thread history);
agents turn that data into text (the answer). Both read from and write to
a shared AgentContext that the orchestrator threads through the run.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from answerbot.models.events import TriggerEvent
from answerbot.models.schemas import ScoredCandidate


class ToolType(Enum):
    """Types of tools available to the orchestrator."""
    SEARCH = "search"
    HISTORY = "history"


@dataclass
class AgentContext:
    """
    Shared context passed through one run.

    Accumulates data as it flows through the pipeline:
    Event -> Search -> History -> Prompt -> Answer
    """
    # Input
    event: TriggerEvent

    # Accumulated results
    search_results: List[ScoredCandidate] = field(default_factory=list)
    history: str = ""
    prompt: Optional[str] = None
    raw_answer: Optional[str] = None
    final_answer: Optional[str] = None

    # Metadata
    execution_log: List[str] = field(default_factory=list)

    @property
    def question(self) -> str:
        return self.event.question

    def log(self, message: str) -> None:
        """Add entry to execution log."""
        self.execution_log.append(message)


class BaseTool(ABC):
    """
    Base class for all tools.

    Tools raise AppException subclasses on failure; the orchestrator
    decides what happens next.
    """

    name: str = "base_tool"
    description: str = "Base tool description"

    @abstractmethod
    async def execute(self, context: AgentContext) -> Any:
        """
        Execute the tool's action and store its result on the context.

        Args:
            context: Shared agent context

        Returns:
            The tool's result (also stored on the context)
        """


class BaseAgent(ABC):
    """Base class for agents that produce text from the accumulated context."""

    @abstractmethod
    async def run(self, context: AgentContext) -> AgentContext:
        """
        Execute the agent's logic.

        Args:
            context: Shared agent context with accumulated data

        Returns:
            Updated context with agent's output
        """
