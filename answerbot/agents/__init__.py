"""
Answer Pipeline
===============

FLOW OVERVIEW:
--------------
1. A question arrives as an issue, discussion, or comment on either
2. DocumentSearchTool embeds it and ranks the documentation corpus
3. ConversationHistoryTool loads earlier comments (comment events only)
4. AnswerGeneratorAgent assembles the prompt, gets a completion and
   appends the disclaimer
5. Orchestrator posts the answer, or an apology if anything failed

USAGE:
------
    from answerbot.core.dependencies import build_orchestrator

    orchestrator = build_orchestrator(settings)
    result = await orchestrator.answer("issue_comment", payload, "owner/repo")
"""

from answerbot.agents.answer_generator import AnswerGeneratorAgent
from answerbot.agents.base import AgentContext, BaseAgent, BaseTool
from answerbot.agents.orchestrator import Orchestrator
from answerbot.agents.tools import ConversationHistoryTool, DocumentSearchTool

__all__ = [
    # Base classes
    "AgentContext",
    "BaseAgent",
    "BaseTool",
    # Agents
    "AnswerGeneratorAgent",
    "Orchestrator",
    # Tools
    "ConversationHistoryTool",
    "DocumentSearchTool",
]
