"""
Tools for the answer pipeline.

- DocumentSearchTool: Rank documentation against the question
- ConversationHistoryTool: Load earlier thread comments
"""

from answerbot.agents.tools.history import ConversationHistoryTool
from answerbot.agents.tools.search import DocumentSearchTool

__all__ = [
    "ConversationHistoryTool",
    "DocumentSearchTool",
]
