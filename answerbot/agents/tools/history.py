"""
History Tool - Loads earlier comments of the thread.

Only comment events have a history; for a newly opened issue or
discussion the question is the whole conversation.
"""

import logging

from answerbot.agents.base import AgentContext, BaseTool, ToolType
from answerbot.agents.prompt_builder import compress_history
from answerbot.models.events import DiscussionCommentEvent, IssueCommentEvent
from answerbot.services.github_service import GitHubService

logger = logging.getLogger(__name__)


class ConversationHistoryTool(BaseTool):
    """Fetches and compresses the thread's previous comments."""

    name = ToolType.HISTORY.value
    description = "Loads the conversation history of the triggering thread"

    def __init__(self, github: GitHubService):
        self.github = github

    async def execute(self, context: AgentContext) -> str:
        event = context.event
        if isinstance(event, IssueCommentEvent):
            turns = await self.github.list_issue_comments(event.owner, event.repo, event.issue_number)
        elif isinstance(event, DiscussionCommentEvent):
            turns = await self.github.list_discussion_comments(event.discussion_id)
        else:
            context.log("History: Not a comment event, no history")
            return ""

        context.history = compress_history(turns)
        context.log(f"History: {len(turns)} previous comments")
        logger.info(f"Conversation history: {context.history}")
        return context.history
