"""
Answer Generator Agent - Produces the reply that gets posted.

FLOW:
1. Assemble the prompt from question, ranked docs and history
2. Request a completion
3. Append the disclaimer
"""

import logging
from typing import Optional

from answerbot.agents.base import AgentContext, BaseAgent
from answerbot.agents.prompt_builder import (
    DEFAULT_ASK_COMMAND,
    DEFAULT_PROJECT,
    assemble,
    finalize,
)
from answerbot.models.schemas import CompletionOptions, ProjectProfile
from answerbot.services.completion_service import CompletionService

logger = logging.getLogger(__name__)


class AnswerGeneratorAgent(BaseAgent):
    """Turns the accumulated context into the final comment body."""

    def __init__(
        self,
        completion_service: CompletionService,
        options: Optional[CompletionOptions] = None,
        project: ProjectProfile = DEFAULT_PROJECT,
        ask_command: str = DEFAULT_ASK_COMMAND
    ):
        self.completion_service = completion_service
        self.options = options or CompletionOptions()
        self.project = project
        self.ask_command = ask_command

    async def run(self, context: AgentContext) -> AgentContext:
        context.prompt = assemble(
            context.question,
            context.search_results,
            context.history,
            project=self.project
        )
        logger.debug(f"Assembled prompt: {context.prompt}")

        context.log("AnswerGenerator: Requesting completion...")
        context.raw_answer = await self.completion_service.complete(context.prompt, self.options)

        context.final_answer = finalize(context.raw_answer, ask_command=self.ask_command)
        context.log("AnswerGenerator: Answer generated successfully")
        return context
