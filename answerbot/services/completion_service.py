"""
Completion Service - Text completions from the OpenAI completions API.

The prompt is a single instruction-style string ending in "Answer:", so it
goes to the legacy completions endpoint rather than chat completions.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from openai import AsyncOpenAI, OpenAIError

from answerbot.core.exceptions import CompletionError
from answerbot.models.schemas import CompletionOptions

logger = logging.getLogger(__name__)


@dataclass
class CompletionConfig:
    """Configuration for completion service."""
    api_key: str = ""
    model: str = "gpt-3.5-turbo-instruct"


class CompletionService:
    """
    Requests a completion for an assembled prompt.

    Usage:
        service = CompletionService(CompletionConfig(api_key="sk-..."))
        text = await service.complete(prompt, CompletionOptions(max_tokens=1500))
    """

    def __init__(self, config: Optional[CompletionConfig] = None, client: Optional[Any] = None):
        self.config = config or CompletionConfig()
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.config.api_key, max_retries=0)
        return self._client

    async def complete(self, prompt: str, options: Optional[CompletionOptions] = None) -> str:
        """
        Generate a completion for the prompt.

        Args:
            prompt: Assembled prompt
            options: Sampling options

        Returns:
            The raw completion text

        Raises:
            CompletionError: if the request fails or returns no choices
        """
        options = options or CompletionOptions()
        logger.debug(
            f"Requesting completion from {self.config.model} "
            f"(max_tokens={options.max_tokens}, temperature={options.temperature})"
        )

        try:
            result = await self.client.completions.create(
                model=self.config.model,
                prompt=prompt,
                max_tokens=options.max_tokens,
                temperature=options.temperature,
                top_p=options.top_p,
            )
        except OpenAIError as exc:
            raise CompletionError(f"Completion request failed: {exc}") from exc

        if not result.choices:
            raise CompletionError("Completion response contained no choices")
        return result.choices[0].text or ""
