"""
Action Entry Point - Runs the bot once for the triggering event.

The GitHub Actions runner provides:
    GITHUB_EVENT_NAME   issues | issue_comment | discussion | discussion_comment
    GITHUB_EVENT_PATH   path to the webhook payload JSON
    GITHUB_REPOSITORY   owner/repo
    INPUT_OPENAI_API_KEY, INPUT_GITHUB_TOKEN   action inputs

Usage:
    python -m answerbot
"""

import asyncio
import logging
import os
import sys
from typing import Any, Dict, Mapping, Optional

from answerbot.core.config import Settings, get_settings
from answerbot.core.dependencies import build_orchestrator
from answerbot.core.exceptions import ConfigurationError
from answerbot.models.events import load_payload
from answerbot.models.schemas import AnswerResult

logger = logging.getLogger("answerbot")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # Request lines from the HTTP clients carry no extra information here
    logging.getLogger("httpx").setLevel(logging.WARNING)


def workflow_error(message: str) -> None:
    """Emit an ::error:: workflow command so the runner annotates the run."""
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    print(f"::error::{escaped}", flush=True)


async def run(settings: Settings, environ: Mapping[str, str], payload: Dict[str, Any]) -> AnswerResult:
    """Answer the event described by the runner environment."""
    event_name = environ.get("GITHUB_EVENT_NAME", "")

    orchestrator = build_orchestrator(settings)
    async with orchestrator.github:
        return await orchestrator.answer(event_name, payload, environ.get("GITHUB_REPOSITORY"))


def main(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Process entry point.

    Returns:
        0 when an answer was posted, 1 otherwise
    """
    environ = os.environ if environ is None else environ
    configure_logging(environ.get("LOG_LEVEL", "INFO"))

    try:
        settings = get_settings()
    except ConfigurationError as exc:
        logger.error(exc.message)
        workflow_error(exc.message)
        return 1

    logging.getLogger().setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    try:
        payload = load_payload(environ.get("GITHUB_EVENT_PATH"))
    except (OSError, ValueError) as exc:
        # Unreadable event payload: there is no thread to reply to
        logger.error(f"Cannot read event payload: {exc}")
        workflow_error(str(exc))
        return 1

    result = asyncio.run(run(settings, environ, payload))

    if not result.success:
        workflow_error(result.error or "Failed to answer question")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
