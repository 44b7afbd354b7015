"""
Trigger Events - The four GitHub events the bot answers.

RESPONSIBILITY:
Turns the raw webhook payload of the triggering event into one of a closed
set of event types. Each type knows the question text and the single
destination where the reply (answer or apology) must be posted, so the
answer path and the fallback path never re-derive it.

    issues              -> IssueEvent              -> IssueDestination
    issue_comment       -> IssueCommentEvent       -> IssueDestination
    discussion          -> DiscussionEvent         -> DiscussionDestination
    discussion_comment  -> DiscussionCommentEvent  -> DiscussionDestination
"""

import json
from pathlib import Path
from typing import Any, ClassVar, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from answerbot.core.exceptions import UnsupportedEventError


class IssueDestination(BaseModel):
    """Comments are posted through the REST issues API."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["issue"] = "issue"
    owner: str
    repo: str
    issue_number: int

    def describe(self) -> str:
        return f"{self.owner}/{self.repo}#{self.issue_number}"


class DiscussionDestination(BaseModel):
    """Comments are posted through the GraphQL discussions API."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["discussion"] = "discussion"
    discussion_id: str

    def describe(self) -> str:
        return f"discussion {self.discussion_id}"


Destination = Union[IssueDestination, DiscussionDestination]


class _IssueBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    issue_number: int
    question: str

    @property
    def destination(self) -> IssueDestination:
        return IssueDestination(
            owner=self.owner,
            repo=self.repo,
            issue_number=self.issue_number
        )


class _DiscussionBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    discussion_id: str
    question: str

    @property
    def destination(self) -> DiscussionDestination:
        return DiscussionDestination(discussion_id=self.discussion_id)


class IssueEvent(_IssueBase):
    """A newly opened issue; the issue body is the question."""
    event_name: Literal["issues"] = "issues"
    has_history: ClassVar[bool] = False


class IssueCommentEvent(_IssueBase):
    """A new comment on an issue; earlier comments form the history."""
    event_name: Literal["issue_comment"] = "issue_comment"
    has_history: ClassVar[bool] = True


class DiscussionEvent(_DiscussionBase):
    """A newly opened discussion; the discussion body is the question."""
    event_name: Literal["discussion"] = "discussion"
    has_history: ClassVar[bool] = False


class DiscussionCommentEvent(_DiscussionBase):
    """A new discussion comment; earlier comments form the history."""
    event_name: Literal["discussion_comment"] = "discussion_comment"
    has_history: ClassVar[bool] = True


TriggerEvent = Union[IssueEvent, IssueCommentEvent, DiscussionEvent, DiscussionCommentEvent]

SUPPORTED_EVENTS = ("issues", "issue_comment", "discussion", "discussion_comment")


def _split_repository(payload: Dict[str, Any], repository: Optional[str]) -> tuple:
    """Resolve (owner, repo) from GITHUB_REPOSITORY or the payload."""
    if repository and "/" in repository:
        owner, _, name = repository.partition("/")
        return owner, name

    repo_info = payload.get("repository") or {}
    owner = (repo_info.get("owner") or {}).get("login")
    name = repo_info.get("name")
    if not owner or not name:
        raise ValueError("Cannot determine repository owner and name from event")
    return owner, name


def parse_event(
    event_name: str,
    payload: Dict[str, Any],
    repository: Optional[str] = None
) -> TriggerEvent:
    """
    Map a webhook payload to its event type.

    Args:
        event_name: Value of GITHUB_EVENT_NAME
        payload: Parsed webhook payload
        repository: Value of GITHUB_REPOSITORY ("owner/repo"), if known

    Returns:
        The typed trigger event

    Raises:
        UnsupportedEventError: if the event is not one the bot answers
    """
    if event_name not in SUPPORTED_EVENTS:
        raise UnsupportedEventError(event_name)

    if event_name in ("issues", "issue_comment"):
        owner, name = _split_repository(payload, repository)
        issue = payload["issue"]
        if event_name == "issues":
            return IssueEvent(
                owner=owner,
                repo=name,
                issue_number=issue["number"],
                question=issue.get("body") or ""
            )
        return IssueCommentEvent(
            owner=owner,
            repo=name,
            issue_number=issue["number"],
            question=payload["comment"].get("body") or ""
        )

    discussion = payload["discussion"]
    if event_name == "discussion":
        return DiscussionEvent(
            discussion_id=discussion["node_id"],
            question=discussion.get("body") or ""
        )
    return DiscussionCommentEvent(
        discussion_id=discussion["node_id"],
        question=payload["comment"].get("body") or ""
    )


def load_payload(event_path: Optional[str]) -> Dict[str, Any]:
    """Read the webhook payload file written by the runner."""
    if not event_path:
        return {}
    return json.loads(Path(event_path).read_text(encoding="utf-8"))
