"""
Data Models for the Answer Bot
==============================

- schemas: Corpus records, ranking results, conversation turns
- events: Trigger events and reply destinations
"""

from answerbot.models.schemas import (
    AnswerResult,
    CompletionOptions,
    ConversationTurn,
    DocumentEmbedding,
    ProjectProfile,
    ScoredCandidate,
)

from answerbot.models.events import (
    DiscussionCommentEvent,
    DiscussionDestination,
    DiscussionEvent,
    IssueCommentEvent,
    IssueDestination,
    IssueEvent,
    TriggerEvent,
    parse_event,
)

__all__ = [
    # Schemas
    "AnswerResult",
    "CompletionOptions",
    "ConversationTurn",
    "DocumentEmbedding",
    "ProjectProfile",
    "ScoredCandidate",
    # Events
    "DiscussionCommentEvent",
    "DiscussionDestination",
    "DiscussionEvent",
    "IssueCommentEvent",
    "IssueDestination",
    "IssueEvent",
    "TriggerEvent",
    "parse_event",
]
