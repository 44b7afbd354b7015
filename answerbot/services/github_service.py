"""
GitHub Service - Reads thread history and posts replies.

RESPONSIBILITY:
Thin async wrapper over the two GitHub APIs the bot needs:
- REST (issues): list comments, create comment
- GraphQL (discussions): list comments, add comment

Returned comments are converted to ConversationTurn in the order GitHub
returns them (chronological).
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from answerbot.core.exceptions import GitHubAPIError
from answerbot.models.events import Destination, DiscussionDestination, IssueDestination
from answerbot.models.schemas import ConversationTurn

logger = logging.getLogger(__name__)

GHOST_LOGIN = "ghost"

ADD_DISCUSSION_COMMENT = """
mutation ($discussionId: ID!, $body: String!) {
  addDiscussionComment(input: {discussionId: $discussionId, body: $body}) {
    comment {
      id
      body
    }
  }
}
"""

DISCUSSION_COMMENTS = """
query ($discussionId: ID!) {
  node(id: $discussionId) {
    ... on Discussion {
      comments(first: 100) {
        nodes {
          author {
            login
          }
          body
        }
      }
    }
  }
}
"""


@dataclass
class GitHubConfig:
    """Configuration for the GitHub service."""
    token: str = ""
    api_url: str = "https://api.github.com"
    graphql_url: str = "https://api.github.com/graphql"
    per_page: int = 100
    timeout: Optional[float] = None  # the runner's job timeout bounds the run


class GitHubService:
    """
    GitHub REST and GraphQL client.

    Usage:
        async with GitHubService(GitHubConfig(token="ghp_...")) as github:
            turns = await github.list_issue_comments("owner", "repo", 42)
            await github.post_issue_comment("owner", "repo", 42, "Hello")
    """

    def __init__(
        self,
        config: Optional[GitHubConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the service.

        Args:
            config: GitHub configuration
            transport: httpx transport override (tests use MockTransport)
        """
        self.config = config or GitHubConfig()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    "Authorization": f"token {self.config.token}",
                    "Accept": "application/vnd.github+json",
                    "User-Agent": "answerbot",
                },
                timeout=httpx.Timeout(self.config.timeout),
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GitHubService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # -------------------------------------------------------------------------
    # Transport helpers
    # -------------------------------------------------------------------------

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise GitHubAPIError(
                f"GitHub API {method} {url} failed with status {exc.response.status_code}",
                status_code=exc.response.status_code
            ) from exc
        except httpx.HTTPError as exc:
            raise GitHubAPIError(f"GitHub API {method} {url} failed: {exc}") from exc
        return response

    async def _graphql(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        response = await self._request(
            "POST",
            self.config.graphql_url,
            json={"query": query, "variables": variables}
        )
        payload = response.json()
        if payload.get("errors"):
            messages = "; ".join(e.get("message", "unknown error") for e in payload["errors"])
            raise GitHubAPIError(f"GitHub GraphQL error: {messages}")
        return payload.get("data") or {}

    # -------------------------------------------------------------------------
    # Issues (REST)
    # -------------------------------------------------------------------------

    async def list_issue_comments(
        self,
        owner: str,
        repo: str,
        issue_number: int
    ) -> List[ConversationTurn]:
        """
        List all comments on an issue, following pagination.

        Returns:
            Conversation turns in chronological order
        """
        url: Optional[str] = f"{self.config.api_url}/repos/{owner}/{repo}/issues/{issue_number}/comments"
        params: Optional[Dict[str, Any]] = {"per_page": self.config.per_page}
        turns: List[ConversationTurn] = []

        while url:
            response = await self._request("GET", url, params=params)
            for item in response.json():
                user = item.get("user") or {}
                turns.append(ConversationTurn(
                    author_login=user.get("login") or GHOST_LOGIN,
                    body=item.get("body") or ""
                ))
            url = response.links.get("next", {}).get("url")
            params = None  # the next link already carries the query string

        logger.debug(f"Fetched {len(turns)} comments for {owner}/{repo}#{issue_number}")
        return turns

    async def post_issue_comment(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        body: str
    ) -> Dict[str, Any]:
        """Create a comment on an issue and return the created comment."""
        response = await self._request(
            "POST",
            f"{self.config.api_url}/repos/{owner}/{repo}/issues/{issue_number}/comments",
            json={"body": body}
        )
        return response.json()

    # -------------------------------------------------------------------------
    # Discussions (GraphQL)
    # -------------------------------------------------------------------------

    async def list_discussion_comments(self, discussion_id: str) -> List[ConversationTurn]:
        """List the first 100 comments of a discussion."""
        data = await self._graphql(DISCUSSION_COMMENTS, {"discussionId": discussion_id})
        node = data.get("node") or {}
        nodes = (node.get("comments") or {}).get("nodes") or []

        turns = [
            ConversationTurn(
                author_login=(n.get("author") or {}).get("login") or GHOST_LOGIN,
                body=n.get("body") or ""
            )
            for n in nodes
        ]
        logger.debug(f"Fetched {len(turns)} comments for discussion {discussion_id}")
        return turns

    async def post_discussion_comment(self, discussion_id: str, body: str) -> Dict[str, Any]:
        """Add a comment to a discussion and return the created comment."""
        data = await self._graphql(
            ADD_DISCUSSION_COMMENT,
            {"discussionId": discussion_id, "body": body}
        )
        return (data.get("addDiscussionComment") or {}).get("comment") or {}

    # -------------------------------------------------------------------------
    # Destination dispatch
    # -------------------------------------------------------------------------

    async def post_comment(self, destination: Destination, body: str) -> Dict[str, Any]:
        """Post a comment wherever the destination points."""
        if isinstance(destination, IssueDestination):
            return await self.post_issue_comment(
                destination.owner,
                destination.repo,
                destination.issue_number,
                body
            )
        if isinstance(destination, DiscussionDestination):
            return await self.post_discussion_comment(destination.discussion_id, body)
        raise TypeError(f"Unknown destination: {destination!r}")
