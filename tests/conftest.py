"""Shared test fixtures for the answer bot test suite."""

import json

import pytest

from answerbot.models.schemas import DocumentEmbedding

SECRET_VARS = (
    "OPENAI_API_KEY",
    "INPUT_OPENAI_API_KEY",
    "GITHUB_TOKEN",
    "INPUT_GITHUB_TOKEN",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove secrets from the environment and run from an empty directory."""
    for name in SECRET_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def make_doc():
    def _make(package, content="", embedding=(1.0, 0.0)):
        return DocumentEmbedding(package=package, content=content, embedding=list(embedding))
    return _make


@pytest.fixture
def sample_corpus(make_doc):
    """Two packages with orthogonal embeddings."""
    return [
        make_doc("a", '<section class="usage">Use A.</section>', (1.0, 0.0)),
        make_doc("b", '<section class="usage">Use B.</section>', (0.0, 1.0)),
    ]


@pytest.fixture
def corpus_file(tmp_path, sample_corpus):
    path = tmp_path / "embeddings.json"
    path.write_text(json.dumps([doc.model_dump() for doc in sample_corpus]))
    return path


@pytest.fixture
def issue_payload():
    return {
        "issue": {"number": 7, "body": "How do I use A?"},
        "repository": {"name": "repo", "owner": {"login": "owner"}},
    }


@pytest.fixture
def issue_comment_payload():
    return {
        "issue": {"number": 7, "body": "Original issue"},
        "comment": {"body": "/ask How do I use A?"},
        "repository": {"name": "repo", "owner": {"login": "owner"}},
    }


@pytest.fixture
def discussion_payload():
    return {"discussion": {"node_id": "D_kwDOabc", "body": "How do I use B?"}}


@pytest.fixture
def discussion_comment_payload():
    return {
        "discussion": {"node_id": "D_kwDOabc", "body": "Original discussion"},
        "comment": {"body": "/ask And B?"},
    }
