"""Tests for answerbot.agents.prompt_builder: history, prompt, disclaimer."""

import pytest

from answerbot.agents.prompt_builder import (
    DISCLAIMER_HEADING,
    assemble,
    compress_history,
    finalize,
    strip_disclaimer,
)
from answerbot.models.schemas import ConversationTurn, ProjectProfile, ScoredCandidate


def _candidate(make_doc, package, content, score=0.9):
    return ScoredCandidate(document=make_doc(package, content), score=score)


# ── strip_disclaimer / finalize ──────────────────────────────────────────────


class TestDisclaimer:
    def test_finalize_appends_once(self):
        answer = finalize("The answer.")
        assert answer.startswith("The answer.\n\n### Disclaimer\n\n")
        assert answer.count(DISCLAIMER_HEADING) == 1

    def test_finalize_mentions_ask_command(self):
        assert finalize("x").endswith("starting with `/ask`.")
        assert finalize("x", ask_command="/docs").endswith("starting with `/docs`.")

    def test_finalize_has_two_bullets(self):
        body = finalize("x").split(DISCLAIMER_HEADING, 1)[1]
        assert body.count("\n-   ") == 2

    def test_finalize_empty_answer(self):
        assert finalize("").startswith("\n\n### Disclaimer")

    @pytest.mark.parametrize("text", [
        "",
        "Plain answer.",
        "Answer ending in newline\n",
        "Answer\n\nwith paragraphs\n\n```js\nvar x;\n```",
        "  padded  ",
        "Answer\r",
    ])
    def test_round_trip(self, text):
        assert strip_disclaimer(finalize(text)) == text

    def test_strip_without_disclaimer(self):
        assert strip_disclaimer("No disclaimer here.") == "No disclaimer here."

    def test_strip_crlf_body(self):
        body = "Try X.\r\n\r\n### Disclaimer\r\n\r\n- blah"
        assert strip_disclaimer(body) == "Try X."


# ── compress_history ─────────────────────────────────────────────────────────


class TestCompressHistory:
    def test_disclaimer_removed(self):
        turns = [ConversationTurn(author_login="alice", body="Try X.\n\n### Disclaimer\n\n- blah")]
        assert compress_history(turns) == "alice: Try X.\n"

    def test_preserves_order(self):
        turns = [
            ConversationTurn(author_login="alice", body="Question?"),
            ConversationTurn(author_login="bot", body=finalize("Answer.")),
            ConversationTurn(author_login="alice", body="Follow-up?"),
        ]
        assert compress_history(turns) == "alice: Question?\nbot: Answer.\nalice: Follow-up?\n"

    def test_empty(self):
        assert compress_history([]) == ""

    def test_no_section_extraction(self):
        body = '<section class="usage">inner</section> outer'
        turns = [ConversationTurn(author_login="bob", body=body)]
        assert compress_history(turns) == f"bob: {body}\n"


# ── assemble ─────────────────────────────────────────────────────────────────


class TestAssemble:
    def test_empty_context_and_history(self):
        prompt = assemble("How do I sort?", [], "")
        assert "Question: How do I sort?\nAnswer:" in prompt
        assert "History:" not in prompt
        assert "Package:" not in prompt
        assert "{{" not in prompt

    def test_context_rendered_in_rank_order(self, make_doc):
        contexts = [
            _candidate(make_doc, "a", '<section class="usage">Use A.</section>', 0.9),
            _candidate(make_doc, "b", '<section class="usage">Use B.</section>', 0.8),
        ]
        prompt = assemble("q", contexts, "")
        assert "Package: a\nText: Use A.\n\nPackage: b\nText: Use B." in prompt

    def test_context_code_blocks_removed(self, make_doc):
        content = '<section class="usage">Call it.\n```js\nfoo();\n```\n</section>'
        prompt = assemble("q", [_candidate(make_doc, "foo", content)], "")
        assert "foo();" not in prompt
        assert "Package: foo\nText: Call it." in prompt

    def test_history_densified(self):
        prompt = assemble("q", [], "alice: hi\nbob: there\n")
        assert "History:\nalice: hi bob: there\n" in prompt

    def test_question_unmodified(self):
        question = "How do I   use\n\nthis <!-- really -->?"
        prompt = assemble(question, [], "")
        assert f"Question: {question}\nAnswer:" in prompt

    def test_placeholders_not_resubstituted(self, make_doc):
        content = "Call {{history}} and {{question}}."
        prompt = assemble("What is {{files}}?", [_candidate(make_doc, "p", content)], "")
        assert "Text: Call {{history}} and {{question}}." in prompt
        assert "Question: What is {{files}}?" in prompt

    def test_default_project_wording(self):
        prompt = assemble("q", [], "")
        assert prompt.startswith(
            "I am a highly intelligent question answering bot for programming questions in JavaScript. "
        )
        assert "is not related to the stdlib-js / @stdlib project for JavaScript and Node.js, " in prompt
        assert "cannot be implemented using stdlib, " in prompt

    def test_custom_project(self):
        project = ProjectProfile(name="acme", language="Python", platforms="CPython", short_name="acme")
        prompt = assemble("q", [], "", project=project)
        assert "programming questions in Python." in prompt
        assert "the acme project for CPython," in prompt
        assert "implemented using acme," in prompt
        assert "stdlib" not in prompt

    def test_crlf_history(self):
        turns = [ConversationTurn(author_login="alice", body="Line one\r\nLine two")]
        prompt = assemble("q", [], compress_history(turns))
        assert "\r" not in prompt
        assert "History:\nalice: Line one Line two\n" in prompt
