"""
Prompt Builder - Assembles the completion prompt and finalizes the answer.

RESPONSIBILITY:
- compress_history(): render earlier thread comments, minus bot disclaimers
- assemble(): fill the instruction template with context, history, question
- finalize(): append the standing disclaimer to the model output

The disclaimer is stripped from history so it does not pile up across
several bot replies in the same thread.
"""

import re
from typing import Dict, Sequence

from answerbot.models.schemas import ConversationTurn, ProjectProfile, ScoredCandidate
from answerbot.services.text_sanitizer import densify, sanitize

DEFAULT_PROJECT = ProjectProfile()
DEFAULT_ASK_COMMAND = "/ask"

PROMPT_TEMPLATE = """I am a highly intelligent question answering bot for programming questions in {{language}}. If you ask me a question that is rooted in truth, I will give you the answer. If you ask me a question that is nonsense, trickery, is not related to the {{project}} project for {{platforms}}, or has no clear answer, I will respond with "Unknown.". If the requested functionality is not available or cannot be implemented using {{short_name}}, I will respond with "Not yet implemented.". I will include example code if relevant to the question, formatted as GitHub Flavored Markdown code blocks. After the answer, I will provide a list of Markdown links to the relevant documentation on GitHub under a ## References heading followed by a list of Markdown link definitions for all the links in the answer.

I will answer below question by referencing the following packages from the project:
{{files}}

{{history}}
Question: {{question}}
Answer:"""

PLACEHOLDER = re.compile(r"\{\{(language|project|platforms|short_name|files|history|question)\}\}")

DISCLAIMER_HEADING = "### Disclaimer"

DISCLAIMER_TEMPLATE = (
    "\n\n" + DISCLAIMER_HEADING + "\n\n"
    "-   This answer was generated with the help of AI and is not guaranteed to be correct. "
    "We will review the answer and update it if necessary.\n"
    "-   You can also ask follow-up questions to clarify the answer or request additional "
    "information by leaving a comment on this issue starting with `{ask_command}`."
)

DISCLAIMER_BLOCK = re.compile(r"(?:\r\n\r\n|\n\n)?" + re.escape(DISCLAIMER_HEADING) + r"[\s\S]*\Z")


def strip_disclaimer(body: str) -> str:
    """Remove a trailing disclaimer block (heading through end of text)."""
    return DISCLAIMER_BLOCK.sub("", body, count=1)


def compress_history(turns: Sequence[ConversationTurn]) -> str:
    """
    Render thread comments as one "<login>: <body>" line each.

    Args:
        turns: Comments in chronological order

    Returns:
        History block, each entry terminated by a newline
    """
    return "".join(
        f"{turn.author_login}: {strip_disclaimer(turn.body)}\n"
        for turn in turns
    )


def render_files(contexts: Sequence[ScoredCandidate]) -> str:
    return "\n\n".join(
        f"Package: {c.document.package}\nText: {sanitize(c.document.content, remove_code=True)}"
        for c in contexts
    )


def render_history(history: str) -> str:
    dense = densify(history) if history else ""
    if not dense:
        return ""
    return f"History:\n{dense}\n"


def fill_template(template: str, values: Dict[str, str]) -> str:
    """Single pass, literal substitution; inserted text is never rescanned."""
    return PLACEHOLDER.sub(lambda m: values[m.group(1)], template)


def assemble(
    question: str,
    contexts: Sequence[ScoredCandidate],
    history: str = "",
    project: ProjectProfile = DEFAULT_PROJECT
) -> str:
    """
    Build the completion prompt.

    Args:
        question: The question, unmodified
        contexts: Ranked documentation candidates (may be empty)
        history: Output of compress_history ("" when there is none)
        project: Wording that names the project in the instructions

    Returns:
        The prompt string
    """
    return fill_template(PROMPT_TEMPLATE, {
        "language": project.language,
        "project": project.name,
        "platforms": project.platforms,
        "short_name": project.short_name,
        "files": render_files(contexts),
        "history": render_history(history),
        "question": question,
    })


def finalize(raw_answer: str, ask_command: str = DEFAULT_ASK_COMMAND) -> str:
    """Append the AI-generated-answer disclaimer."""
    return raw_answer + DISCLAIMER_TEMPLATE.format(ask_command=ask_command)
