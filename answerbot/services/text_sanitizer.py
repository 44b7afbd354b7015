"""
Text Sanitizer - Turns README markdown into prompt-safe text.

RESPONSIBILITY:
Strips everything from a documentation page that costs prompt tokens
without helping the model: license headers, markup the README generator
adds, link definitions and (optionally) code examples.

PIPELINE (order matters, later steps assume earlier ones ran):
1. Strip the license header block
2. Normalize CRLF line endings
3. Keep only the <section class="usage"> region, if there is one
4. Drop fenced code blocks (optional)
5. Drop markdown link definitions
6. Drop HTML comments
7. Drop stray <section> open/close tags
8. Collapse 3+ newlines to 2
9. densify(): single-line rendition used for conversation history
"""

import re

LICENSE_HEADER = re.compile(r"/\*\*\n \* @license[\s\S]*?\n \*/\n")
HTML_LICENSE_COMMENT = re.compile(r"<!--\n\n@license[\s\S]*?-->")
USAGE_SECTION = re.compile(r'<section class="usage">([\s\S]*?)</section>')
CODE_BLOCK = re.compile(r"```[\s\S]*?```")
LINK_DEFINITION = re.compile(r"\[.*?\]:[\s\S]*?\n")
HTML_COMMENT = re.compile(r"<!--[\s\S]*?-->")
SECTION_CLOSE = re.compile(r"</section>")
SECTION_OPEN = re.compile(r'<section class="[^"]+">')
EXCESS_NEWLINES = re.compile(r"\n{3,}")
SPACE_RUN = re.compile(r" {2,}")
TAB_RUN = re.compile(r"\t{2,}")


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n")


def extract_usage(text: str) -> str:
    """
    Return the interior of the first usage section.

    Text without a usage section is returned unchanged. Only the first
    region survives when a page has several.
    """
    match = USAGE_SECTION.search(text)
    if match is None:
        return text
    return match.group(1)


def remove_code_blocks(text: str) -> str:
    return CODE_BLOCK.sub("", text)


def collapse_newlines(text: str) -> str:
    """Collapse runs of three or more newlines to a single blank line."""
    return EXCESS_NEWLINES.sub("\n\n", text)


def strip_markup(text: str) -> str:
    """Remove HTML comments and section tags, then collapse blank lines."""
    text = HTML_COMMENT.sub("", text)
    text = SECTION_CLOSE.sub("", text)
    text = SECTION_OPEN.sub("", text)
    return collapse_newlines(text)


def sanitize(text: str, remove_code: bool = True) -> str:
    """
    Reduce a documentation page to the text that goes into the prompt.

    Args:
        text: Raw README content
        remove_code: Whether fenced code blocks are dropped

    Returns:
        Sanitized text, newlines preserved
    """
    text = LICENSE_HEADER.sub("", text)
    text = normalize_line_endings(text)
    text = extract_usage(text)
    if remove_code:
        text = remove_code_blocks(text)
    text = LINK_DEFINITION.sub("", text)
    return strip_markup(text)


def densify(text: str) -> str:
    """
    Squash text onto a single line.

    Line endings are normalized, leading/trailing newlines are trimmed,
    the remaining newlines become spaces, and runs of spaces or tabs shrink
    to one character.
    """
    text = normalize_line_endings(text).strip("\n")
    text = text.replace("\n", " ")
    text = SPACE_RUN.sub(" ", text)
    return TAB_RUN.sub("\t", text)
