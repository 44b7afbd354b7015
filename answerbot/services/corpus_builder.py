"""
Corpus Builder - Offline job that (re)builds embeddings.json.

RESPONSIBILITY:
Walks a documentation tree, embeds every package README and writes the
corpus file the bot loads at run time.

FLOW:
1. Find every README.md under the docs root
2. Derive the package id from its path
3. Clean the README (license comment, line endings)
4. Packages already in the corpus only get their content refreshed
5. New packages are embedded (markup stripped, length capped)
6. Checkpoint the corpus periodically and at the end

Run:
    python -m answerbot.services.corpus_builder path/to/docs -o embeddings.json
"""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from answerbot.core.exceptions import AppException
from answerbot.models.schemas import DocumentEmbedding
from answerbot.services.corpus import load_corpus
from answerbot.services.embedding_service import EmbeddingService
from answerbot.services.text_sanitizer import (
    HTML_LICENSE_COMMENT,
    normalize_line_endings,
    remove_code_blocks,
    strip_markup,
)

logger = logging.getLogger(__name__)

README_NAME = "README.md"


@dataclass
class CorpusBuilderConfig:
    """Configuration for the corpus builder."""
    max_length: int = 10000
    checkpoint_every: int = 10


@dataclass
class BuildResult:
    """Result of a build run."""
    total_files: int = 0
    embedded: int = 0
    refreshed: int = 0
    output_path: str = ""
    errors: List[str] = field(default_factory=list)
    duration_seconds: float = 0.0


def package_id(readme: Path, docs_root: Path) -> str:
    """'math/base/special/sin/README.md' -> 'math/base/special/sin'."""
    return readme.parent.relative_to(docs_root).as_posix()


def clean_readme(text: str) -> str:
    """Remove the HTML license comment and normalize line endings."""
    return normalize_line_endings(HTML_LICENSE_COMMENT.sub("", text))


def embedding_input(text: str, max_length: int) -> str:
    """
    Text sent to the embeddings endpoint for one README.

    Over-long pages lose their code blocks first, then get truncated.
    """
    text = strip_markup(text)
    if len(text) > max_length:
        logger.info("Too long, removing code blocks")
        text = remove_code_blocks(text)
        if len(text) > max_length:
            logger.info("Still too long, truncating")
            text = text[:max_length]
    return text


class CorpusBuilder:
    """
    Builds the documentation corpus.

    Usage:
        builder = CorpusBuilder(embedding_service)
        result = await builder.build(Path("docs"), Path("embeddings.json"))
    """

    def __init__(self, embedding_service: EmbeddingService, config: Optional[CorpusBuilderConfig] = None):
        self.embedding_service = embedding_service
        self.config = config or CorpusBuilderConfig()

    def find_readmes(self, docs_root: Path) -> List[Path]:
        return sorted(p for p in docs_root.rglob(README_NAME) if p.is_file() and p.parent != docs_root)

    async def build(self, docs_root: Path, output_path: Path) -> BuildResult:
        """
        Build or update the corpus at output_path.

        Args:
            docs_root: Directory containing one README.md per package
            output_path: Corpus file; existing entries are reused

        Returns:
            BuildResult with statistics
        """
        start_time = datetime.now()
        result = BuildResult(output_path=str(output_path))

        entries: Dict[str, DocumentEmbedding] = {}
        if output_path.exists():
            for doc in load_corpus(str(output_path)):
                entries[doc.package] = doc
            logger.info(f"Loaded {len(entries)} existing entries from {output_path}")

        files = self.find_readmes(docs_root)
        result.total_files = len(files)

        for i, readme in enumerate(files):
            package = package_id(readme, docs_root)
            content = clean_readme(readme.read_text(encoding="utf-8"))

            existing = entries.get(package)
            if existing is not None:
                entries[package] = existing.model_copy(update={"content": content})
                result.refreshed += 1
                continue

            try:
                vector = await self.embedding_service.embed(
                    embedding_input(content, self.config.max_length)
                )
            except AppException as exc:
                logger.error(f"Failed to embed {package}: {exc.message}")
                result.errors.append(f"{package}: {exc.message}")
                continue

            entries[package] = DocumentEmbedding(package=package, content=content, embedding=vector)
            result.embedded += 1
            logger.info(f"Embedded {package}")

            if i % self.config.checkpoint_every == 0:
                self.write(entries.values(), output_path)

        self.write(entries.values(), output_path)
        result.duration_seconds = (datetime.now() - start_time).total_seconds()
        return result

    @staticmethod
    def write(entries, output_path: Path) -> None:
        data = [doc.model_dump() for doc in entries]
        output_path.write_text(json.dumps(data), encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point for the corpus builder."""
    from answerbot.core.config import get_settings
    from answerbot.services.embedding_service import EmbeddingConfig

    parser = argparse.ArgumentParser(description="Build the documentation embeddings corpus.")
    parser.add_argument("docs_root", type=Path, help="Directory with one README.md per package")
    parser.add_argument("-o", "--output", type=Path, default=Path("embeddings.json"))
    parser.add_argument("--max-length", type=int, default=CorpusBuilderConfig.max_length)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        # Only the OpenAI key matters here; the GitHub token is not used.
        settings = get_settings(github_token="unused")
    except AppException as exc:
        logger.error(exc.message)
        return 1

    service = EmbeddingService(EmbeddingConfig(
        api_key=settings.openai_api_key,
        model=settings.embedding_model
    ))
    builder = CorpusBuilder(service, CorpusBuilderConfig(max_length=args.max_length))
    result = asyncio.run(builder.build(args.docs_root, args.output))

    logger.info(
        f"Done: {result.embedded} embedded, {result.refreshed} refreshed, "
        f"{len(result.errors)} failed of {result.total_files} READMEs "
        f"in {result.duration_seconds:.1f}s"
    )
    return 1 if result.errors else 0


if __name__ == "__main__":
    sys.exit(main())
