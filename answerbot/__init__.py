"""
Documentation Answer Bot
========================

A GitHub Action that answers questions in issues and discussions using
the project's documentation and a language model.

Components:
- agents: Pipeline (search and history tools, answer generator, orchestrator)
- services: Corpus, sanitizer, ranking, OpenAI and GitHub clients
- models: Pydantic data models and trigger events
- core: Configuration, exceptions and service wiring
"""

__version__ = "1.0.0"
