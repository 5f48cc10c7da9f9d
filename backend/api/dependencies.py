"""Shared dependencies for API routes."""

from services.vocabulary import DEFAULT_VOCABULARY, Vocabulary


def get_vocabulary() -> Vocabulary:
    return DEFAULT_VOCABULARY
