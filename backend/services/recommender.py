"""Async entry points used by the API layer.

Text extraction is the only blocking step, so it runs in a worker thread;
field extraction and ranking are cheap and run inline.
"""

import asyncio
import logging

from models.schemas.profile import StructuredProfile
from services import profile_extractor, text_extractor
from services.text_extractor import DocumentFormat
from services.vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)


async def extract_document_text(payload: bytes, fmt: DocumentFormat | str) -> str:
    """Decode a document off the event loop. Extraction errors propagate unchanged."""
    return await asyncio.to_thread(text_extractor.extract_text, payload, fmt)


async def profile_from_document(
    payload: bytes,
    fmt: DocumentFormat | str,
    vocab: Vocabulary = DEFAULT_VOCABULARY,
) -> StructuredProfile:
    text = await extract_document_text(payload, fmt)
    return profile_from_text(text, vocab)


def profile_from_text(text: str, vocab: Vocabulary = DEFAULT_VOCABULARY) -> StructuredProfile:
    return profile_extractor.extract_profile(text, vocab)
