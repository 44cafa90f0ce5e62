"""
Extract module for the summarization pipeline.
Turns raw text into sentence units and a document-wide word frequency map.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional, AbstractSet

from .constants import SENTENCE_PATTERN, WORD_PATTERN, STOP_WORDS

logger = logging.getLogger(__name__)


def split_into_sentences(text: str) -> List[str]:
    """
    Splits the input text into sentences ending in runs of '.', '!' or '?'.

    The terminators are kept with their sentence. Pieces without any
    alphanumeric content are dropped, and a trailing fragment with no
    terminator becomes the last sentence.

    Args:
        text: The text to split

    Returns:
        Sentences in document order; empty for empty or whitespace-only text
    """
    if not text or not text.strip():
        return []

    sentences = []
    for match in SENTENCE_PATTERN.finditer(text):
        sentence = match.group(0).strip()
        if sentence and WORD_PATTERN.search(sentence):
            sentences.append(sentence)

    logger.debug(f"Split text into {len(sentences)} sentences")
    return sentences


def tokenize_words(text: str) -> List[str]:
    """Lowercase word tokens (maximal alphanumeric runs) of a text."""
    return WORD_PATTERN.findall(text.lower())


def calculate_word_frequency(
    text: str,
    stop_words: Optional[AbstractSet[str]] = None,
) -> Dict[str, int]:
    """
    Counts every non-stop-word token of the text.

    Args:
        text: The text to analyze
        stop_words: Words to leave out; the built-in English list by default

    Returns:
        Mapping of lowercase word to occurrence count, empty when nothing qualifies
    """
    stop_words = STOP_WORDS if stop_words is None else stop_words
    return dict(Counter(word for word in tokenize_words(text) if word not in stop_words))
