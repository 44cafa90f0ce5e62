"""
Sentence scoring functions for the summarization pipeline.

Every scorer works on the sentences of a single document; nothing is
cached between calls.
"""

import math
import logging
from collections import Counter
from typing import Dict, List, Optional, Sequence, AbstractSet

from .constants import (
    STOP_WORDS, TOPIC_INDICATORS, TOPIC_INDICATOR_SCORE, FIRST_SENTENCE_TOPIC_BONUS,
    BIOGRAPHICAL_KEYWORDS, BIOGRAPHICAL_SCORE,
)
from .config import LENGTH_SCORE_DIVISOR
from .embeddings import EmbeddingProvider
from .extract import tokenize_words
from .utils import cosine_similarity, word_count

logger = logging.getLogger(__name__)


class TfIdfIndex:
    """
    TF-IDF over the sentences of one document, each sentence being a document
    of the corpus. Stop words are left out of the sentence term counts.
    """

    def __init__(self, sentences: Sequence[str], stop_words: Optional[AbstractSet[str]] = None):
        self.stop_words = STOP_WORDS if stop_words is None else stop_words
        self.documents: List[Counter] = [
            Counter(t for t in tokenize_words(s) if t not in self.stop_words)
            for s in sentences
        ]
        self._idf_cache: Dict[str, float] = {}

    def __len__(self) -> int:
        return len(self.documents)

    def tf(self, term: str, index: int) -> int:
        return self.documents[index].get(term, 0)

    def idf(self, term: str) -> float:
        if term not in self._idf_cache:
            docs_with_term = sum(1 for doc in self.documents if term in doc)
            if not self.documents:
                self._idf_cache[term] = 0.0
            else:
                self._idf_cache[term] = 1 + math.log(len(self.documents) / (1 + docs_with_term))
        return self._idf_cache[term]

    def tfidf(self, text: str, index: int) -> float:
        """Sum of tf * idf for every token occurrence of `text` against sentence `index`."""
        return sum(self.tf(term, index) * self.idf(term) for term in tokenize_words(text))


def frequency_score(sentence: str, word_frequency: Dict[str, int]) -> float:
    """
    Average document frequency over the sentence's words. Words missing
    from the map (stop words included) count as zero.
    """
    words = tokenize_words(sentence)
    if not words:
        return 0.0
    return sum(word_frequency.get(word, 0) for word in words) / len(words)


def positional_score(index: int) -> float:
    return 1 / (index + 1)


def length_score(sentence: str, divisor: float = LENGTH_SCORE_DIVISOR) -> float:
    return word_count(sentence) / divisor


def topic_score(sentence: str, index: int) -> float:
    """Score for sentences that look like they introduce a topic."""
    lowered = sentence.lower()
    score = TOPIC_INDICATOR_SCORE if any(ind in lowered for ind in TOPIC_INDICATORS) else 0
    return float(score + (FIRST_SENTENCE_TOPIC_BONUS if index == 0 else 0))


def biographical_score(sentence: str) -> float:
    lowered = sentence.lower()
    return float(BIOGRAPHICAL_SCORE if any(kw in lowered for kw in BIOGRAPHICAL_KEYWORDS) else 0)


def reference_index(sentence_count: int) -> int:
    """Index of the structural midpoint sentence."""
    return sentence_count // 2


def semantic_similarity_scores(sentences: Sequence[str], provider: EmbeddingProvider) -> List[float]:
    """
    Cosine similarity of every sentence to the midpoint (reference) sentence.

    All sentences are encoded in one batch and the reference row is reused
    as the reference embedding.

    Args:
        sentences: Document sentences, in order
        provider: Embedding provider

    Returns:
        One similarity per sentence, in [-1, 1]
    """
    if not sentences:
        return []

    embeddings = provider.embed(sentences)
    ref = reference_index(len(sentences))
    logger.debug(f"Scoring {len(sentences)} sentences against reference sentence {ref}")
    return [float(s) for s in cosine_similarity(embeddings, embeddings[ref])]
