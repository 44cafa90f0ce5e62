"""
Ranking and selection of sentences.

The combined score is a weighted sum of named scoring terms. Each term is a
function of the scoring context, the sentence index and the sentence text;
terms are looked up by the field names of SentenceScores and weighted by
the same names in ScoringWeights.
"""

import math
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from .config import DEFAULT_MAX_SENTENCES, MIN_SUMMARY_SENTENCES, SUMMARY_RATIO, LENGTH_SCORE_DIVISOR
from .exceptions import ConfigurationError
from .models import RankedSentence, ScoringWeights, SentenceScores
from .scoring import (
    TfIdfIndex, frequency_score, positional_score, length_score, topic_score, biographical_score,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringContext:
    """Per-call inputs shared by all scoring terms."""
    sentences: Sequence[str]
    word_frequency: Dict[str, int]
    tfidf: TfIdfIndex
    similarities: Sequence[float]
    length_divisor: float = LENGTH_SCORE_DIVISOR


ScoringTerm = Callable[[ScoringContext, int, str], float]

DEFAULT_TERMS: Dict[str, ScoringTerm] = {
    "lexical": lambda ctx, i, s: ctx.tfidf.tfidf(s, i),
    "frequency": lambda ctx, i, s: frequency_score(s, ctx.word_frequency),
    "similarity": lambda ctx, i, s: ctx.similarities[i],
    "position": lambda ctx, i, s: positional_score(i),
    "length": lambda ctx, i, s: length_score(s, ctx.length_divisor),
    "topic": lambda ctx, i, s: topic_score(s, i),
    "biographical": lambda ctx, i, s: biographical_score(s),
}


def rank_sentences(
    context: ScoringContext,
    weights: Optional[ScoringWeights] = None,
    terms: Optional[Dict[str, ScoringTerm]] = None,
) -> List[RankedSentence]:
    """
    Scores every sentence and sorts them by combined score, highest first.

    Ties keep document order. Terms with a zero weight are not evaluated.

    Args:
        context: Sentences and the per-call data the terms read
        weights: Weight per term; unit weights for the five core terms by default
        terms: Overrides or replacements for the default term functions

    Returns:
        One RankedSentence per input sentence
    """
    weights = weights or ScoringWeights()
    active_terms = dict(DEFAULT_TERMS)
    if terms:
        unknown = set(terms) - set(SentenceScores.model_fields)
        if unknown:
            raise ConfigurationError(f"Unknown scoring terms: {sorted(unknown)}")
        active_terms.update(terms)

    if len(context.similarities) != len(context.sentences):
        raise ValueError(
            f"Got {len(context.similarities)} similarity scores for {len(context.sentences)} sentences"
        )

    ranked = []
    for index, sentence in enumerate(context.sentences):
        values = {}
        score = 0.0
        for name, term in active_terms.items():
            weight = getattr(weights, name)
            if weight == 0:
                continue
            values[name] = float(term(context, index, sentence))
            score += weight * values[name]
        ranked.append(RankedSentence(
            index=index,
            text=sentence,
            scores=SentenceScores(**values),
            score=score,
        ))

    # stable sort: equal scores stay in document order
    return sorted(ranked, key=lambda r: r.score, reverse=True)


def normalize_max_sentences(max_sentences) -> int:
    """Positive integers pass through; anything else falls back to the default."""
    if isinstance(max_sentences, bool) or not isinstance(max_sentences, int) or max_sentences <= 0:
        return DEFAULT_MAX_SENTENCES
    return max_sentences


def summary_length(
    sentence_count: int,
    max_sentences: int = DEFAULT_MAX_SENTENCES,
    min_sentences: int = MIN_SUMMARY_SENTENCES,
    ratio: float = SUMMARY_RATIO,
) -> int:
    """
    min(max_sentences, max(min_sentences, floor(count * ratio))), never more
    than the sentences available.
    """
    desired = min(
        normalize_max_sentences(max_sentences),
        max(min_sentences, math.floor(sentence_count * ratio)),
    )
    return max(0, min(desired, sentence_count))


def select_top_sentences(
    ranked: Sequence[RankedSentence],
    max_sentences: int = DEFAULT_MAX_SENTENCES,
    min_sentences: int = MIN_SUMMARY_SENTENCES,
    ratio: float = SUMMARY_RATIO,
    order: str = "rank",
) -> List[RankedSentence]:
    """
    Takes the best-ranked sentences for the summary.

    Args:
        ranked: Sentences sorted by descending score
        max_sentences: Caller cap on the summary size
        min_sentences: Floor on the summary size before the cap
        ratio: Share of the document's sentences to keep
        order: "rank" keeps score order, "document" restores source order

    Returns:
        The selected sentences
    """
    length = summary_length(len(ranked), max_sentences, min_sentences, ratio)
    selected = list(ranked[:length])
    if order == "document":
        selected.sort(key=lambda r: r.index)
    elif order != "rank":
        raise ConfigurationError(f"Unknown summary order: {order!r}")
    logger.debug(f"Selected {len(selected)} of {len(ranked)} sentences")
    return selected
