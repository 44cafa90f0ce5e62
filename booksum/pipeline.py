"""
Summarization pipeline.
Chains segmentation, scoring, ranking, selection, lexical variation and
post-processing into a single summarize() call.
"""

import time
import threading
from typing import Optional

from pydantic import ValidationError

from .config import DEFAULT_MAX_SENTENCES
from .embeddings import EmbeddingProvider, get_default_provider
from .exceptions import ConfigurationError, SummarizationError
from .extract import split_into_sentences, calculate_word_frequency
from .logging import get_logger
from .metrics import record_summary, record_error, time_summarize
from .models import SummarizerOptions, SummaryResult
from .postprocess import clean_sentences, join_summary
from .ranking import ScoringContext, rank_sentences, select_top_sentences, normalize_max_sentences
from .scoring import TfIdfIndex, semantic_similarity_scores
from .synonyms import LexicalVariationTransformer, SynonymSource, WordNetSynonymSource

logger = get_logger(__name__)


def build_options(**overrides) -> SummarizerOptions:
    """
    Build SummarizerOptions from keyword overrides.

    Raises:
        ConfigurationError: if a value is invalid
    """
    try:
        return SummarizerOptions(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid summarizer options: {e}") from e


class Summarizer:
    """
    Extractive summarizer bound to an embedding provider and a synonym source.

    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(
        self,
        embedding_provider: Optional[EmbeddingProvider] = None,
        synonym_source: Optional[SynonymSource] = None,
        options: Optional[SummarizerOptions] = None,
    ):
        self.embedding_provider = embedding_provider or get_default_provider()
        self.options = options or SummarizerOptions()
        self.transformer = LexicalVariationTransformer(
            synonym_source or WordNetSynonymSource(),
            min_word_length=self.options.min_synonym_word_length,
            max_synonym_length=self.options.max_synonym_length,
        )

    def summarize(self, text: str, max_sentences: int = DEFAULT_MAX_SENTENCES) -> str:
        """
        Generates a summary for the given text.

        Args:
            text: The text to summarize
            max_sentences: Maximum number of sentences in the summary; non-positive values mean 5

        Returns:
            The summary; an empty string for empty input

        Raises:
            ResourceUnavailableError: the embedding model or synonym corpus could not be loaded (retryable)
            SummarizationError: any other failure
        """
        return self.summarize_detailed(text, max_sentences).summary

    @time_summarize()
    def summarize_detailed(self, text: str, max_sentences: int = DEFAULT_MAX_SENTENCES) -> SummaryResult:
        """Like summarize(), but also returns the selected sentences and their scores."""
        start_time = time.time()
        max_sentences = normalize_max_sentences(max_sentences)

        try:
            sentences = split_into_sentences(text or "")
            if not sentences:
                logger.info("No sentences to summarize")
                record_summary("success")
                return SummaryResult(processing_time=time.time() - start_time)

            logger.info("Summarizing text", sentence_count=len(sentences), max_sentences=max_sentences)

            context = ScoringContext(
                sentences=sentences,
                word_frequency=calculate_word_frequency(text),
                tfidf=TfIdfIndex(sentences),
                similarities=semantic_similarity_scores(sentences, self.embedding_provider),
                length_divisor=self.options.length_score_divisor,
            )
            ranked = rank_sentences(context, self.options.weights)
            selected = select_top_sentences(
                ranked,
                max_sentences=max_sentences,
                min_sentences=self.options.min_summary_sentences,
                ratio=self.options.summary_ratio,
                order=self.options.summary_order,
            )

            texts = [r.text for r in selected]
            if self.options.enable_synonyms:
                texts = self.transformer.transform_all(texts)

            summary_sentences = clean_sentences(texts)
            summary = join_summary(summary_sentences)

        except SummarizationError as e:
            logger.exception("Error generating summary", error=str(e))
            record_summary("failure")
            record_error(type(e).__name__)
            raise
        except Exception as e:
            logger.exception("Error generating summary", error=str(e))
            record_summary("failure")
            record_error("summarization")
            raise SummarizationError("Failed to generate summary") from e

        record_summary("success")
        result = SummaryResult(
            summary=summary,
            selected=selected,
            sentence_count=len(sentences),
            summary_sentence_count=len(summary_sentences),
            processing_time=time.time() - start_time,
        )
        logger.info("Summary generated",
                    selected_count=len(selected),
                    processing_time=f"{result.processing_time:.2f}s")
        return result


_default_summarizer: Optional[Summarizer] = None
_default_summarizer_lock = threading.Lock()


def get_default_summarizer() -> Summarizer:
    global _default_summarizer
    with _default_summarizer_lock:
        if _default_summarizer is None:
            _default_summarizer = Summarizer()
        return _default_summarizer


def summarize(text: str, max_sentences: int = DEFAULT_MAX_SENTENCES) -> str:
    """Summarize with the process-wide default Summarizer."""
    return get_default_summarizer().summarize(text, max_sentences)
