"""
Pydantic models for data validation across the pipeline.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from .config import (
    WEIGHT_LEXICAL, WEIGHT_FREQUENCY, WEIGHT_SIMILARITY, WEIGHT_POSITION,
    WEIGHT_LENGTH, WEIGHT_TOPIC, WEIGHT_BIOGRAPHICAL,
    ENABLE_SYNONYMS, MAX_SYNONYM_LENGTH, MIN_SYNONYM_WORD_LENGTH,
    MIN_SUMMARY_SENTENCES, SUMMARY_RATIO, SUMMARY_ORDER, LENGTH_SCORE_DIVISOR,
)
from .constants import SUMMARY_ORDERS


class SentenceScores(BaseModel):
    """Per-sentence score breakdown, one field per scoring term."""
    lexical: float = Field(0.0, description="TF-IDF of the sentence against the other sentences")
    frequency: float = Field(0.0, description="Average document frequency of the sentence's words")
    similarity: float = Field(0.0, description="Cosine similarity to the reference sentence")
    position: float = Field(0.0, description="Harmonic positional score, 1 / (index + 1)")
    length: float = Field(0.0, description="Word count divided by the length divisor")
    topic: float = Field(0.0, description="Topic-sentence indicator score")
    biographical: float = Field(0.0, description="Biographical keyword score")


class RankedSentence(BaseModel):
    """A sentence with its scores; ordering by score defines selection priority."""
    index: int = Field(..., description="0-based position of the sentence in the document")
    text: str = Field(..., description="The sentence text")
    scores: SentenceScores = Field(default_factory=SentenceScores)
    score: float = Field(0.0, description="Weighted combination of the score terms")

    model_config = {"frozen": True}


class SynonymEntry(BaseModel):
    """Result of a synonym lookup that found the word. A missing word is None, not an empty entry."""
    word: str
    nouns: List[str] = Field(default_factory=list)
    verbs: List[str] = Field(default_factory=list)

    @property
    def candidates(self) -> List[str]:
        return self.nouns if self.nouns else self.verbs


class ScoringWeights(BaseModel):
    """Weights applied to each scoring term before summing."""
    lexical: float = WEIGHT_LEXICAL
    frequency: float = WEIGHT_FREQUENCY
    similarity: float = WEIGHT_SIMILARITY
    position: float = WEIGHT_POSITION
    length: float = WEIGHT_LENGTH
    topic: float = WEIGHT_TOPIC
    biographical: float = WEIGHT_BIOGRAPHICAL


class SummarizerOptions(BaseModel):
    """Per-instance settings of a Summarizer."""
    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    enable_synonyms: bool = ENABLE_SYNONYMS
    max_synonym_length: int = Field(MAX_SYNONYM_LENGTH, gt=0)
    min_synonym_word_length: int = Field(MIN_SYNONYM_WORD_LENGTH, gt=0)
    min_summary_sentences: int = Field(MIN_SUMMARY_SENTENCES, ge=0)
    summary_ratio: float = Field(SUMMARY_RATIO, ge=0.0, le=1.0)
    length_score_divisor: float = Field(LENGTH_SCORE_DIVISOR, gt=0.0)
    summary_order: str = SUMMARY_ORDER

    @field_validator("summary_order")
    @classmethod
    def _check_order(cls, value: str) -> str:
        if value not in SUMMARY_ORDERS:
            raise ValueError(f"summary_order must be one of {SUMMARY_ORDERS}, got {value!r}")
        return value


class SummaryResult(BaseModel):
    """Full result of a summarization call."""
    summary: str = Field("", description="The post-processed summary")
    selected: List[RankedSentence] = Field(default_factory=list, description="Sentences chosen for the summary, in output order")
    sentence_count: int = Field(0, description="Number of sentences in the document")
    summary_sentence_count: int = Field(0, description="Number of sentences in the summary after deduplication")
    processing_time: Optional[float] = Field(None, description="Total processing time in seconds")


class SummarizeRequest(BaseModel):
    """Request model for the summarize endpoint."""
    text: str = Field(..., description="Document to summarize")
    max_sentences: Optional[int] = Field(None, description="Upper bound on summary sentences; defaults to 5")


class SummarizeResponse(BaseModel):
    """Response model for the summarize endpoint."""
    summary: str
    sentence_count: int
    selected_count: int
    processing_time: Optional[float] = None
