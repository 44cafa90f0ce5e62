"""
Tests for the individual sentence scorers.
"""

import math

import numpy as np
import pytest

from booksum.exceptions import ComputationError
from booksum.scoring import (
    TfIdfIndex, frequency_score, positional_score, length_score, topic_score,
    biographical_score, reference_index, semantic_similarity_scores,
)
from booksum.utils import cosine_similarity


class StubProvider:
    """Returns preset embeddings regardless of the sentences."""

    def __init__(self, vectors):
        self.vectors = np.asarray(vectors, dtype=float)

    def embed(self, sentences):
        return self.vectors[:len(sentences)]


def test_tfidf_term_weights():
    """idf = 1 + ln(N / (1 + df))."""
    index = TfIdfIndex(["cats purr", "dogs bark", "cats sleep"])
    assert index.idf("cats") == pytest.approx(1.0)
    assert index.idf("purr") == pytest.approx(1 + math.log(3 / 2))
    assert index.idf("unseen") == pytest.approx(1 + math.log(3))


def test_tfidf_sentence_score():
    index = TfIdfIndex(["cats purr", "dogs bark", "cats sleep"])
    assert index.tfidf("cats purr", 0) == pytest.approx(1.0 + 1 + math.log(3 / 2))
    # every token occurrence counts
    assert index.tfidf("cats cats", 0) == pytest.approx(2.0)
    # terms absent from the sentence contribute nothing
    assert index.tfidf("dogs bark", 0) == 0


def test_tfidf_ignores_stop_words():
    index = TfIdfIndex(["the cat", "the dog"])
    assert index.tf("the", 0) == 0
    assert index.tfidf("the", 0) == 0


def test_tfidf_empty_corpus():
    index = TfIdfIndex([])
    assert len(index) == 0
    assert index.idf("anything") == 0.0


def test_frequency_score_averages_over_all_tokens():
    frequency = {"cats": 2, "mammals": 3}
    assert frequency_score("Cats are mammals.", frequency) == pytest.approx(5 / 3)


def test_frequency_score_empty_inputs():
    assert frequency_score("Cats are mammals.", {}) == 0.0
    assert frequency_score("...", {"cats": 1}) == 0.0


def test_positional_and_length_scores():
    assert positional_score(0) == 1.0
    assert positional_score(3) == 0.25
    assert length_score("one two three four") == pytest.approx(0.2)
    assert length_score("one two", divisor=4) == pytest.approx(0.5)


def test_topic_score():
    assert topic_score("Paris is a city.", 0) == 5.0
    assert topic_score("Paris is a city.", 4) == 2.0
    assert topic_score("Rain fell.", 2) == 0.0


def test_biographical_score():
    assert biographical_score("He was born in 1900.") == 3.0
    assert biographical_score("Rain fell.") == 0.0


def test_reference_index_is_midpoint():
    assert reference_index(1) == 0
    assert reference_index(4) == 2
    assert reference_index(5) == 2


def test_similarity_against_midpoint():
    provider = StubProvider([[1, 0], [0, 1], [1, 1], [-1, -1]])
    scores = semantic_similarity_scores(["a.", "b.", "c.", "d."], provider)
    assert scores[2] == pytest.approx(1.0)
    assert scores[0] == pytest.approx(1 / math.sqrt(2))
    assert scores[3] == pytest.approx(-1.0)


def test_similarity_single_sentence_is_one():
    provider = StubProvider([[0.3, 0.4, 0.5]])
    assert semantic_similarity_scores(["Only one."], provider) == [pytest.approx(1.0)]


def test_similarity_no_sentences():
    assert semantic_similarity_scores([], StubProvider([])) == []


def test_cosine_similarity_rejects_zero_vectors():
    with pytest.raises(ComputationError):
        cosine_similarity(np.array([[0.0, 0.0]]), np.array([1.0, 0.0]))


def test_cosine_similarity_rejects_dimension_mismatch():
    with pytest.raises(ComputationError):
        cosine_similarity(np.array([[1.0, 0.0, 0.0]]), np.array([1.0, 0.0]))


def test_cosine_similarity_values():
    sims = cosine_similarity(np.array([[1.0, 0.0], [0.0, 2.0]]), np.array([3.0, 0.0]))
    assert sims.tolist() == pytest.approx([1.0, 0.0])
