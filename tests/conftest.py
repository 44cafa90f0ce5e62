"""
Shared fixtures: a deterministic stand-in for the sentence encoder and a
dictionary-backed synonym source, so tests never download a model or corpus.
"""

import re
import zlib
from typing import Dict, List, Optional

import numpy as np
import pytest

from booksum.embeddings import EmbeddingProvider
from booksum.models import SummarizerOptions, SynonymEntry
from booksum.pipeline import Summarizer


class FakeEncoder:
    """Bag-of-words vectors hashed into a fixed dimension, plus a bias component."""

    dim = 32

    def __init__(self):
        self.calls = 0

    def encode(self, sentences, batch_size=32, convert_to_numpy=True, show_progress_bar=False):
        self.calls += 1
        rows = []
        for sentence in sentences:
            vector = np.zeros(self.dim)
            vector[0] = 1.0
            for word in re.findall(r"\w+", sentence.lower()):
                vector[1 + zlib.crc32(word.encode("utf-8")) % (self.dim - 1)] += 1.0
            rows.append(vector)
        return np.array(rows)


class FakeSynonymSource:
    """Synonym source over a plain dict; records every lookup."""

    def __init__(self, entries: Optional[Dict[str, List[str]]] = None, verbs: Optional[Dict[str, List[str]]] = None):
        self.entries = entries or {}
        self.verbs = verbs or {}
        self.lookups = []

    def lookup(self, word: str) -> Optional[SynonymEntry]:
        self.lookups.append(word)
        if word not in self.entries and word not in self.verbs:
            return None
        return SynonymEntry(word=word, nouns=self.entries.get(word, []), verbs=self.verbs.get(word, []))


@pytest.fixture
def encoder():
    return FakeEncoder()


@pytest.fixture
def provider(encoder):
    return EmbeddingProvider(model_name="fake-model", device="cpu", loader=lambda name, device: encoder)


@pytest.fixture
def synonym_source():
    return FakeSynonymSource()


@pytest.fixture
def summarizer(provider, synonym_source):
    return Summarizer(provider, synonym_source, SummarizerOptions())
