"""
Tests for the embedding provider's loading lifecycle and encoding.
"""

import threading

import numpy as np
import pytest

from booksum.embeddings import (
    EmbeddingProvider, resolve_device, STATE_UNINITIALIZED, STATE_LOADING, STATE_READY,
)
from booksum.exceptions import ModelLoadError, ComputationError


class CountingLoader:
    def __init__(self, model, failures=0, release=None):
        self.model = model
        self.failures = failures
        self.release = release
        self.started = threading.Event()
        self.calls = 0

    def __call__(self, model_name, device):
        self.calls += 1
        self.started.set()
        if self.release is not None:
            self.release.wait(timeout=5)
        if self.calls <= self.failures:
            raise RuntimeError("download failed")
        return self.model


def test_lazy_load_happens_once(encoder):
    loader = CountingLoader(encoder)
    provider = EmbeddingProvider(loader=loader)
    assert provider.state == STATE_UNINITIALIZED

    assert provider.ensure_loaded() is encoder
    assert provider.ensure_loaded() is encoder
    assert provider.state == STATE_READY
    assert loader.calls == 1


def test_concurrent_callers_share_one_load(encoder):
    release = threading.Event()
    loader = CountingLoader(encoder, release=release)
    provider = EmbeddingProvider(loader=loader)
    results = []

    def worker():
        results.append(provider.ensure_loaded())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    assert loader.started.wait(timeout=5)
    assert provider.state == STATE_LOADING
    release.set()
    for t in threads:
        t.join(timeout=5)

    assert loader.calls == 1
    assert len(results) == 8
    assert all(model is encoder for model in results)


def test_failed_load_is_retried_on_next_call(encoder):
    loader = CountingLoader(encoder, failures=1)
    provider = EmbeddingProvider(loader=loader)

    with pytest.raises(ModelLoadError) as excinfo:
        provider.ensure_loaded()
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert provider.state == STATE_UNINITIALIZED

    assert provider.ensure_loaded() is encoder
    assert provider.state == STATE_READY
    assert loader.calls == 2


def test_waiting_callers_see_the_failure(encoder):
    release = threading.Event()
    loader = CountingLoader(encoder, failures=100, release=release)
    provider = EmbeddingProvider(loader=loader)
    errors = []

    def worker():
        try:
            provider.ensure_loaded()
        except ModelLoadError as e:
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(3)]
    for t in threads:
        t.start()
    assert loader.started.wait(timeout=5)
    release.set()
    for t in threads:
        t.join(timeout=5)

    assert len(errors) == 3


def test_embed_shapes(provider, encoder):
    vectors = provider.embed(["Cats purr.", "Dogs bark."])
    assert vectors.shape == (2, encoder.dim)
    assert provider.embed_one("Cats purr.").shape == (encoder.dim,)


def test_embed_rejects_empty_sentences_before_loading(provider):
    with pytest.raises(ComputationError):
        provider.embed(["Fine.", "   "])
    assert provider.state == STATE_UNINITIALIZED


def test_embed_nothing(provider):
    assert provider.embed([]).shape == (0, 0)


def test_embed_rejects_malformed_model_output():
    class BrokenModel:
        def encode(self, sentences, **kwargs):
            return np.zeros(4)

    provider = EmbeddingProvider(loader=lambda name, device: BrokenModel())
    with pytest.raises(ComputationError):
        provider.embed(["One.", "Two."])


def test_resolve_device_passthrough():
    assert resolve_device("cpu") == "cpu"
    assert resolve_device("cuda") == "cuda"


def test_interrupted_load_releases_waiters(encoder):
    seen = []

    def interrupted_loader(model_name, device):
        seen.append(provider._future)
        if len(seen) == 1:
            raise KeyboardInterrupt
        return encoder

    provider = EmbeddingProvider(loader=interrupted_loader)
    with pytest.raises(KeyboardInterrupt):
        provider.ensure_loaded()

    future = seen[0]
    assert future.done()
    assert isinstance(future.exception(), ModelLoadError)
    assert provider.state == STATE_UNINITIALIZED

    assert provider.ensure_loaded() is encoder
    assert provider.state == STATE_READY
