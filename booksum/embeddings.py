"""
Embedding provider for the summarization pipeline.
Owns the sentence-embedding model: loads it once, shares the in-flight load
between concurrent callers, and encodes sentences into fixed-length vectors.
"""

import threading
from concurrent.futures import Future
from typing import Any, Callable, Optional, Sequence

import numpy as np

from .config import EMBEDDING_MODEL_NAME, EMBEDDING_DEVICE, EMBEDDING_BATCH_SIZE
from .exceptions import ModelLoadError, ComputationError
from .logging import get_logger
from .metrics import record_model_load, record_error, time_model_load_context, time_embedding_context

logger = get_logger(__name__)

STATE_UNINITIALIZED = "uninitialized"
STATE_LOADING = "loading"
STATE_READY = "ready"

ModelLoader = Callable[[str, str], Any]


def resolve_device(device: str = EMBEDDING_DEVICE) -> str:
    """Resolve "auto" to cuda when torch sees a GPU, else cpu."""
    if device != "auto":
        return device
    import torch
    return "cuda" if torch.cuda.is_available() else "cpu"


def load_sentence_transformer(model_name: str, device: str) -> Any:
    """
    Load a sentence-transformers model.

    Args:
        model_name: Hugging Face model id or local path
        device: Device string, or "auto"

    Returns:
        A SentenceTransformer instance
    """
    from sentence_transformers import SentenceTransformer

    return SentenceTransformer(model_name, device=resolve_device(device))


class EmbeddingProvider:
    """
    Process-wide handle on the sentence-embedding model.

    The first caller of ensure_loaded() starts the load; callers arriving
    while it runs wait on the same Future. A failed load is not cached: the
    Future is dropped so the next call tries again.
    """

    def __init__(
        self,
        model_name: str = EMBEDDING_MODEL_NAME,
        device: str = EMBEDDING_DEVICE,
        batch_size: int = EMBEDDING_BATCH_SIZE,
        loader: Optional[ModelLoader] = None,
    ):
        self.model_name = model_name
        self.device = device
        self.batch_size = batch_size
        self._loader = loader or load_sentence_transformer
        self._lock = threading.Lock()
        self._future: Optional[Future] = None

    @property
    def state(self) -> str:
        future = self._future
        if future is None:
            return STATE_UNINITIALIZED
        if not future.done():
            return STATE_LOADING
        return STATE_READY

    def ensure_loaded(self) -> Any:
        """
        Return the loaded model, loading it first if needed.

        Raises:
            ModelLoadError: if the load fails
        """
        with self._lock:
            future = self._future
            owner = future is None
            if owner:
                future = Future()
                self._future = future

        if owner:
            self._load_into(future)
        return future.result()

    def _load_into(self, future: Future) -> None:
        logger.info("Loading embedding model", model_name=self.model_name, device=self.device)
        try:
            with time_model_load_context():
                model = self._loader(self.model_name, self.device)
        except Exception as e:
            logger.exception("Embedding model failed to load", model_name=self.model_name, error=str(e))
            record_model_load("failure")
            record_error("model_load")
            error = ModelLoadError(f"Failed to load embedding model '{self.model_name}': {e}")
            error.__cause__ = e
            self._fail(future, error)
        else:
            record_model_load("success")
            logger.info("Embedding model loaded", model_name=self.model_name)
            future.set_result(model)
        finally:
            # Waiters must never block on a load that was interrupted
            if not future.done():
                logger.warning("Embedding model load interrupted", model_name=self.model_name)
                record_model_load("failure")
                self._fail(future, ModelLoadError(f"Loading embedding model '{self.model_name}' was interrupted"))

    def _fail(self, future: Future, error: ModelLoadError) -> None:
        with self._lock:
            if self._future is future:
                self._future = None
        future.set_exception(error)

    def embed(self, sentences: Sequence[str]) -> np.ndarray:
        """
        Encode sentences into an (n, dim) array.

        Args:
            sentences: Non-empty sentences to encode

        Returns:
            One embedding row per sentence

        Raises:
            ComputationError: for empty sentences or a malformed model output
            ModelLoadError: if the model cannot be loaded
        """
        sentences = list(sentences)
        if not sentences:
            return np.zeros((0, 0), dtype=np.float64)
        for i, sentence in enumerate(sentences):
            if not isinstance(sentence, str) or not sentence.strip():
                raise ComputationError(f"Cannot embed empty sentence at position {i}")

        model = self.ensure_loaded()
        with time_embedding_context():
            vectors = model.encode(
                sentences,
                batch_size=self.batch_size,
                convert_to_numpy=True,
                show_progress_bar=False,
            )

        vectors = np.asarray(vectors, dtype=np.float64)
        if vectors.ndim != 2 or vectors.shape[0] != len(sentences):
            raise ComputationError(
                f"Model returned embeddings of shape {vectors.shape} for {len(sentences)} sentences"
            )
        return vectors

    def embed_one(self, sentence: str) -> np.ndarray:
        """Encode a single sentence into a 1-D vector."""
        return self.embed([sentence])[0]


_default_provider: Optional[EmbeddingProvider] = None
_default_provider_lock = threading.Lock()


def get_default_provider() -> EmbeddingProvider:
    """The process-wide provider used when none is injected."""
    global _default_provider
    with _default_provider_lock:
        if _default_provider is None:
            _default_provider = EmbeddingProvider()
        return _default_provider
