"""
Utility functions for the summarization pipeline.
"""

from typing import Iterable, List

import numpy as np

from .exceptions import ComputationError


def word_count(sentence: str) -> int:
    """Number of whitespace-separated words in a sentence."""
    return len(sentence.split())


def capitalize_first(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def ordered_unique(items: Iterable[str]) -> List[str]:
    """Drop repeated items, keeping first occurrences in their original order."""
    return list(dict.fromkeys(items))


def cosine_similarity(embeds: np.ndarray, reference: np.ndarray) -> np.ndarray:
    """
    Cosine similarity of each row of `embeds` to the `reference` vector.

    Args:
        embeds: Array of shape (n, dim), or a single vector of shape (dim,)
        reference: Vector of shape (dim,)

    Returns:
        Array of n similarities clipped to [-1, 1]

    Raises:
        ComputationError: on a dimension mismatch or a zero-norm vector
    """
    embeds = np.asarray(embeds, dtype=np.float64)
    reference = np.asarray(reference, dtype=np.float64).reshape(-1)
    if embeds.ndim == 1:
        embeds = embeds.reshape(1, -1)
    if embeds.ndim != 2 or embeds.shape[1] != reference.shape[0]:
        raise ComputationError(
            f"Embedding dimension mismatch: {embeds.shape} vs reference {reference.shape}"
        )

    norms = np.linalg.norm(embeds, axis=1)
    reference_norm = np.linalg.norm(reference)
    if reference_norm == 0 or np.any(norms == 0):
        raise ComputationError("Cosine similarity is undefined for a zero-norm embedding")

    sims = embeds @ reference / (norms * reference_norm)
    return np.clip(sims, -1.0, 1.0)
