"""
Post-processing of the selected sentences into readable prose.
"""

from typing import List, Sequence

from .constants import REFERENCE_MARKER_PATTERN, TRANSITION_WORDS
from .utils import capitalize_first, ordered_unique


def deduplicate(sentences: Sequence[str]) -> List[str]:
    return ordered_unique(sentences)


def strip_reference_markers(sentence: str) -> str:
    """Remove "[12]"-style markers and trim."""
    return REFERENCE_MARKER_PATTERN.sub("", sentence).strip()


def add_transitions(sentences: Sequence[str], transitions: Sequence[str] = TRANSITION_WORDS) -> List[str]:
    """Prefix every sentence but the first with a connective, cycling through `transitions`."""
    processed = []
    for index, sentence in enumerate(sentences):
        if index == 0:
            processed.append(sentence)
        else:
            processed.append(f"{transitions[index % len(transitions)]}, {capitalize_first(sentence)}")
    return processed


def clean_sentences(sentences: Sequence[str]) -> List[str]:
    """Deduplicate, strip reference markers, drop emptied sentences and capitalize."""
    cleaned = [strip_reference_markers(s) for s in deduplicate(sentences)]
    return [capitalize_first(s) for s in cleaned if s]


def join_summary(sentences: Sequence[str]) -> str:
    """Add connectives to already cleaned sentences and join them with single spaces."""
    return " ".join(add_transitions(sentences))


def post_process_summary(sentences: Sequence[str]) -> str:
    """
    Turns selected sentences into the final summary.

    Duplicates are removed, reference markers stripped, first letters
    capitalized and connectives added before the sentences are joined
    with single spaces.

    Args:
        sentences: Selected sentences, in output order

    Returns:
        The summary, or an empty string when nothing was selected
    """
    return join_summary(clean_sentences(sentences))
