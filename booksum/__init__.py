"""
BookSum Extractive Summarizer

A stateless extractive summarization pipeline: sentences are segmented,
scored with lexical, frequency, semantic, positional and length signals,
selected, lightly rephrased and joined back into prose.
"""

__version__ = "0.1.0"

from .pipeline import Summarizer, summarize

__all__ = ["Summarizer", "summarize", "__version__"]
