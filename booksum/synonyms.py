"""
Lexical variation: swaps longer content words for short synonyms.
"""

import logging
import threading
from functools import lru_cache
from typing import AbstractSet, List, Optional, Protocol, Sequence

from .config import MAX_SYNONYM_LENGTH, MIN_SYNONYM_WORD_LENGTH, NLTK_AUTO_DOWNLOAD
from .constants import STOP_WORDS, TOKEN_PARTS_PATTERN
from .exceptions import SynonymSourceError
from .models import SynonymEntry
from .utils import capitalize_first, ordered_unique

logger = logging.getLogger(__name__)


class SynonymSource(Protocol):
    def lookup(self, word: str) -> Optional[SynonymEntry]:
        """Synonyms of a lowercase word, or None when the word is unknown."""
        ...


def choose_synonym(candidates: Sequence[str], max_length: int = MAX_SYNONYM_LENGTH) -> Optional[str]:
    """First candidate no longer than max_length, else the first candidate, else None."""
    for candidate in candidates:
        if len(candidate) <= max_length:
            return candidate
    return candidates[0] if candidates else None


_wordnet_lock = threading.Lock()
_wordnet_ready = False


def reset_wordnet() -> None:
    """Forget a previous availability check so the next lookup checks again."""
    global _wordnet_ready
    with _wordnet_lock:
        _wordnet_ready = False


def ensure_wordnet(auto_download: bool = NLTK_AUTO_DOWNLOAD) -> None:
    """
    Make sure the WordNet corpus is available, downloading it if allowed.

    Only a successful check is remembered; a failed download is retried on
    the next call.

    Raises:
        SynonymSourceError: if the corpus is missing and cannot be downloaded
    """
    global _wordnet_ready
    import nltk

    with _wordnet_lock:
        if _wordnet_ready:
            return
        try:
            nltk.data.find("corpora/wordnet")
        except LookupError:
            if not auto_download:
                raise SynonymSourceError("NLTK wordnet corpus is not installed")
            logger.info("Downloading NLTK wordnet corpus...")
            if not nltk.download("wordnet", quiet=True):
                raise SynonymSourceError("Failed to download NLTK wordnet corpus")
            try:
                nltk.data.find("corpora/wordnet")
            except LookupError as e:
                raise SynonymSourceError("NLTK wordnet corpus missing after download") from e
        _wordnet_ready = True


@lru_cache(maxsize=8192)
def _wordnet_lemmas(word: str, pos: str) -> tuple:
    """
    Lemma names of the word's synsets for one part of speech, in synset
    order, with "_" mapped to a space. Empty unless the word is itself one
    of the lemmas, so inflected forms ("mammals") have no entry.
    """
    from nltk.corpus import wordnet

    names = ordered_unique(
        lemma.name().replace("_", " ")
        for synset in wordnet.synsets(word, pos=pos)
        for lemma in synset.lemmas()
    )
    if word not in (name.lower() for name in names):
        return ()
    return tuple(names)


class WordNetSynonymSource:
    """Synonym source backed by NLTK WordNet; lemmas come in synset order."""

    def __init__(self, auto_download: bool = NLTK_AUTO_DOWNLOAD):
        self.auto_download = auto_download

    def lookup(self, word: str) -> Optional[SynonymEntry]:
        from nltk.corpus import wordnet

        ensure_wordnet(self.auto_download)
        try:
            nouns = list(_wordnet_lemmas(word, wordnet.NOUN))
            verbs = list(_wordnet_lemmas(word, wordnet.VERB))
        except LookupError as e:
            reset_wordnet()
            raise SynonymSourceError(f"NLTK wordnet corpus unavailable: {e}") from e
        if not nouns and not verbs:
            return None
        return SynonymEntry(word=word, nouns=nouns, verbs=verbs)


class LexicalVariationTransformer:
    """
    Rewrites a sentence word by word. Words of at least min_word_length
    characters that are not stop words are replaced by a synonym chosen with
    choose_synonym(); surrounding punctuation is kept and a leading capital
    is carried over to the replacement.
    """

    def __init__(
        self,
        source: SynonymSource,
        stop_words: Optional[AbstractSet[str]] = None,
        min_word_length: int = MIN_SYNONYM_WORD_LENGTH,
        max_synonym_length: int = MAX_SYNONYM_LENGTH,
    ):
        self.source = source
        self.stop_words = STOP_WORDS if stop_words is None else stop_words
        self.min_word_length = min_word_length
        self.max_synonym_length = max_synonym_length

    def replace_word(self, token: str) -> str:
        lead, core, trail = TOKEN_PARTS_PATTERN.match(token).groups()
        lowered = core.lower()
        if len(core) < self.min_word_length or lowered in self.stop_words:
            return token

        entry = self.source.lookup(lowered)
        if entry is None:
            return token
        synonym = choose_synonym(entry.candidates, self.max_synonym_length)
        if synonym is None:
            return token

        if core[:1].isupper():
            synonym = capitalize_first(synonym)
        return f"{lead}{synonym}{trail}"

    def transform(self, sentence: str) -> str:
        return " ".join(self.replace_word(token) for token in sentence.split(" "))

    def transform_all(self, sentences: Sequence[str]) -> List[str]:
        return [self.transform(s) for s in sentences]
