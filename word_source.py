import logging
from typing import List, Optional

from datamodels import WordSet
from generator_config import (
    ADJECTIVE_SUFFIXES,
    DEFAULT_DICTIONARY_PATH,
    INSTALL_HINTS,
    MAX_WORD_LENGTH,
    MIN_WORD_LENGTH,
    NOUN_SUFFIXES,
)

logger = logging.getLogger(__name__)

ADJECTIVE = "adjective"
NOUN = "noun"


class WordListError(Exception):
    """Raised when the word list cannot be opened or read"""

    def __init__(self, path: str, message: str):
        super().__init__(f"{message}: {path}")
        self.path = path
        self.message = message

    @property
    def hint(self) -> str:
        return "Ensure the dictionary file exists and is readable.\n" + "\n".join(INSTALL_HINTS.values())


def classify_word(word: str) -> Optional[str]:
    """Return ADJECTIVE, NOUN or None for a lowercase word"""
    if not MIN_WORD_LENGTH < len(word) < MAX_WORD_LENGTH:
        return None
    if word.endswith(ADJECTIVE_SUFFIXES):
        return ADJECTIVE
    if word.endswith(NOUN_SUFFIXES):
        return NOUN
    return None


def classify_words(lines) -> WordSet:
    """Split raw lines into adjective and noun candidates, keeping file order"""
    adjectives: List[str] = []
    nouns: List[str] = []

    for line in lines:
        word = line.strip().lower()
        kind = classify_word(word)
        if kind == ADJECTIVE:
            adjectives.append(word)
        elif kind == NOUN:
            nouns.append(word)

    return WordSet(adjectives=adjectives, nouns=nouns)


def load(path: str = DEFAULT_DICTIONARY_PATH) -> WordSet:
    """
    Load and classify a newline-delimited word list.

    Raises WordListError if the file cannot be opened or fails partway
    through reading. Invalid UTF-8 bytes are replaced, so such lines are
    classified like any other. The caller decides whether a failure is fatal.
    """
    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error(f"Unable to open word list {path}: {e}")
        raise WordListError(path, "Unable to open the dictionary file") from e

    with f:
        try:
            words = classify_words(f)
        except OSError as e:
            logger.error(f"Failed reading word list {path}: {e}")
            raise WordListError(path, "Error reading the dictionary file") from e

    logger.info(f"Loaded {len(words.adjectives)} adjectives and {len(words.nouns)} nouns from {path}")
    return words
