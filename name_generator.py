import logging
import random
from typing import List, Optional, Sequence

from datamodels import GenerationRequest, WordSet
from generator_config import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_SUGGESTION_COUNT,
    MAX_PICK_ATTEMPTS,
    MAX_STALE_CANDIDATES,
    MAX_WORDS_PER_SUGGESTION,
)

logger = logging.getLogger(__name__)


def filter_by_initial(words: Sequence[str], initial: str) -> List[str]:
    """Keep words whose first character is `initial`"""
    return [word for word in words if word[:1] == initial]


def normalize_combination(words: Sequence[str]) -> str:
    """Order-independent key for a set of appended words"""
    return " ".join(sorted(words))


def title_word(word: str) -> str:
    """Upper-case the first letter only"""
    return word[:1].upper() + word[1:]


def generate(
    name: str,
    count: int,
    adjectives: Sequence[str],
    nouns: Sequence[str],
    alliteration: bool,
    max_length: int,
    rng: Optional[random.Random] = None,
    max_words: int = MAX_WORDS_PER_SUGGESTION,
    max_attempts: int = MAX_PICK_ATTEMPTS,
    max_stale: int = MAX_STALE_CANDIDATES,
) -> List[str]:
    """
    Build up to `count` suggestions of the form name + TitleCasedWords.

    Every suggestion is at most `max_length` characters, appends at least one
    word and never repeats a word. No two suggestions use the same set of
    words, regardless of order. Returns fewer than `count` when the space of
    combinations runs out.
    """
    rng = rng or random.Random()
    suggestions: List[str] = []
    if not name:
        return suggestions

    if alliteration:
        initial = name[0].lower()
        adjectives = filter_by_initial(adjectives, initial)
        nouns = filter_by_initial(nouns, initial)

        if not adjectives or not nouns:
            logger.warning(f"No adjectives or nouns found starting with '{initial}'")
            return suggestions
    else:
        adjectives = list(adjectives)
        nouns = list(nouns)

    if not adjectives and not nouns:
        logger.warning("No words available to build suggestions")
        return suggestions

    shortest = min(len(word) for word in adjectives + nouns)
    if len(name) + shortest > max_length:
        logger.warning(f"Max length {max_length} leaves no room for a word after '{name}'")
        return suggestions

    rng.shuffle(adjectives)
    rng.shuffle(nouns)

    available = len(set(adjectives) | set(nouns))
    # Only meaningful when both lists have words
    ceiling = len(adjectives) * len(nouns) if adjectives and nouns else None
    used_combinations = set()
    stale = 0

    while len(suggestions) < count:
        suggestion = name
        used_words: List[str] = []
        word_limit = rng.randint(1, max_words)
        attempts = 0

        while attempts < max_attempts and len(used_words) < word_limit:
            attempts += 1

            # Coin flip, falling back to whichever list has words
            if adjectives and (not nouns or rng.randrange(2) == 0):
                word = rng.choice(adjectives)
            else:
                word = rng.choice(nouns)

            if word not in used_words:
                titled = title_word(word)
                if len(suggestion) + len(titled) <= max_length:
                    suggestion += titled
                    used_words.append(word)

            if len(used_words) >= available:
                break

        normalized = normalize_combination(used_words)
        if used_words and len(suggestion) <= max_length and normalized not in used_combinations:
            suggestions.append(suggestion)
            used_combinations.add(normalized)
            stale = 0
        else:
            stale += 1

        if ceiling is not None and len(used_combinations) >= ceiling:
            logger.info(f"Exhausted {ceiling} combinations for '{name}'")
            break
        if stale >= max_stale:
            logger.info(f"Gave up after {stale} repeated candidates for '{name}'")
            break

    return suggestions


class SuggestionGenerator:
    """Generates suggestions from a loaded word set"""

    def __init__(self, words: WordSet, rng: Optional[random.Random] = None):
        self.words = words
        self.rng = rng or random.Random()

    def __call__(self, request: GenerationRequest) -> List[str]:
        return generate(
            request.name,
            request.count,
            self.words.adjectives,
            self.words.nouns,
            request.alliteration,
            request.max_length,
            rng=self.rng,
        )

    def suggest(self, name: str, alliteration: bool = True, max_length: int = DEFAULT_MAX_LENGTH,
                count: int = DEFAULT_SUGGESTION_COUNT) -> List[str]:
        """Validate the parameters and generate one round of suggestions"""
        request = GenerationRequest(name=name, count=count, alliteration=alliteration, max_length=max_length)
        return self(request)
