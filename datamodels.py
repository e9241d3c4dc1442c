from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field

from generator_config import DEFAULT_MAX_LENGTH, DEFAULT_SUGGESTION_COUNT


class WordSet(BaseModel):
    """Classified dictionary words, loaded once and never mutated"""
    model_config = ConfigDict(frozen=True)

    adjectives: Tuple[str, ...] = Field(default=(), description="Lowercase adjective candidates")
    nouns: Tuple[str, ...] = Field(default=(), description="Lowercase noun candidates")

    def __len__(self) -> int:
        return len(self.adjectives) + len(self.nouns)


class GenerationRequest(BaseModel):
    """Parameters for one round of suggestions"""
    name: str = Field(min_length=1, description="Base name the words are appended to")
    count: int = Field(DEFAULT_SUGGESTION_COUNT, ge=1, description="Target number of suggestions")
    alliteration: bool = Field(True, description="Only use words sharing the name's first letter")
    max_length: int = Field(DEFAULT_MAX_LENGTH, gt=0, description="Maximum suggestion length in characters")
