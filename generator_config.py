import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_DICTIONARY_PATH = "/usr/share/dict/words"
DEFAULT_SUGGESTION_COUNT = 20
DEFAULT_MAX_LENGTH = 32
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Generator tuning
MAX_WORDS_PER_SUGGESTION = 5
MAX_PICK_ATTEMPTS = 100
MAX_STALE_CANDIDATES = 1000

# Word classification, lengths are exclusive bounds
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 12
ADJECTIVE_SUFFIXES = ("y", "ous")
NOUN_SUFFIXES = ("er", "ion", "ist")

ENV_PREFIX = "ALLITERATION_"

INSTALL_HINTS = {
    "linux": "For Linux, install 'wamerican' with:\n  sudo apt-get install wamerican",
    "macos": "For macOS, install a dictionary with Homebrew:\n  brew install wordnet",
}


class GeneratorSettings(BaseModel):
    """Runtime settings for the suggestion CLI"""
    dictionary_path: str = Field(DEFAULT_DICTIONARY_PATH, description="Newline-delimited word list")
    suggestion_count: int = Field(DEFAULT_SUGGESTION_COUNT, gt=0, description="Suggestions per round")
    default_max_length: int = Field(DEFAULT_MAX_LENGTH, gt=0, description="Max length when input is empty or invalid")
    log_level: str = Field(DEFAULT_LOG_LEVEL, description="Logging level name")
    seed: Optional[int] = Field(None, description="Seed for reproducible suggestions")

    @field_validator("log_level", mode="before")
    @classmethod
    def check_log_level(cls, value):
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_settings(**overrides) -> GeneratorSettings:
    """Build settings from .env / environment variables, then explicit overrides.

    Environment variables are ``ALLITERATION_`` followed by the upper-cased
    field name, e.g. ``ALLITERATION_DICTIONARY_PATH``. Overrides set to None
    are ignored so argparse defaults do not mask the environment.
    """
    load_dotenv()

    values = {}
    for field_name in GeneratorSettings.model_fields:
        env_value = os.getenv(f"{ENV_PREFIX}{field_name.upper()}")
        if env_value:
            values[field_name] = env_value

    # Short alias for the most common setting
    if "dictionary_path" not in values and os.getenv(f"{ENV_PREFIX}DICTIONARY"):
        values["dictionary_path"] = os.getenv(f"{ENV_PREFIX}DICTIONARY")

    values.update({k: v for k, v in overrides.items() if v is not None})
    return GeneratorSettings(**values)
