import argparse
import logging
import random
import sys
from typing import Callable, List, Optional
from pydantic import ValidationError

import prompts
from generator_config import GeneratorSettings, load_settings
from name_generator import SuggestionGenerator
from word_source import WordListError, load

class EndSession(Exception):
    """Raised when the user exits or input runs out"""


class InteractiveSession:
    """Runs the name / preferences / suggestions loop over line-based I/O"""

    def __init__(
        self,
        generator: SuggestionGenerator,
        settings: GeneratorSettings,
        read_line: Optional[Callable[[], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ):
        self.generator = generator
        self.settings = settings
        self.read_line = read_line or input
        self.write = write or print

    def run(self) -> None:
        """Loop until the user types exit or input ends"""
        try:
            while True:
                name = self._ask_name()
                if name is None:
                    continue
                alliteration = self._ask_alliteration()
                max_length = self._ask_max_length()
                self._suggest_until_done(name, alliteration, max_length)
        except EndSession:
            self.write(prompts.GOODBYE)

    def _ask(self, prompt: str) -> str:
        self.write(prompt)
        try:
            return self.read_line().strip()
        except (EOFError, KeyboardInterrupt):
            raise EndSession() from None

    def _ask_name(self) -> Optional[str]:
        name = self._ask(prompts.NAME_PROMPT)
        if name.lower() == "exit":
            raise EndSession()
        if not name:
            self.write(prompts.INVALID_NAME)
            return None
        return name

    def _ask_alliteration(self) -> bool:
        answer = self._ask(prompts.ALLITERATION_PROMPT).lower()
        return answer in ("", "yes")

    def _ask_max_length(self) -> int:
        default = self.settings.default_max_length
        answer = self._ask(prompts.max_length_prompt(default))
        if not answer:
            return default
        try:
            max_length = int(answer)
        except ValueError:
            max_length = 0
        if max_length <= 0:
            self.write(prompts.invalid_max_length(default))
            return default
        return max_length

    def _suggest_until_done(self, name: str, alliteration: bool, max_length: int) -> None:
        """Print rounds of suggestions until the user asks for a new name"""
        count = self.settings.suggestion_count
        while True:
            self.write(prompts.GENERATING)
            suggestions = self.generator.suggest(name, alliteration=alliteration, max_length=max_length, count=count)

            if not suggestions:
                self.write(prompts.no_suggestions(name))
                return

            for suggestion in suggestions:
                self.write(suggestion)

            if len(suggestions) < count:
                self.write(prompts.NO_MORE_SUGGESTIONS)
                return

            choice = self._ask(prompts.NEXT_ACTION_PROMPT).lower() or "more"
            if choice == "new":
                return
            if choice == "exit":
                raise EndSession()
            if choice != "more":
                self.write(prompts.INVALID_ACTION)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Suggest names built from dictionary adjectives and nouns')
    parser.add_argument('--dictionary', dest='dictionary_path', help='Path to a newline-delimited word list')
    parser.add_argument('--count', dest='suggestion_count', type=int, help='Suggestions per round')
    parser.add_argument('--max-length', dest='default_max_length', type=int, help='Default maximum suggestion length')
    parser.add_argument('--seed', type=int, help='Seed for reproducible suggestions')
    parser.add_argument('--log-level', help='Logging level (DEBUG, INFO, WARNING, ...)')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    try:
        settings = load_settings(**vars(args))
    except ValidationError as e:
        print(f"Invalid settings: {e}")
        return 2

    logging.basicConfig(level=settings.log_level)

    try:
        words = load(settings.dictionary_path)
    except WordListError as e:
        print(prompts.word_list_error(e))
        return 1

    generator = SuggestionGenerator(words, rng=random.Random(settings.seed))
    InteractiveSession(generator, settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
