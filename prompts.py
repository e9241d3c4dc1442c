"""Prompts and messages for the interactive suggestion loop."""

NAME_PROMPT = "\n\nEnter a name to generate suggestions (or type 'exit' to quit):"
INVALID_NAME = "Please enter a valid name."
ALLITERATION_PROMPT = "Do you want alliteration? (yes/no) [default: yes]:"
GENERATING = "\nGenerating suggestions...\n"
NO_MORE_SUGGESTIONS = "\nNo more unique suggestions can be generated for this name."
NEXT_ACTION_PROMPT = "\nWould you like to generate more, start a new name, or exit? (more/new/exit) [default: more]"
INVALID_ACTION = "Invalid input. Please type 'more', 'new', or 'exit'."
GOODBYE = "Goodbye!"


def max_length_prompt(default: int) -> str:
    return f"Enter the maximum length [default: {default}]:"


def invalid_max_length(default: int) -> str:
    return f"Invalid input. Using default max length of {default}."


def no_suggestions(name: str) -> str:
    return f"No suggestions could be generated for '{name}'."


def word_list_error(error) -> str:
    """Message shown when the dictionary cannot be loaded"""
    return f"Error: {error.message} at {error.path}.\n{error.hint}"
