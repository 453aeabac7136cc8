# Configuration: colors, code length, attempts, locale, display
import copy

from .errors import InvalidConfiguration

DEFAULT_RULES = {
    "code_length": 4,  # Number of colors in the secret
    "max_attempts": 10,  # Number of guesses per game
    "code_length_bounds": (4, 10),  # Allowed range for code_length
    "attempt_bounds": (10, 100),  # Allowed range for max_attempts
    "locale": "en",  # Language for color names and messages
    "colors": [
        "red",
        "blue",
        "green",
        "yellow",
        "orange",
        "purple",
        "pink",
        "white",
        "black",
        "brown",
    ],  # Canonical color ids, display names live in game/locale.py
    "display": {
        "marker": "■",  # Glyph printed once per feedback slot
        "bucket_colors": {  # ANSI escape per feedback bucket
            "well_placed": "\033[32m",  # green
            "misplaced": "\033[33m",  # yellow
            "absent": "\033[31m",  # red
        },
        "reset": "\033[0m",
    },
}


def validate_rules(rules: dict) -> dict:
    """
    Check that code length and attempts are inside their bounds.

    Args:
        rules (dict): The ruleset to check.
    Returns:
        dict: The same ruleset, for chaining.
    Raises:
        InvalidConfiguration: If a value is out of range.
    """

    low, high = rules["code_length_bounds"]
    length = rules["code_length"]
    if not isinstance(length, int) or not low <= length <= high:
        raise InvalidConfiguration(
            f"Number of colors must be between {low} and {high}, "
            f"but got {length}."
        )

    # The secret is drawn without repetition from the palette
    if length > len(rules["colors"]):
        raise InvalidConfiguration(
            f"Number of colors ({length}) exceeds palette size "
            f"({len(rules['colors'])})."
        )

    low, high = rules["attempt_bounds"]
    attempts = rules["max_attempts"]
    if not isinstance(attempts, int) or not low <= attempts <= high:
        raise InvalidConfiguration(
            f"Number of attempts must be between {low} and {high}, "
            f"but got {attempts}."
        )

    return rules


def make_rules(code_length=None, max_attempts=None, locale=None) -> dict:
    """
    Build a ruleset from DEFAULT_RULES with optional overrides.

    Args:
        code_length (int, optional): Number of colors in the secret.
        max_attempts (int, optional): Number of guesses allowed.
        locale (str, optional): Language code ("en" or "fr").
    Returns:
        dict: A validated, independent copy of the rules.
    """

    rules = copy.deepcopy(DEFAULT_RULES)
    if code_length is not None:
        rules["code_length"] = code_length
    if max_attempts is not None:
        rules["max_attempts"] = max_attempts
    if locale is not None:
        rules["locale"] = locale
    return validate_rules(rules)
