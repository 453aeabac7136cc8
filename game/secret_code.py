import random

from .errors import InvalidConfiguration
from .feedback import evaluate
from .locale import DEFAULT_LOCALE, color_name
from .ruleset import DEFAULT_RULES


class SequenceGenerator:
    """
        Produces the color palette for a locale and draws secret sequences.
    Attributes:
        locale (str): Locale used to label the colors.
        rng (random.Random): Random source used for drawing secrets.
        color_ids (list[str]): Canonical color ids, in palette order."""

    def __init__(self, locale=DEFAULT_LOCALE, rng=None, color_ids=None):
        """
        Initialize a SequenceGenerator.

        Args:
            locale (str): Locale for display names. Defaults to English.
            rng (random.Random, optional): Random source. A new unseeded
            instance is created when omitted.
            color_ids (list[str], optional): Canonical palette. Defaults to
            the colors of DEFAULT_RULES.
        """

        self.locale = locale
        self.rng = rng or random.Random()
        self.color_ids = list(color_ids or DEFAULT_RULES["colors"])

    def colors(self) -> list[str]:
        """
        Return the palette as display names for the active locale.

        Returns:
            list[str]: The color names in fixed palette order.
        """

        return [color_name(c, self.locale) for c in self.color_ids]

    def generate(self, number_of_colors: int) -> list[str]:
        """
        Draw a secret of distinct colors in random order.

        Args:
            number_of_colors (int): Length of the secret.

        Returns:
            list[str]: number_of_colors distinct palette colors.

        Raises:
            InvalidConfiguration: If the length is outside the supported
            bounds or larger than the palette.
        """

        low, high = DEFAULT_RULES["code_length_bounds"]
        if not low <= number_of_colors <= high:
            raise InvalidConfiguration(
                f"Number of colors must be between {low} and {high}, "
                f"but got {number_of_colors}."
            )

        palette = self.colors()
        if number_of_colors > len(palette):
            raise InvalidConfiguration(
                f"Number of colors ({number_of_colors}) exceeds palette "
                f"size ({len(palette)})."
            )

        # Shuffle and take a prefix: no color can repeat
        self.rng.shuffle(palette)
        return palette[:number_of_colors]

    def set_locale(self, locale: str):
        self.locale = locale

    def resolve(self, token: str):
        """
        Return the canonical id for a display name of the active locale,
        or None when the token is not in the palette.
        """

        wanted = token.strip().lower()
        for color_id in self.color_ids:
            if color_name(color_id, self.locale).lower() == wanted:
                return color_id
        return None


class Code:
    """
        Represents the secret code for the Mastermind game.
    Attributes:
        sequence (list[str]): Canonical color ids of the code, in order.
        rules (dict): The ruleset for validation.
        generator (SequenceGenerator): Palette and random source."""

    def __init__(self, sequence=None, rules=None, generator=None):
        """
        Initialize a Code instance.

        Args:
            sequence (list or None): Canonical color ids representing the code.
            rules (dict or None): Reference to the ruleset (defines length,
            colors, locale).
            generator (SequenceGenerator or None): Generator to draw from.
        """

        self.rules = rules or DEFAULT_RULES
        self.generator = generator or SequenceGenerator(
            locale=self.rules.get("locale", DEFAULT_LOCALE),
            color_ids=self.rules["colors"],
        )
        self.sequence = list(sequence) if sequence else []

    def generate_random(self):
        """
        Generate a random secret according to the rules and keep it as
        canonical ids.
        """

        drawn = self.generator.generate(self.rules["code_length"])
        self.sequence = [self.generator.resolve(name) for name in drawn]

    def compare_with(self, guess) -> tuple[int, int]:
        """
        Compare this secret code with a validated Guess object.

        Args:
            guess (Guess): A Guess whose display names are mapped to
            canonical ids before scoring.

        Returns:
            tuple[int, int]: (well_placed, misplaced)
        """

        guess_ids = [self.generator.resolve(token) for token in guess.sequence]
        return evaluate(guess_ids, self.sequence)

    def display_names(self):
        return [color_name(c, self.generator.locale) for c in self.sequence]

    def as_string(self):
        """
        Return the code as display names of the active locale
        (e.g. 'Red, Blue, Green, Yellow').
        """
        return ", ".join(self.display_names()) if self.sequence else "EMPTY"

    def __str__(self):
        return self.as_string()
