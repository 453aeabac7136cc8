from .errors import LengthMismatch, UnknownColor
from .ruleset import DEFAULT_RULES


def parse_guess(text: str) -> list[str]:
    """
    Split free text like "Red, blue ,Green" into trimmed color tokens.
    Empty tokens are dropped.
    """
    if not text:
        return []
    return [token.strip() for token in text.split(",") if token.strip()]


class Guess:
    """
        Represents a single player guess in the Mastermind game.
    Attributes:
        sequence (list[str]): The guessed sequence of colors.
        rules (dict): The ruleset for validation.
        palette (list[str]): Color names accepted for this guess.
        well_placed (int | None): Colors in the correct position.
        misplaced (int | None): Colors present elsewhere in the secret.
        is_valid (bool): Whether the guess is valid according to the rules."""

    def __init__(self, sequence: list[str] | str | None, rules=None, palette=None):
        """
        Initialize a Guess instance.
        Args:
            sequence (list[str] | str | None): The guessed sequence, either as
            tokens or as comma-separated text.
            rules (dict, optional): The ruleset for validation. Defaults to DEFAULT_RULES.
            palette (list[str], optional): Valid color names. Defaults to the
            canonical colors of the rules.
        """

        # --- Input normalization ---
        if isinstance(sequence, str):
            self.sequence = parse_guess(sequence)
        elif sequence is None:
            self.sequence = []
        else:
            self.sequence = [c.strip() for c in sequence]

        # --- Attribute setup ---
        self.rules = rules or DEFAULT_RULES
        self.palette = list(palette or self.rules["colors"])
        self.well_placed = None
        self.misplaced = None
        self.is_valid = False

        # --- Validation ---
        if self.sequence:
            self.is_valid = self.validate(strict=False)

    def validate(self, strict: bool = True):
        """
        Check if the guess follows the rules (length, valid colors).
        Repeated colors are allowed.

        Args:
            strict (bool): If True, raise on invalid guess.
        Returns:
            bool: True if valid, False otherwise.
        Raises:
            LengthMismatch: Wrong number of colors (strict only).
            UnknownColor: Colors outside the palette (strict only).
        """

        def fail(error: ValueError) -> bool:
            if strict:
                raise error
            return False

        # Length check
        if len(self.sequence) != self.rules["code_length"]:
            return fail(
                LengthMismatch(self.rules["code_length"], len(self.sequence))
            )

        # Color check, case-insensitive
        allowed = {c.lower() for c in self.palette}
        invalid = [c for c in self.sequence if c.lower() not in allowed]
        if invalid:
            return fail(UnknownColor(invalid, self.palette))

        return True

    def apply_feedback(self, feedback: tuple[int, int]):
        """
        Store feedback values after evaluation by the Board/Code.
        Args:
            feedback (tuple[int, int]): (well_placed, misplaced)
        """
        self.well_placed = feedback[0]
        self.misplaced = feedback[1]

    def get_feedback(self):
        return (self.well_placed, self.misplaced)

    def get_guess(self):
        return self.sequence

    def as_string(self):
        return ", ".join(self.sequence) if self.sequence else "EMPTY"

    def __str__(self):
        return self.as_string()
