# Error types raised by the game core. All are ValueErrors so the console
# loop can report them and re-prompt.


class MastermindError(ValueError):
    """Base class for every rule violation in the game."""


class InvalidConfiguration(MastermindError):
    """Number of colors or attempts outside the supported bounds."""


class LengthMismatch(MastermindError):
    """
        Raised when a guess and the secret have different lengths.
    Attributes:
        expected (int): Length of the secret sequence.
        actual (int): Length of the offending guess."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Code length must be {expected}, but got {actual}."
        )


class UnknownColor(MastermindError):
    """
        Raised when guess tokens are not part of the active palette.
    Attributes:
        invalid (list[str]): The offending tokens, in guess order.
        palette (list[str]): The valid colors."""

    def __init__(self, invalid: list[str], palette: list[str]):
        self.invalid = list(invalid)
        self.palette = list(palette)
        super().__init__(
            f"Invalid colors: {', '.join(self.invalid)}. "
            f"Allowed: {', '.join(self.palette)}."
        )
