from .secret_code import Code, SequenceGenerator
from .guess import Guess
from .feedback import feedback_buckets, is_win
from .locale import DEFAULT_LOCALE
from .ruleset import DEFAULT_RULES


class Board:
    """Main game board class: manages gameplay, secret code, and guess history."""

    def __init__(self, rules=None, rng=None):
        """Initialize the board with a given ruleset and random source."""
        self.rules = rules or DEFAULT_RULES
        self.locale = self.rules.get("locale", DEFAULT_LOCALE)
        self.generator = SequenceGenerator(
            locale=self.locale, rng=rng, color_ids=self.rules["colors"]
        )
        self.secret_code = Code(rules=self.rules, generator=self.generator)
        self.guesses = []
        self.current_attempt = 0
        self.max_attempts = self.rules.get("max_attempts", 10)
        self.is_over = False
        self.is_won = False

    def initialize_game(self):
        """Set up a new game: generate a secret code and reset state."""
        self.secret_code = Code(rules=self.rules, generator=self.generator)
        self.secret_code.generate_random()
        self.guesses = []
        self.current_attempt = 0
        self.is_over = False
        self.is_won = False

    def palette(self):
        """Return the color names the player may use."""
        return self.generator.colors()

    def make_guess(self, guess_input):
        """
        Create a Guess from user input, evaluate it, and update state.

        Args:
            guess_input (list[str] | str): Tokens or comma-separated text.
        Returns:
            tuple[int, int]: (well_placed, misplaced)
        Raises:
            LengthMismatch, UnknownColor: The guess is rejected and no
            attempt is consumed.
        """

        new_guess = Guess(guess_input, rules=self.rules, palette=self.palette())
        new_guess.validate(strict=True)

        feedback = self.secret_code.compare_with(new_guess)
        new_guess.apply_feedback(feedback)

        self.guesses.append(new_guess)
        self.current_attempt += 1

        self.check_game_over()
        return feedback

    def get_feedback_history(self):
        """Return the full history of guesses and feedback."""
        return [(g.get_guess(), g.get_feedback()) for g in self.guesses]

    def check_game_over(self):
        """Check if the game is finished (win or all attempts used)."""
        well_placed = self.guesses[-1].get_feedback()[0]
        if is_win(well_placed, self.rules["code_length"]):
            self.is_over = True
            self.is_won = True
            return

        if self.remaining_attempts() <= 0:
            self.is_over = True

    def reveal_code(self):
        """Return the secret code (used at the end of the game)."""
        return self.secret_code.as_string()

    def reset(self):
        """Reset the board for a new game with the same rules."""
        self.initialize_game()

    def remaining_attempts(self):
        """Return how many guesses are left."""
        return max(0, self.max_attempts - self.current_attempt)

    def format_feedback(self, well_placed, misplaced, colored=True):
        """
        Build the three-bucket marker line: well placed, misplaced, neither.

        Args:
            well_placed (int): Colors in the correct position.
            misplaced (int): Colors present elsewhere.
            colored (bool): Wrap markers in ANSI colors.
        Returns:
            str: One marker per slot, separated by spaces.
        """
        display = self.rules["display"]
        marker = display["marker"]
        buckets = zip(
            ("well_placed", "misplaced", "absent"),
            feedback_buckets(well_placed, misplaced, self.rules["code_length"]),
        )

        parts = []
        for name, count in buckets:
            for _ in range(count):
                if colored:
                    parts.append(
                        display["bucket_colors"][name] + marker + display["reset"]
                    )
                else:
                    parts.append(marker)
        return " ".join(parts)

    def render_feedback(self, well_placed, misplaced):
        print(self.format_feedback(well_placed, misplaced))

    def render(self, width=None):
        """Render a text-based representation of the board (for CLI)."""

        title = " Mastermind "
        rows = []
        for idx, guess in enumerate(self.guesses, start=1):
            well_placed, misplaced = guess.get_feedback()
            rows.append(
                f"| {idx:>3} | {guess.as_string()} | "
                f"{self.format_feedback(well_placed, misplaced, colored=False)} |"
            )

        width = width or max([len(title) + 4] + [len(r) for r in rows])
        line = "+" + "-" * (width - 2) + "+"

        # build the gameboard
        print(line)
        print("|" + title.center(width - 2, "+") + "|")
        print(line)
        for row in rows:
            print(row)
        print(line)
