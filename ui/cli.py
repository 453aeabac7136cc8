# # Command-line interface (text-based play)

from game.board import Board
from game.errors import InvalidConfiguration, LengthMismatch, UnknownColor
from game.guess import Guess, parse_guess
from game.locale import get_string, resolve_locale
from game.ruleset import DEFAULT_RULES, make_rules


def log_print(msg: str) -> None:
    # first terminate any partial line, then print normally
    print("\r\033[K", end="", flush=True)
    print(msg, flush=True)


def choose_language():
    print("Choose language / Choisissez la langue (en/fr):")
    return resolve_locale(input())


def get_validated_input(prompt, min_value, max_value, locale):
    """Ask until the player enters an integer inside [min_value, max_value]."""
    while True:
        print(prompt)
        raw = input().strip()
        try:
            value = int(raw)
        except ValueError:
            value = None

        if value is not None and min_value <= value <= max_value:
            return value

        print(get_string("InvalidInput", locale, min_value, max_value))


def get_player_guess(board):
    """
    Ask until the player enters a guess the board accepts.

    Args:
        board (Board): The running game.
    Returns:
        list[str]: The guess tokens, already checked for length and colors.
    """
    locale = board.locale
    length = board.rules["code_length"]
    while True:
        print(get_string("EnterGuess", locale, length))
        guess = Guess(parse_guess(input()), rules=board.rules, palette=board.palette())

        try:
            guess.validate(strict=True)
        except LengthMismatch:
            print(get_string("InvalidGuess", locale, length))
            continue
        except UnknownColor as e:
            print(get_string("InvalidColors", locale, ", ".join(e.invalid)))
            print(get_string("ValidColors", locale, ", ".join(e.palette)))
            continue

        return guess.get_guess()


def _checked_preset(field, value):
    """Return a preset value when the rules accept it, otherwise None."""
    if value is None:
        return None
    try:
        make_rules(**{field: value})
    except InvalidConfiguration as e:
        print(f"Invalid configuration: {e}")
        return None
    return value


def configure_game(locale=None, code_length=None, max_attempts=None):
    """
    Collect the settings that were not given up front and build the rules.
    An out of range preset is asked again; valid presets are kept.
    """
    if locale is None:
        locale = choose_language()
    print(get_string("WelcomeMessage", locale))

    code_length = _checked_preset("code_length", code_length)
    if code_length is None:
        low, high = DEFAULT_RULES["code_length_bounds"]
        code_length = get_validated_input(
            get_string("ChooseColors", locale, low, high), low, high, locale
        )

    max_attempts = _checked_preset("max_attempts", max_attempts)
    if max_attempts is None:
        low, high = DEFAULT_RULES["attempt_bounds"]
        max_attempts = get_validated_input(
            get_string("ChooseAttempts", locale, low, high), low, high, locale
        )

    return make_rules(code_length, max_attempts, locale)


def gameloop(
    locale=None,
    code_length=None,
    max_attempts=None,
    rng=None,
    debug=False,
    plot_path=None,
):
    """
    Play one game on the console.

    Returns:
        Board: The finished board.
    """
    rules = configure_game(locale, code_length, max_attempts)
    locale = rules["locale"]

    b = Board(rules=rules, rng=rng)
    b.initialize_game()
    if debug:
        log_print(f"[debug] secret: {b.reveal_code()}")

    while not b.is_over:
        print(get_string("Attempt", locale, b.current_attempt + 1, b.max_attempts))
        guess = get_player_guess(b)
        well_placed, misplaced = b.make_guess(guess)

        print(get_string("Feedback", locale, well_placed, misplaced))
        print(get_string("VisualFeedback", locale))
        b.render_feedback(well_placed, misplaced)

    b.render()
    if b.is_won:
        print(get_string("WinMessage", locale))
    else:
        print(get_string("LoseMessage", locale))
        print(b.reveal_code())

    if plot_path is not None:
        from plot.plot import plot_feedback_history

        out = plot_feedback_history(
            b.get_feedback_history(), rules["code_length"], plot_path
        )
        log_print(f"[info] feedback chart written to {out}")

    return b
