from .errors import LengthMismatch


def evaluate(guess, secret) -> tuple[int, int]:
    """
    Score a guess against the secret sequence.

    Args:
        guess (Sequence[str]): The guessed colors.
        secret (Sequence[str]): The secret colors, same length as guess.

    Returns:
        tuple[int, int]: (well_placed, misplaced)
        well_placed: colors matching the secret at the same index,
        misplaced: colors present at another, still unmatched index.

    Raises:
        LengthMismatch: If guess and secret differ in length.

    Notes:
        Comparison is case-insensitive. Exact matches are consumed in one
        left-to-right pass before the misplaced scan, so a repeated guess
        color never matches more secret slots than exist. The arguments
        are not modified.
    """

    if len(guess) != len(secret):
        raise LengthMismatch(len(secret), len(guess))

    well_placed = 0
    misplaced = 0

    remaining_secret = [c.lower() for c in secret]
    remaining_guess = [c.lower() for c in guess]

    # Exact position matches, consumed as they are found
    for i in range(len(remaining_secret)):
        if remaining_guess[i] != remaining_secret[i]:
            continue
        well_placed += 1
        remaining_guess[i] = None
        remaining_secret[i] = None

    # Remaining guess colors, each takes at most one secret slot
    for color in remaining_guess:
        if color is None or color not in remaining_secret:
            continue
        misplaced += 1
        remaining_secret[remaining_secret.index(color)] = None

    return (well_placed, misplaced)


def is_win(well_placed: int, length: int) -> bool:
    return well_placed == length


def feedback_buckets(well_placed: int, misplaced: int, length: int):
    """
    Split a score into the three rendering buckets, in render order:
    well placed, misplaced, neither.
    """
    return (well_placed, misplaced, length - well_placed - misplaced)
