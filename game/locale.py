# Display names and player-facing messages per locale

DEFAULT_LOCALE = "en"

COLOR_NAMES = {
    "en": {
        "red": "Red",
        "blue": "Blue",
        "green": "Green",
        "yellow": "Yellow",
        "orange": "Orange",
        "purple": "Purple",
        "pink": "Pink",
        "white": "White",
        "black": "Black",
        "brown": "Brown",
    },
    "fr": {
        "red": "Rouge",
        "blue": "Bleu",
        "green": "Vert",
        "yellow": "Jaune",
        "orange": "Orange",
        "purple": "Violet",
        "pink": "Rose",
        "white": "Blanc",
        "black": "Noir",
        "brown": "Marron",
    },
}

STRINGS = {
    "en": {
        "WelcomeMessage": "Welcome to Mastermind!",
        "ChooseColors": "How many colors in the secret sequence? ({0}-{1})",
        "ChooseAttempts": "How many attempts? ({0}-{1})",
        "InvalidInput": "Invalid input. Enter a number between {0} and {1}.",
        "Attempt": "Attempt {0}/{1}",
        "EnterGuess": "Enter your guess ({0} colors separated by commas):",
        "InvalidGuess": "Invalid guess. You must enter exactly {0} colors.",
        "InvalidColors": "Invalid colors: {0}",
        "ValidColors": "Valid colors are: {0}",
        "Feedback": "Well placed: {0}, misplaced: {1}",
        "VisualFeedback": "Visual feedback:",
        "WinMessage": "Congratulations, you cracked the code!",
        "LoseMessage": "Game over! The secret sequence was:",
    },
    "fr": {
        "WelcomeMessage": "Bienvenue dans Mastermind !",
        "ChooseColors": "Combien de couleurs dans la séquence secrète ? ({0}-{1})",
        "ChooseAttempts": "Combien de tentatives ? ({0}-{1})",
        "InvalidInput": "Entrée invalide. Entrez un nombre entre {0} et {1}.",
        "Attempt": "Tentative {0}/{1}",
        "EnterGuess": "Entrez votre proposition ({0} couleurs séparées par des virgules) :",
        "InvalidGuess": "Proposition invalide. Vous devez entrer exactement {0} couleurs.",
        "InvalidColors": "Couleurs invalides : {0}",
        "ValidColors": "Les couleurs valides sont : {0}",
        "Feedback": "Bien placées : {0}, mal placées : {1}",
        "VisualFeedback": "Retour visuel :",
        "WinMessage": "Félicitations, vous avez trouvé le code !",
        "LoseMessage": "Partie terminée ! La séquence secrète était :",
    },
}


def resolve_locale(code) -> str:
    """
    Map a user supplied language code to a supported locale.
    "fr" and "fr-FR" (any case) select French, anything else English.
    """
    if code and str(code).strip().lower().split("-")[0] == "fr":
        return "fr"
    return DEFAULT_LOCALE


def color_name(color_id: str, locale: str = DEFAULT_LOCALE) -> str:
    """Return the display name of a canonical color id."""
    names = COLOR_NAMES.get(locale, COLOR_NAMES[DEFAULT_LOCALE])
    return names[color_id]


def get_string(key: str, locale: str = DEFAULT_LOCALE, *args) -> str:
    """
    Look up a message and format it with positional arguments.

    Args:
        key (str): Message key, e.g. "Attempt".
        locale (str): Locale to look up first; English is the fallback.
        *args: Values for the {0}, {1}, ... placeholders.
    Returns:
        str: The formatted message.
    Raises:
        KeyError: If the key exists in no table.
    """
    table = STRINGS.get(locale, {})
    template = table.get(key)
    if template is None:
        template = STRINGS[DEFAULT_LOCALE][key]
    return template.format(*args)
