"""Random identifiers for scripted objects."""

import random

# Alphabet for generated identifiers; excludes XML-special characters.
UID_SOUP = (
    "!#%()*+,-./:;=?@[]^_`{|}~"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
)
DEFAULT_UID_LENGTH = 20


def uid(length: int = DEFAULT_UID_LENGTH) -> str:
    """Generate a random identifier.

    Identifiers are unique with high probability but not cryptographically
    secure.

    Args:
        length: Number of characters.

    Returns:
        A string of ``length`` characters drawn from `UID_SOUP`.
    """
    return "".join(random.choices(UID_SOUP, k=length))
