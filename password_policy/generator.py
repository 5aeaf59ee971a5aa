"""
Password Generator
Random passwords that pass every password rule, found by rejection sampling
"""
from typing import Iterable, Optional
import logging
import random
import re
import secrets

from .exceptions import ConfigurationError
from .rules import MAX_LENGTH, MIN_LENGTH
from .validator import PasswordValidator

logger = logging.getLogger(__name__)

# Visually confusing characters left out of the default alphabet
DEFAULT_EXCLUDE = frozenset('01oOlLiI')

_REQUIRED_CLASSES = (
    ('an upper case letter', re.compile(r'[A-Z]')),
    ('a lower case letter', re.compile(r'[a-z]')),
    ('a digit', re.compile(r'[0-9]')),
    ('a special character', re.compile(r'[^a-zA-Z0-9\s]')),
)


def default_alphabet(exclude: Iterable[str] = DEFAULT_EXCLUDE) -> str:
    """Printable ASCII from 33 to 126 without the excluded characters"""
    excluded = set(exclude)
    return ''.join(chr(code) for code in range(33, 127) if chr(code) not in excluded)


def _check_settings(min_length: int, max_length: int, characters: str) -> None:
    """
    Reject settings under which the rejection loop could never finish

    Raises:
        ConfigurationError: If no valid password can come out of the settings
    """
    if min_length > max_length:
        raise ConfigurationError(
            f"min_length ({min_length}) is greater than max_length ({max_length})"
        )
    if min_length < MIN_LENGTH or max_length > MAX_LENGTH:
        raise ConfigurationError(
            f"Password length must be between {MIN_LENGTH} and {MAX_LENGTH}, "
            f"got {min_length}-{max_length}"
        )
    if len(characters) < min_length:
        raise ConfigurationError(
            f"Alphabet has {len(characters)} characters, at least {min_length} are required"
        )
    for label, pattern in _REQUIRED_CLASSES:
        if not pattern.search(characters):
            raise ConfigurationError(f"Alphabet must contain {label}")


def generate_password(
    min_length: int = MIN_LENGTH,
    max_length: int = MAX_LENGTH,
    characters: Optional[str] = None,
    exclude: Iterable[str] = DEFAULT_EXCLUDE,
    max_attempts: Optional[int] = None,
    rng: Optional[random.Random] = None
) -> str:
    """
    Generate a random password that is validated by all password rules

    A length is picked once from [min_length, max_length], capped at the
    alphabet size; then the alphabet is shuffled and cut to that length
    until the result has no violations.

    Args:
        min_length: Minimum password length
        max_length: Maximum password length
        characters: Alphabet to draw from; printable ASCII when None
        exclude: Characters left out of the default alphabet
        max_attempts: Give up after this many samples; None retries forever
        rng: Random source, cryptographically secure by default

    Returns:
        Generated password

    Raises:
        ConfigurationError: If the settings cannot produce a valid password
    """
    if characters is None:
        characters = default_alphabet(exclude)
    _check_settings(min_length, max_length, characters)

    rng = rng or secrets.SystemRandom()
    # a sample never repeats a position, so it cannot outgrow the alphabet
    length = rng.randint(min_length, min(max_length, len(characters)))
    pool = list(characters)

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        rng.shuffle(pool)
        password = ''.join(pool[:length])
        if not PasswordValidator(password).validate():
            logger.debug(f"Generated {length} character password after {attempts} attempts")
            return password

    logger.warning(f"No valid password found after {max_attempts} attempts (length {length})")
    raise ConfigurationError(
        f"Could not generate a valid password in {max_attempts} attempts; "
        "use a broader alphabet"
    )
