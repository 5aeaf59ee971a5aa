"""
Keyboard Topology
Physical QWERTY key layout and the 4-key sequences derived from it
"""
from typing import Optional, Tuple

SEQUENCE_LENGTH = 4

# Standard QWERTY keyboard as a 10x4 map.
# Each row holds one physical key column from the digit row down to the
# bottom letter row, so the rows read "1qaz", "2wsx", ... "0p;/".
KEYBOARD_MAP: Tuple[Tuple[str, ...], ...] = (
    ('1', 'q', 'a', 'z'),
    ('2', 'w', 's', 'x'),
    ('3', 'e', 'd', 'c'),
    ('4', 'r', 'f', 'v'),
    ('5', 't', 'g', 'b'),
    ('6', 'y', 'h', 'n'),
    ('7', 'u', 'j', 'm'),
    ('8', 'i', 'k', ','),
    ('9', 'o', 'l', '.'),
    ('0', 'p', ';', '/'),
)


def build_sequential_words(keyboard_map: Tuple[Tuple[str, ...], ...] = KEYBOARD_MAP) -> Tuple[str, ...]:
    """
    Pregenerate every run of 4 adjacent keys on the keyboard map

    Two keys are neighbours when they share a row and sit one column apart,
    or share a column and sit one row apart. A run is sequential when it
    follows a straight line of neighbours, so for a fixed map the runs are
    exactly the 4-wide windows along rows and columns, in both directions.

    Args:
        keyboard_map: Grid of single lower-case characters

    Returns:
        Tuple of sequential words, forward word followed by its reverse
    """
    words = []
    rows = len(keyboard_map)
    columns = len(keyboard_map[0])

    # Vertical words (a full physical key column, e.g. "1qaz")
    for row in keyboard_map:
        for start in range(columns - SEQUENCE_LENGTH + 1):
            word = ''.join(row[start:start + SEQUENCE_LENGTH])
            words.append(word)
            words.append(word[::-1])

    # Horizontal words (a window along one keyboard row, e.g. "qwer")
    for column in range(columns):
        for start in range(rows - SEQUENCE_LENGTH + 1):
            word = ''.join(keyboard_map[start + offset][column] for offset in range(SEQUENCE_LENGTH))
            words.append(word)
            words.append(word[::-1])

    return tuple(words)


SEQUENTIAL_WORDS: Tuple[str, ...] = build_sequential_words()


def sequential_words() -> Tuple[str, ...]:
    """Return the precomputed sequential words"""
    return SEQUENTIAL_WORDS


def find_sequence(password: str) -> Optional[str]:
    """
    Find the first sequential word contained in a password

    Args:
        password: Password to scan (compared case-insensitively)

    Returns:
        The matching sequential word, or None
    """
    lowered = password.lower()
    for word in SEQUENTIAL_WORDS:
        if word in lowered:
            return word
    return None
