"""
Text normalization for word filtering.

Converts arbitrary text into a canonical form before matching:
- Lowercase
- Accented letters reduced to their base letter
- Common symbol/leetspeak substitutions (sh1t -> shit, @ss -> ass)
- Whitespace collapsed
- Everything that is not an ASCII letter removed
"""

import re
import unicodedata
from typing import Tuple

# Applied in order, every occurrence, once per call
SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = (
    ('!', 'i'),
    ('@', 'a'),
    ('$', 's'),
    ('3', 'e'),
    ('8', 'b'),
    ('1', 'i'),
    ('¡', 'i'),  # inverted exclamation mark
    ('5', 's'),
    ('0', 'o'),
    ('4', 'h'),
    ('7', 't'),
    ('9', 'g'),
    ('6', 'b'),
)

_COMBINING_MARKS = re.compile(r'[\u0300-\u036f]')
_WHITESPACE_RUN = re.compile(r'\s+')
_SPACE_RUN = re.compile(r' {2,}')
_NON_ALPHA = re.compile(r'[^a-zA-Z\s]')


def strip_accents(text: str) -> str:
    """Decompose to NFD and drop combining diacritical marks."""
    return _COMBINING_MARKS.sub('', unicodedata.normalize('NFD', text))


def apply_substitutions(text: str) -> str:
    """Replace symbol and digit look-alikes with the letter they stand for."""
    for symbol, letter in SUBSTITUTIONS:
        text = text.replace(symbol, letter)
    return text


def normalize(text: str) -> str:
    """
    Normalize text for matching.

    Examples:
        "Sh1T!!"   -> "shitii"
        "Déjà  vu" -> "deja vu"
        "a # b"    -> "a b"

    Returns:
        String containing only lowercase ASCII letters and single spaces
    """
    text = strip_accents(text.lower())
    text = apply_substitutions(text)
    text = _WHITESPACE_RUN.sub(' ', text)
    text = _NON_ALPHA.sub('', text)
    # Deleting a standalone symbol can leave two spaces side by side
    return _SPACE_RUN.sub(' ', text)
