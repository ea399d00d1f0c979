"""
Repeated-character expansion.

A word stretched with repeated letters ("baaaad") is turned into every
spelling where each run of a repeated letter is collapsed to either one or
two copies of that letter ("baad", "bad"). Each candidate is then matched
against the block-list.
"""

import re
from itertools import product
from typing import List

_REPEATED_CHAR = re.compile(r'(.)\1')


def has_repeated_chars(word: str) -> bool:
    """True if the word contains two identical adjacent characters."""
    return _REPEATED_CHAR.search(word) is not None


def split_runs(word: str) -> List[str]:
    """
    Split a word into maximal runs of identical characters.

    Examples:
        baaaad -> ['b', 'aaaa', 'd']
        hello  -> ['h', 'e', 'll', 'o']
    """
    runs: List[str] = []
    for char in word:
        if runs and runs[-1][0] == char:
            runs[-1] += char
        else:
            runs.append(char)
    return runs


def run_alternatives(run: str) -> List[str]:
    """Spellings a run may collapse to: doubled and single, or just single."""
    if len(run) >= 2:
        return [run[0] * 2, run[0]]
    return [run]


def all_possible_cases(options: List[List[str]]) -> List[str]:
    """
    Cross-product of per-segment options, concatenated in segment order.

    Examples:
        [['b'], ['aa', 'a'], ['d']] -> ['baad', 'bad']
    """
    return [''.join(choice) for choice in product(*options)]


def expand_word(word: str, min_length: int = 0) -> List[str]:
    """
    Generate candidate spellings for a word with repeated characters.

    Words without a repeated character, and words no longer than
    ``min_length`` (too short to match anything in the block-list), are
    returned unchanged.

    Args:
        word: A normalized token
        min_length: Length of the shortest block-list entry

    Returns:
        List of candidates, starting with the word itself, without duplicates.
        Keeping the original spelling means a word is always one of its own
        candidates, at the cost of one entry over the 2 ** runs cross-product
        when the word has a run of three or more ("baaad" gives
        ["baaad", "baad", "bad"]).
    """
    if len(word) <= min_length or not has_repeated_chars(word):
        return [word]

    candidates = [word]
    seen = {word}
    for candidate in all_possible_cases([run_alternatives(r) for r in split_runs(word)]):
        if candidate not in seen:
            seen.add(candidate)
            candidates.append(candidate)
    return candidates
