"""
Block-list matching.

A block-list is either a set of exact terms or a tuple of compiled regular
expressions. The variant is chosen once when the list is built.
"""

import logging
import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Tuple, Union

from .error_handler import InvalidPatternError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExactList:
    """Exact-match block-list (set membership)."""
    terms: FrozenSet[str]

    @property
    def min_length(self) -> int:
        """Length of the shortest term, 0 for an empty list."""
        return min((len(t) for t in self.terms), default=0)

    def is_blocked(self, candidate: str) -> bool:
        return candidate in self.terms

    def __len__(self) -> int:
        return len(self.terms)


@dataclass(frozen=True)
class PatternList:
    """Regex block-list. A candidate is blocked if any pattern occurs in it."""
    patterns: Tuple[re.Pattern, ...]

    @property
    def min_length(self) -> int:
        # A pattern can match text of any length
        return 0

    def is_blocked(self, candidate: str) -> bool:
        return any(p.search(candidate) for p in self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)


BlockList = Union[ExactList, PatternList]


def compile_pattern(source: str) -> re.Pattern:
    """Compile a block-list pattern, raising InvalidPatternError on bad syntax."""
    try:
        return re.compile(source)
    except re.error as e:
        raise InvalidPatternError(source, str(e)) from e


def build_block_list(words: Iterable[str], use_regex: bool = False) -> BlockList:
    """
    Build a block-list from terms or pattern sources.

    Args:
        words: Block-list terms (exact mode) or regex sources (pattern mode).
            Empty entries are skipped.
        use_regex: Select pattern mode

    Returns:
        PatternList if use_regex else ExactList

    Raises:
        InvalidPatternError: A pattern source does not compile
    """
    # An empty entry would match every token
    words = [w for w in words if w]
    if use_regex:
        block_list = PatternList(tuple(compile_pattern(w) for w in words))
        logger.debug(f"Compiled {len(block_list)} block-list patterns")
    else:
        block_list = ExactList(frozenset(w.lower() for w in words))
        logger.debug(f"Loaded {len(block_list)} block-list terms "
                     f"(shortest: {block_list.min_length})")
    return block_list


def is_blocked(candidate: str, block_list: BlockList) -> bool:
    """Check one candidate spelling against the block-list."""
    return block_list.is_blocked(candidate)
