"""
Word filter facade.

Pipeline for every query:
    text -> whitespace tokens -> normalize each token
         -> expand repeated characters -> match candidates -> result

Tokens are taken from the original text and normalized one by one, so
the index of a flagged token always points at the original word that
``clean`` replaces.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .censor import CensorSymbol
from .config import FilterConfig
from .expander import expand_word
from .matcher import BlockList, build_block_list, is_blocked
from .normalizer import normalize
from .wordlist import default_word_list, load_word_list

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r'\s+')


def split_words(text: str) -> List[str]:
    """Split on runs of whitespace, keeping empty edge tokens."""
    return _WHITESPACE.split(text)


class Filter:
    """
    Profanity filter over a fixed block-list.

    All state is derived at construction and exposed read-only, so one
    instance can be shared between threads.
    """

    def __init__(
        self,
        word_list: Optional[Iterable[str]] = None,
        clean_with: Union[str, Iterable[str], None] = "*",
        use_regex: bool = False,
        strictness: int = 1,
    ):
        """
        Args:
            word_list: Block-list terms, or regex sources when use_regex is set.
                Defaults to the bundled English list.
            clean_with: Censor string, or a collection of characters to draw
                from at random for every censored character
            use_regex: Match entries as regular expressions ("contains")
                instead of exact words
            strictness: 0 high, 1 medium, 2 low. Reserved, not used for matching.

        Raises:
            InvalidPatternError: use_regex is set and an entry does not compile
        """
        if word_list is None:
            word_list = default_word_list()

        self._use_regex = use_regex
        self._block_list: BlockList = build_block_list(word_list, use_regex=use_regex)
        self._censor = CensorSymbol.from_value(clean_with)
        self._strictness = strictness

        logger.debug(
            f"Filter ready: {len(self._block_list)} "
            f"{'patterns' if use_regex else 'terms'}, min length {self.min_length}"
        )

    @property
    def use_regex(self) -> bool:
        return self._use_regex

    @property
    def block_list(self) -> BlockList:
        return self._block_list

    @property
    def min_length(self) -> int:
        """Length of the shortest block-list entry (0 in regex mode)."""
        return self._block_list.min_length

    @property
    def censor(self) -> CensorSymbol:
        return self._censor

    @property
    def strictness(self) -> int:
        return self._strictness

    @classmethod
    def from_config(cls, config: FilterConfig) -> "Filter":
        """
        Build a filter from a FilterConfig (word list path, mode, censor).

        Raises:
            FileNotFoundError: Regex mode with a pattern list that does not exist.
                Falling back to the default word list would turn plain words
                into "contains" patterns.
        """
        path = config.word_list_path
        if config.use_regex:
            if path and not Path(path).exists():
                raise FileNotFoundError(f"Pattern list not found: {path}")
            if not path:
                logger.warning("Regex mode without a pattern list, "
                               "default words will match inside longer words")
        return cls(
            word_list=load_word_list(path),
            clean_with=config.clean_with,
            use_regex=config.use_regex,
            strictness=config.strictness,
        )

    def normalize(self, text: str) -> str:
        return normalize(text)

    def is_word_unclean(self, word: str) -> bool:
        """Check a single, already normalized candidate. No expansion."""
        return is_blocked(word, self.block_list)

    def _candidates(self, word: str) -> List[str]:
        # Empty edge tokens and symbol-only tokens hold no word to match
        normalized = normalize(word)
        if not normalized:
            return []
        return expand_word(normalized, self.min_length)

    def get_all_combos(self, text: str) -> List[List[str]]:
        """Candidate spellings for every space-separated word of normalized text."""
        return [expand_word(w, self.min_length) for w in text.split(' ')]

    def get_unclean_word_indexes(self, text: str) -> List[int]:
        """
        Indexes of flagged words.

        Args:
            text: Raw text

        Returns:
            Zero-based word indexes, ascending, each reported once
        """
        return [
            i for i, word in enumerate(split_words(text))
            if any(self.is_word_unclean(c) for c in self._candidates(word))
        ]

    def is_unclean(self, text: str) -> bool:
        """True if any word of the text is flagged."""
        for word in split_words(text):
            for candidate in self._candidates(word):
                if self.is_word_unclean(candidate):
                    return True
        return False

    def clean(self, text: str) -> str:
        """
        Censor flagged words.

        Flagged words are replaced by censor characters of the same length.
        Other words are kept as written. Words are rejoined with single spaces.
        """
        censor_indexes = set(self.get_unclean_word_indexes(text))
        words = split_words(text)
        if censor_indexes:
            logger.debug(f"Censoring {len(censor_indexes)} of {len(words)} words")
        return ' '.join(
            self.censor.render(len(w)) if i in censor_indexes else w
            for i, w in enumerate(words)
        )

    def debug(self, text: str) -> None:
        """Print the result of every operation for the given text."""
        normalized = self.normalize(text)
        print(f"normalized:\n\t{normalized}")
        print(f"is_unclean:\n\t{self.is_unclean(text)}")
        print(f"unclean_word_indexes:\n\t{self.get_unclean_word_indexes(text)}")
        print(f"cleaned:\n\t{self.clean(text)}")
        print(f"combos:\n\t{self.get_all_combos(normalized)}")
