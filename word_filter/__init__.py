"""
Word Filter
===========

Profanity detection and censoring that sees through common obfuscation:
leetspeak, accents, symbol substitution and stretched letters ("baaaad").
"""

__version__ = "0.1.0"

from .filter import Filter
from .normalizer import normalize
from .expander import expand_word
from .matcher import ExactList, PatternList, build_block_list, is_blocked
from .censor import CensorSymbol
from .wordlist import default_word_list, load_word_list, save_word_list
from .error_handler import UserFriendlyError, InvalidPatternError

__all__ = [
    'Filter',
    'normalize',
    'expand_word',
    'ExactList',
    'PatternList',
    'build_block_list',
    'is_blocked',
    'CensorSymbol',
    'default_word_list',
    'load_word_list',
    'save_word_list',
    'UserFriendlyError',
    'InvalidPatternError',
]
