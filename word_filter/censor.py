"""Censor string generation."""

import random
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union


@dataclass(frozen=True)
class CensorSymbol:
    """
    What a flagged word is replaced with.

    A plain string is repeated to the width of the word. A collection of
    characters draws one character at random for every position.
    """
    text: str = "*"
    choices: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_value(cls, value: Union[str, Iterable[str], None]) -> "CensorSymbol":
        """Build from a string, or from a list/tuple/set of characters."""
        if not value:
            return cls()
        if isinstance(value, str):
            return cls(text=value)
        chars = [ch for item in value for ch in item]
        if isinstance(value, (set, frozenset)):
            chars = sorted(set(chars))
        choices = tuple(chars)
        if not choices:
            return cls()
        return cls(choices=choices)

    @property
    def is_random(self) -> bool:
        return self.choices is not None

    def render(self, width: int) -> str:
        """Censor string exactly ``width`` characters long."""
        if self.choices is not None:
            return ''.join(random.choice(self.choices) for _ in range(width))
        # Multi-character strings are cut to width
        return (self.text * width)[:width]
