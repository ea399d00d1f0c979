"""
Block-list sources.

The default English list ships with the package as ``data/en.json``
(``{"filter": [...]}``). Custom lists can be JSON in the same shape or plain
text with one term per line.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Tuple, Union

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_LIST_PATH = DATA_DIR / "en.json"


def _read_json_list(path: Path) -> List[str]:
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    words = data.get("filter", []) if isinstance(data, dict) else data
    return [str(w) for w in words]


def _read_text_list(path: Path) -> List[str]:
    words = []
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith('#'):
                words.append(word)
    return words


@lru_cache(maxsize=1)
def _default_words() -> Tuple[str, ...]:
    words = tuple(_read_json_list(DEFAULT_LIST_PATH))
    logger.debug(f"Loaded default word list ({len(words)} words) from {DEFAULT_LIST_PATH}")
    return words


def default_word_list() -> List[str]:
    """Default English block-list. Returns a fresh list on every call."""
    return list(_default_words())


def load_word_list(custom_path: Union[str, Path] = "") -> List[str]:
    """
    Load a block-list.

    ``.json`` files are read for their ``filter`` field (a bare JSON array
    is accepted too); anything else is read as plain text, one term per
    line, lines starting with # are comments.

    If no path is given, or the file does not exist, the default list is
    returned.

    Args:
        custom_path: Optional path to a word list file

    Returns:
        List of block-list terms, in file order
    """
    if not custom_path:
        words = default_word_list()
        logger.info(f"Using default word list ({len(words)} words)")
        return words

    path = Path(custom_path)
    if not path.exists():
        logger.warning(f"Custom word list not found: {path}, using default")
        return default_word_list()

    if path.suffix.lower() == '.json':
        words = _read_json_list(path)
    else:
        words = _read_text_list(path)

    logger.info(f"Loaded word list: {len(words)} entries from {path}")
    return words


def save_word_list(words: Iterable[str], output_path: Union[str, Path]) -> None:
    """Save a block-list as plain text, one term per line."""
    words = sorted(set(words))
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write("# Block-list for word-filter\n")
        f.write("# One term per line, lines starting with # are comments\n\n")
        for word in words:
            f.write(f"{word}\n")

    logger.info(f"Saved {len(words)} words to {output_path}")
