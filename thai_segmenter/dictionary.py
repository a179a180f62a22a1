"""Loading word lists from disk and caching the built indexes per path."""

import logging
import os
import threading

from .errors import DictionaryNotFound, InvalidDictionary
from .trie import DictionaryIndex

logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY_NAME = "thai_words.txt"


def default_dictionary_path():
    """Path of the word list shipped inside the package."""
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", DEFAULT_DICTIONARY_NAME)


def load_words(path):
    """Read a UTF-8 word list with one word per line."""
    if not os.path.exists(path):
        raise DictionaryNotFound(path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            words = [line.strip() for line in f]
    except UnicodeDecodeError as e:
        raise InvalidDictionary(f"Dictionary {path} is not valid UTF-8: {e}") from e

    words = [w for w in words if w]
    if not words:
        raise InvalidDictionary(f"Dictionary {path} contains no words.")
    return words


def load_dictionary(path):
    words = load_words(path)
    index = DictionaryIndex.from_words(words)
    logger.info("Loaded %d words from %s. Max length: %d", len(index), path, index.max_word_length)
    return index


class DictionaryCache:
    """
    Maps a dictionary path to its built index.

    Each distinct path is loaded at most once; lookups of an already built
    index do not take the lock.
    """

    def __init__(self, loader=load_dictionary):
        self._loader = loader
        self._indexes = {}
        self._lock = threading.Lock()

    def _key(self, path):
        return os.path.abspath(path) if path is not None else default_dictionary_path()

    def get(self, path=None):
        key = self._key(path)

        index = self._indexes.get(key)
        if index is not None:
            return index

        with self._lock:
            index = self._indexes.get(key)
            if index is None:
                logger.debug("Building dictionary index for %s", key)
                index = self._loader(key)
                self._indexes[key] = index
        return index

    def clear(self):
        with self._lock:
            self._indexes.clear()

    def __contains__(self, path):
        return self._key(path) in self._indexes

    def __len__(self):
        return len(self._indexes)


_cache = DictionaryCache()


def get_dictionary(path=None):
    """Cached index for ``path``, or for the packaged dictionary when None."""
    return _cache.get(path)
