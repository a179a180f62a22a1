import logging

from .errors import InvalidDictionary
from .tcc import ClusterBoundaryAnalyzer

logger = logging.getLogger(__name__)


class TrieNode:
    __slots__ = ("children", "is_end")

    def __init__(self):
        self.children = {}
        self.is_end = False


class DictionaryIndex:
    """
    Prefix trie over a word list.

    Built once and never mutated afterwards, so a finished index can be shared
    by any number of threads segmenting concurrently.
    """

    def __init__(self):
        self.root = TrieNode()
        self.num_words = 0
        self.max_word_length = 0

    @classmethod
    def from_words(cls, words):
        """
        Build an index from an iterable of words.
        Blank entries are ignored; raises InvalidDictionary if nothing is left
        or an entry is not a single line of text.
        """
        analyzer = ClusterBoundaryAnalyzer()
        index = cls()
        skipped = 0

        for entry in words:
            if not isinstance(entry, str):
                raise InvalidDictionary(
                    f"Dictionary entries must be strings, got {type(entry).__name__}"
                )
            word = entry.strip()
            if not word:
                continue
            if '\n' in word or '\r' in word:
                raise InvalidDictionary(f"Dictionary entry spans multiple lines: {word!r}")

            # A word starting with a combining mark can never begin at a legal boundary
            if not analyzer.can_start_cluster(word[0]):
                skipped += 1
                continue

            index.insert(word)

        if skipped:
            logger.warning("Skipped %d entries starting with a combining mark.", skipped)

        if index.num_words == 0:
            raise InvalidDictionary("Dictionary is empty.")

        logger.debug("Indexed %d words. Max length: %d", index.num_words, index.max_word_length)
        return index

    def insert(self, word):
        node = self.root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
            node = child

        if not node.is_end:
            node.is_end = True
            self.num_words += 1
            if len(word) > self.max_word_length:
                self.max_word_length = len(word)

    def longest_matches_at(self, text, offset, end=None):
        """
        Returns the end offsets of every dictionary word that is a prefix of
        text[offset:end], in ascending order.
        """
        if end is None:
            end = len(text)

        matches = []
        node = self.root
        i = offset
        while i < end:
            node = node.children.get(text[i])
            if node is None:
                break
            i += 1
            if node.is_end:
                matches.append(i)
        return matches

    def __contains__(self, word):
        node = self.root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return False
        return node.is_end

    def __len__(self):
        return self.num_words
