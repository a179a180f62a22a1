from typing import Iterable, List, Optional, Union

from .classifier import SpanClassifier
from .config import SegmenterConfig
from .errors import InvalidInput
from .models import Token, TokenKind
from .solver import SegmentationGraphSolver
from .tcc import ClusterBoundaryAnalyzer
from .trie import DictionaryIndex


class ThaiSegmenter:
    """
    Dictionary-based maximal matching word segmenter for Thai.

    Holds one read-only DictionaryIndex; a single instance may be used from
    many threads at once since all per-call state is local to ``segment``.
    """

    def __init__(self, dictionary: Union[DictionaryIndex, Iterable[str]],
                 config: Optional[SegmenterConfig] = None):
        if not isinstance(dictionary, DictionaryIndex):
            dictionary = DictionaryIndex.from_words(dictionary)

        self.dictionary = dictionary
        self.config = config or SegmenterConfig()
        self.analyzer = ClusterBoundaryAnalyzer()
        self.classifier = SpanClassifier(self.analyzer)
        self.solver = SegmentationGraphSolver(
            dictionary,
            word_cost=self.config.word_cost,
            length_bonus=self.config.length_bonus,
            unknown_cost=self.config.unknown_cost,
            analyzer=self.analyzer,
        )

    def segment(self, text: Optional[str], keep_whitespace: Optional[bool] = None) -> List[Token]:
        """
        Segment ``text`` into tokens, left to right.

        Empty or None text returns an empty list without touching the
        dictionary. With keep_whitespace False, whitespace tokens are dropped.
        """
        if text is None:
            return []
        if not isinstance(text, str):
            raise InvalidInput(f"text must be a string, got {type(text)}")
        if not text:
            return []
        if keep_whitespace is None:
            keep_whitespace = self.config.keep_whitespace

        boundaries = self.analyzer.legal_boundaries(text)
        spans = self.classifier.classify(text, boundaries)

        tokens = []
        covered = 0
        for span in spans:
            assert span.start == covered, "span partition has a gap or overlap"
            covered = span.end

            if span.kind == TokenKind.THAI:
                for word in self.solver.segment(span.text_of(text), self.config.merge_unknown):
                    tokens.append(Token(word, TokenKind.THAI))
            elif span.kind == TokenKind.WHITESPACE and not keep_whitespace:
                continue
            else:
                tokens.append(Token(span.text_of(text), span.kind))

        assert covered == len(text), "span partition does not cover the input"
        return tokens

    def tokenize(self, text: Optional[str], keep_whitespace: Optional[bool] = None) -> List[str]:
        """Same as ``segment`` but returns plain strings."""
        return [token.text for token in self.segment(text, keep_whitespace)]


def segment(text: Optional[str], dictionary: Union[DictionaryIndex, Iterable[str]],
            keep_whitespace: bool = True) -> List[Token]:
    """Segment ``text`` against a dictionary index or an in-memory word list."""
    if text is None:
        return []
    if not isinstance(text, str):
        raise InvalidInput(f"text must be a string, got {type(text)}")
    if not text:
        return []
    return ThaiSegmenter(dictionary).segment(text, keep_whitespace)
