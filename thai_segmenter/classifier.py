"""
Partitions text into typed spans before dictionary segmentation.

Whitespace, numbers, Latin words and punctuation are emitted as atomic spans so
that only runs of Thai (or other-script) text reach the graph solver.
"""

import unicodedata

from .models import Span, TokenKind
from .tcc import ClusterBoundaryAnalyzer

# Codepoint classes
SPACE = 'SPACE'
DIGIT = 'DIGIT'
LATIN = 'LATIN'
PUNCT = 'PUNCT'
BRACKET = 'BRACKET'
FORMAT = 'FORMAT'
MARK = 'MARK'
THAI = 'THAI'

TEXT_CLASSES = frozenset([THAI, MARK])
NUMBER_SEPARATORS = frozenset('.,')

# Thai-block codepoints that behave as symbols: baht, fongman, angkhankhu, khomut
THAI_PUNCTUATION = frozenset('฿๏๚๛')

# Brackets and quotes never merge with their neighbours
BRACKET_CATEGORIES = frozenset(['Ps', 'Pe', 'Pi', 'Pf'])
FORMAT_CATEGORIES = frozenset(['Cc', 'Cf'])

# Start class -> (span kind, how the run continues)
RUN_RULES = {
    SPACE: (TokenKind.WHITESPACE, 'same_class'),
    LATIN: (TokenKind.LATIN, 'same_class'),
    FORMAT: (TokenKind.OTHER, 'same_class'),
    THAI: (TokenKind.THAI, 'text'),
    MARK: (TokenKind.THAI, 'text'),
    DIGIT: (TokenKind.NUMBER, 'number'),
    PUNCT: (TokenKind.PUNCTUATION, 'same_char'),
    BRACKET: (TokenKind.PUNCTUATION, 'single'),
}


def _is_latin_letter(char):
    code = ord(char)
    if code < 0x80:
        return char.isalpha()
    # Latin-1 Supplement, Latin Extended-A/B, Latin Extended Additional
    return (0x00C0 <= code <= 0x024F or 0x1E00 <= code <= 0x1EFF) and char.isalpha()


class SpanClassifier:
    def __init__(self, analyzer=None):
        self.analyzer = analyzer or ClusterBoundaryAnalyzer()
        self._scanners = {
            'same_class': self._scan_same_class,
            'text': self._scan_text,
            'number': self._scan_number,
            'same_char': self._scan_same_char,
            'single': self._scan_single,
        }

    def char_class(self, char):
        if char.isspace():
            return SPACE
        if char.isdecimal():
            return DIGIT

        code = ord(char)
        if 0x0E00 <= code <= 0x0E7F:
            return PUNCT if char in THAI_PUNCTUATION else THAI
        if _is_latin_letter(char):
            return LATIN
        if char.isalpha():
            # Other scripts are left to the graph solver
            return THAI

        category = unicodedata.category(char)
        if category in FORMAT_CATEGORIES:
            return FORMAT
        if category in BRACKET_CATEGORIES:
            return BRACKET
        if category.startswith('M'):
            return MARK
        return PUNCT

    def classify(self, text, boundaries=None):
        """
        Single left-to-right scan producing spans that partition ``text``.

        :param boundaries: precomputed cluster boundaries of ``text``; an atomic
                           span never ends inside a Thai cluster.
        """
        n = len(text)
        if n == 0:
            return []
        if boundaries is None:
            boundaries = self.analyzer.legal_boundaries(text)

        classes = [self.char_class(c) for c in text]
        spans = []
        i = 0
        while i < n:
            kind, rule = RUN_RULES[classes[i]]
            end = self._scanners[rule](text, classes, i)
            # Combining marks stay with the character they modify
            while end < n and (not boundaries[end] or classes[end] == MARK):
                end += 1

            spans.append(Span(i, end, kind))
            i = end

        return spans

    def _scan_same_class(self, text, classes, start):
        cls = classes[start]
        i = start + 1
        n = len(text)
        while i < n and classes[i] == cls:
            i += 1
        return i

    def _scan_text(self, text, classes, start):
        i = start + 1
        n = len(text)
        while i < n and classes[i] in TEXT_CLASSES:
            i += 1
        return i

    def _scan_number(self, text, classes, start):
        """
        Digits with interior '.' or ',' separators, each of which must be
        followed by another digit: 1,234.56 and 127.0.0.1 are single numbers.
        """
        n = len(text)
        i = start + 1
        while i < n:
            if classes[i] == DIGIT:
                i += 1
                continue

            if text[i] in NUMBER_SEPARATORS:
                if i + 1 < n and classes[i + 1] == DIGIT:
                    i += 2  # Consume separator and next digit
                    continue
            break
        return i

    def _scan_same_char(self, text, classes, start):
        char = text[start]
        i = start + 1
        n = len(text)
        while i < n and text[i] == char:
            i += 1
        return i

    def _scan_single(self, text, classes, start):
        return start + 1
