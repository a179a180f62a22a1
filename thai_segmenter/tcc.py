"""
Thai Character Cluster (TCC) boundaries.

A cluster is the smallest unit of Thai script that a word boundary may never
split: a base consonant together with its leading vowel, following vowels,
tone marks and other combining signs. The grammar is expressed as a table of
codepoint classes plus a table of forbidden ``(left, right)`` class pairs.
"""

# Codepoint classes
CONSONANT = 'CONSONANT'
LEADING_VOWEL = 'LEADING_VOWEL'
FOLLOWING_VOWEL = 'FOLLOWING_VOWEL'
TRAILING_SIGN = 'TRAILING_SIGN'
COMBINING = 'COMBINING'
DIGIT = 'DIGIT'
OTHER_THAI = 'OTHER_THAI'
NON_THAI = 'NON_THAI'

THAI_START = 0x0E00
THAI_END = 0x0E7F


def _build_class_table():
    table = [OTHER_THAI] * (THAI_END - THAI_START + 1)

    def mark(first, last, cls):
        for code in range(first, last + 1):
            table[code - THAI_START] = cls

    mark(0x0E01, 0x0E2E, CONSONANT)        # ko kai .. ho nokhuk
    mark(0x0E2F, 0x0E2F, TRAILING_SIGN)    # paiyannoi
    mark(0x0E30, 0x0E30, FOLLOWING_VOWEL)  # sara a
    mark(0x0E31, 0x0E31, COMBINING)        # mai han-akat
    mark(0x0E32, 0x0E33, FOLLOWING_VOWEL)  # sara aa, sara am
    mark(0x0E34, 0x0E3A, COMBINING)        # above/below vowels, phinthu
    mark(0x0E40, 0x0E44, LEADING_VOWEL)    # sara e .. sara ai maimalai
    mark(0x0E45, 0x0E45, FOLLOWING_VOWEL)  # lakkhangyao
    mark(0x0E46, 0x0E46, TRAILING_SIGN)    # mai yamok
    mark(0x0E47, 0x0E4E, COMBINING)        # maitaikhu, tones, thanthakhat, nikhahit, yamakkan
    mark(0x0E50, 0x0E59, DIGIT)
    return tuple(table)


THAI_CLASS_TABLE = _build_class_table()

THAI_CLASSES = frozenset([
    CONSONANT, LEADING_VOWEL, FOLLOWING_VOWEL, TRAILING_SIGN,
    COMBINING, DIGIT, OTHER_THAI,
])

# Classes that can never begin a cluster
ATTACHING_CLASSES = frozenset([COMBINING, FOLLOWING_VOWEL, TRAILING_SIGN])


def _build_boundary_rules():
    """
    (left class, right class) pairs where a cut is illegal.
    NON_THAI never appears here, so cuts between scripts are always legal.
    """
    illegal = set()
    for left in THAI_CLASSES:
        illegal.add((left, COMBINING))
        illegal.add((left, FOLLOWING_VOWEL))
        illegal.add((left, TRAILING_SIGN))
    illegal.add((LEADING_VOWEL, CONSONANT))
    return frozenset(illegal)


ILLEGAL_BOUNDARIES = _build_boundary_rules()


class ClusterBoundaryAnalyzer:
    """Computes the offsets at which a token boundary may legally fall."""

    def char_class(self, char):
        code = ord(char)
        if THAI_START <= code <= THAI_END:
            return THAI_CLASS_TABLE[code - THAI_START]
        return NON_THAI

    def can_start_cluster(self, char):
        return self.char_class(char) not in ATTACHING_CLASSES

    def legal_boundaries(self, text):
        """
        Returns a list of ``len(text) + 1`` booleans, True where a cut is legal.
        Offsets 0 and len(text) are always legal.
        """
        n = len(text)
        result = [True] * (n + 1)
        if n < 2:
            return result

        classes = [self.char_class(c) for c in text]
        for i in range(1, n):
            if (classes[i - 1], classes[i]) in ILLEGAL_BOUNDARIES:
                result[i] = False
        return result

    def cluster_ends(self, text):
        """Legal boundary offsets after 0, in ascending order."""
        boundaries = self.legal_boundaries(text)
        return [i for i in range(1, len(text) + 1) if boundaries[i]]

    def clusters(self, text):
        clusters = []
        start = 0
        for end in self.cluster_ends(text):
            clusters.append(text[start:end])
            start = end
        return clusters
