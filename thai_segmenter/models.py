"""Data models shared by the classifier, solver and facade."""

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """Classification of a span or token."""

    THAI = "thai"
    NUMBER = "number"
    PUNCTUATION = "punctuation"
    WHITESPACE = "whitespace"
    LATIN = "latin"
    OTHER = "other"


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` codepoint range of the input with its kind."""

    start: int
    end: int
    kind: TokenKind

    def __len__(self):
        return self.end - self.start

    def text_of(self, text: str) -> str:
        return text[self.start:self.end]


@dataclass(frozen=True)
class Token:
    """A unit of segmenter output."""

    text: str
    kind: TokenKind

    def __str__(self):
        return self.text
