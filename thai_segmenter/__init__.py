"""Dictionary-based Thai word segmentation (newmm)."""

__version__ = "0.1.0"

from .config import SegmenterConfig
from .dictionary import DictionaryCache, get_dictionary, load_dictionary, load_words
from .errors import (
    DictionaryNotFound,
    InvalidDictionary,
    InvalidInput,
    ThaiSegmenterError,
    UnsupportedEngine,
)
from .models import Span, Token, TokenKind
from .segmenter import ThaiSegmenter, segment
from .tokenize import word_tokenize
from . import newmm

__all__ = [
    "DictionaryCache",
    "DictionaryNotFound",
    "InvalidDictionary",
    "InvalidInput",
    "SegmenterConfig",
    "Span",
    "ThaiSegmenter",
    "ThaiSegmenterError",
    "Token",
    "TokenKind",
    "UnsupportedEngine",
    "get_dictionary",
    "load_dictionary",
    "load_words",
    "newmm",
    "segment",
    "word_tokenize",
    "__version__",
]
