"""PyThaiNLP-style entry point."""

import os
from typing import Iterable, List, Optional, Union

from .dictionary import get_dictionary
from .errors import InvalidInput, UnsupportedEngine
from .segmenter import ThaiSegmenter
from .trie import DictionaryIndex

DEFAULT_ENGINE = "newmm"
SUPPORTED_ENGINES = frozenset([DEFAULT_ENGINE])


def word_tokenize(
    text: Optional[str],
    engine: str = DEFAULT_ENGINE,
    custom_dict: Union[str, DictionaryIndex, Iterable[str], None] = None,
    keep_whitespace: bool = True,
) -> List[str]:
    """
    Segment Thai text into words.

    Args:
        text: Input text. None and "" give an empty list.
        engine: Tokenizer engine; only "newmm" is supported.
        custom_dict: Path to a word list (one word per line), a prebuilt
            DictionaryIndex or an iterable of words. Defaults to the packaged
            dictionary.
        keep_whitespace: Keep whitespace runs as tokens.

    Returns:
        List of tokens.

    Raises:
        UnsupportedEngine: engine is not "newmm".
        InvalidInput: text is not a string.
        DictionaryNotFound: custom_dict is a path that does not exist.

    Examples:
        >>> word_tokenize("ฉันไปโรงเรียน")
        ['ฉัน', 'ไป', 'โรงเรียน']
    """
    if engine not in SUPPORTED_ENGINES:
        raise UnsupportedEngine(engine)

    if text is None:
        return []
    if not isinstance(text, str):
        raise InvalidInput(f"text must be a string, got {type(text)}")
    if not text:
        return []

    return ThaiSegmenter(_resolve_dictionary(custom_dict)).tokenize(text, keep_whitespace)


def _resolve_dictionary(custom_dict):
    if custom_dict is None or isinstance(custom_dict, (str, os.PathLike)):
        return get_dictionary(custom_dict)
    if isinstance(custom_dict, DictionaryIndex):
        return custom_dict
    return DictionaryIndex.from_words(custom_dict)


# Alias for compatibility
segment = word_tokenize
