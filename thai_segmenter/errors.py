"""Exception types raised by the segmenter."""


class ThaiSegmenterError(Exception):
    """Base class for all segmenter errors."""


class InvalidInput(ThaiSegmenterError, TypeError):
    """The text argument is not a string."""


class InvalidDictionary(ThaiSegmenterError, ValueError):
    """The word list is empty or contains malformed entries."""


class UnsupportedEngine(ThaiSegmenterError, ValueError):
    """A tokenizer engine other than ``newmm`` was requested."""

    def __init__(self, engine):
        super().__init__(
            f"Unsupported engine '{engine}'. Currently only 'newmm' is supported."
        )
        self.engine = engine


class DictionaryNotFound(ThaiSegmenterError, FileNotFoundError):
    """A custom dictionary path does not exist."""

    def __init__(self, path):
        super().__init__(f"Dictionary file not found: {path}")
        self.path = path
