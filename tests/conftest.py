import pytest

from thai_segmenter import ThaiSegmenter, get_dictionary
from thai_segmenter.trie import DictionaryIndex

SMALL_WORDS = [
    "ฉัน",
    "รัก",
    "ภาษา",
    "ไทย",
    "ภาษาไทย",
    "คน",
    "คนไทย",
    "เป็น",
    "เพราะ",
    "ไม่",
    "เอา",
]


@pytest.fixture
def small_words():
    return list(SMALL_WORDS)


@pytest.fixture
def small_index():
    return DictionaryIndex.from_words(SMALL_WORDS)


@pytest.fixture(scope="session")
def default_segmenter():
    return ThaiSegmenter(get_dictionary())


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(SMALL_WORDS) + "\n", encoding="utf-8")
    return path
