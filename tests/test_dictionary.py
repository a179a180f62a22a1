import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from thai_segmenter.dictionary import (
    DictionaryCache,
    default_dictionary_path,
    get_dictionary,
    load_dictionary,
    load_words,
)
from thai_segmenter.errors import DictionaryNotFound, InvalidDictionary
from thai_segmenter.trie import DictionaryIndex


def test_load_words_skips_blank_lines(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("คน\n\n  ไทย  \n\n", encoding="utf-8")
    assert load_words(path) == ["คน", "ไทย"]


def test_missing_file(tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(DictionaryNotFound) as excinfo:
        load_words(missing)
    assert isinstance(excinfo.value, FileNotFoundError)
    assert str(missing) in str(excinfo.value)


def test_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n \n", encoding="utf-8")
    with pytest.raises(InvalidDictionary):
        load_words(path)


def test_not_utf8(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"\xff\xfe\xfa\n")
    with pytest.raises(InvalidDictionary):
        load_words(path)


def test_load_dictionary(dict_file, small_words):
    index = load_dictionary(dict_file)
    assert isinstance(index, DictionaryIndex)
    assert len(index) == len(small_words)


def test_default_dictionary_is_packaged():
    path = default_dictionary_path()
    assert os.path.exists(path)
    index = get_dictionary()
    assert "ภาษาไทย" in index
    assert get_dictionary() is index


def test_cache_builds_each_path_once(dict_file):
    calls = []

    def loader(path):
        calls.append(path)
        return load_dictionary(path)

    cache = DictionaryCache(loader)
    first = cache.get(dict_file)
    second = cache.get(str(dict_file))

    assert first is second
    assert len(calls) == 1
    assert dict_file in cache
    assert len(cache) == 1


def test_cache_default_path():
    calls = []

    def loader(path):
        calls.append(path)
        return DictionaryIndex.from_words(["คน"])

    cache = DictionaryCache(loader)
    cache.get()
    cache.get(None)
    assert calls == [default_dictionary_path()]
    assert None in cache
    assert default_dictionary_path() in cache


def test_cache_failed_load_not_cached(tmp_path):
    cache = DictionaryCache()
    missing = tmp_path / "missing.txt"
    with pytest.raises(DictionaryNotFound):
        cache.get(missing)
    assert len(cache) == 0


def test_cache_clear(dict_file):
    cache = DictionaryCache()
    first = cache.get(dict_file)
    cache.clear()
    assert len(cache) == 0
    assert cache.get(dict_file) is not first


def test_concurrent_first_use_builds_once(dict_file):
    calls = []
    lock = threading.Lock()

    def slow_loader(path):
        with lock:
            calls.append(path)
        time.sleep(0.05)
        return load_dictionary(path)

    cache = DictionaryCache(slow_loader)
    with ThreadPoolExecutor(max_workers=16) as executor:
        results = list(executor.map(lambda _: cache.get(dict_file), range(32)))

    assert len(calls) == 1
    assert all(index is results[0] for index in results)
