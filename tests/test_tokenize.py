import pytest

from thai_segmenter import newmm, word_tokenize
from thai_segmenter.errors import DictionaryNotFound, InvalidInput, UnsupportedEngine
from thai_segmenter.trie import DictionaryIndex


def test_basic_thai_sentence():
    assert word_tokenize("ฉันไปโรงเรียน") == ["ฉัน", "ไป", "โรงเรียน"]


def test_english_text():
    assert word_tokenize("hello world") == ["hello", " ", "world"]


def test_numbers_only():
    assert word_tokenize("123") == ["123"]


def test_mixed_content():
    text = "ไป ABC 123"
    tokens = word_tokenize(text)
    assert tokens == ["ไป", " ", "ABC", " ", "123"]
    assert "".join(tokens) == text


def test_single_word():
    assert word_tokenize("ไป") == ["ไป"]


def test_empty_input():
    assert word_tokenize("") == []
    assert word_tokenize(None) == []


@pytest.mark.parametrize("engine", ["invalid_engine", "longest", "NEWMM", ""])
def test_unsupported_engine(engine):
    with pytest.raises(UnsupportedEngine):
        word_tokenize("ฉันไปโรงเรียน", engine=engine)


def test_unsupported_engine_checked_before_any_work():
    with pytest.raises(ValueError):
        word_tokenize("", engine="invalid_engine")
    with pytest.raises(UnsupportedEngine):
        word_tokenize("ไป", engine="deepcut", custom_dict="/nonexistent/path/dict.txt")


def test_invalid_text_type():
    with pytest.raises(InvalidInput):
        word_tokenize(123)
    with pytest.raises(TypeError):
        word_tokenize(["ไป"])


def test_nonexistent_dict():
    with pytest.raises(DictionaryNotFound):
        word_tokenize("ฉันไปโรงเรียน", custom_dict="/nonexistent/path/dict.txt")
    with pytest.raises(FileNotFoundError):
        word_tokenize("ฉันไปโรงเรียน", custom_dict="/nonexistent/path/dict.txt")


def test_custom_dict_path(dict_file):
    assert word_tokenize("ฉันรักคนไทย", custom_dict=str(dict_file)) == ["ฉัน", "รัก", "คนไทย"]
    # pathlib paths are accepted too
    assert word_tokenize("คนไทย", custom_dict=dict_file) == ["คนไทย"]


def test_custom_dict_words(small_words):
    assert word_tokenize("ภาษาไทย", custom_dict=["ภาษา", "ไทย"]) == ["ภาษา", "ไทย"]
    index = DictionaryIndex.from_words(small_words)
    assert word_tokenize("ภาษาไทย", custom_dict=index) == ["ภาษาไทย"]


def test_newmm_compatibility():
    assert newmm.segment(None) == []
    assert newmm.segment("") == []
    assert word_tokenize("ฉันรักภาษาไทยเพราะฉันเป็นคนไทย", engine="newmm") == [
        "ฉัน", "รัก", "ภาษาไทย", "เพราะ", "ฉัน", "เป็น", "คนไทย",
    ]
    assert word_tokenize("19...", engine="newmm") == ["19", "..."]
    assert word_tokenize("19.", engine="newmm") == ["19", "."]
    assert word_tokenize("19.84", engine="newmm") == ["19.84"]
    assert word_tokenize("127.0.0.1", engine="newmm") == ["127.0.0.1"]
    assert word_tokenize("USD1,984.42", engine="newmm") == ["USD", "1,984.42"]
    assert word_tokenize(
        "สวัสดีครับ สบายดีไหมครับ", engine="newmm", keep_whitespace=True
    ) == ["สวัสดี", "ครับ", " ", "สบายดี", "ไหม", "ครับ"]
    assert word_tokenize("จุ๋มง่วงนอนยัง", engine="newmm") == ["จุ๋ม", "ง่วงนอน", "ยัง"]
    assert word_tokenize("จุ๋มง่วง", engine="newmm") == ["จุ๋ม", "ง่วง"]
    assert word_tokenize("จุ๋ม   ง่วง", engine="newmm", keep_whitespace=False) == ["จุ๋ม", "ง่วง"]
    assert " " not in word_tokenize("จุ๋มง่วง", keep_whitespace=False)
    assert word_tokenize("(คนไม่เอา)", engine="newmm") == ["(", "คน", "ไม่", "เอา", ")"]
    assert word_tokenize("กม/ชม", engine="newmm") == ["กม", "/", "ชม"]
    assert word_tokenize("สีหน้า(รถ)", engine="newmm") == ["สีหน้า", "(", "รถ", ")"]


def test_newmm_segment_options(dict_file):
    assert newmm.segment("ฉันไปโรงเรียน") == ["ฉัน", "ไป", "โรงเรียน"]
    assert newmm.segment("คน ไทย", custom_dict=dict_file, keep_whitespace=False) == ["คน", "ไทย"]
