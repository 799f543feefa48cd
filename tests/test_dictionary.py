import pytest

from raetsel.dictionary import Dictionary, DictType, Word, WordQuery
from raetsel.utilities import Filter


class SetDictionary(Dictionary):
    def __init__(self, print_words=False):
        super().__init__(print_words)
        self.words = set()

    def add_word(self, word):
        if not word or word in self.words:
            return False
        self.words.add(word)
        return True

    def has_word(self, query):
        return query.query_string in self.words

    def get_words(self, query):
        return [query.query_string] if self.has_word(query) else []


def test_dictionary_is_abstract():
    with pytest.raises(TypeError):
        Dictionary()


def test_dict_type_values():
    assert DictType("single_word") is DictType.SINGLE_WORD
    assert DictType("multi_word") is DictType.MULTI_WORD
    assert DictType("anagram") is DictType.ANAGRAM


def test_word_query_holds_fields():
    d = SetDictionary()
    q = WordQuery("a?c", d, 1)
    assert q.query_string == "a?c"
    assert q.dictionary is d
    assert q.unknown_letters == 1


def test_word_defaults():
    w = Word()
    assert w.letters == []
    assert w.word_filters == []
    assert w.dictionary is None


def test_construct_reads_lines_and_filters(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("apple\nbanana\navocado\n\napple\n", encoding="utf-8")
    d = SetDictionary()
    result = Dictionary.construct(
        d, str(path), [Filter(True, lambda w: w.startswith("a"))]
    )
    assert result is d
    assert d.words == {"apple", "avocado"}
    assert "containing 2 words" in capsys.readouterr().out


def test_construct_without_filters(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("one\ntwo", encoding="utf-8")
    d = SetDictionary()
    result = Dictionary.construct(d, str(path), [])
    assert result is d
    assert d.words == {"one", "two"}


def test_construct_missing_file_is_empty(tmp_path, capsys):
    d = SetDictionary()
    result = Dictionary.construct(d, str(tmp_path / "absent.txt"), [])
    assert result is d
    assert d.words == set()
    assert "containing 0 words" in capsys.readouterr().out