import pytest

from raetsel.anagram_dictionary import AnagramDictionary
from raetsel.dictionary import WordQuery
from raetsel.utilities import Filter


def _query(dictionary, text):
    return WordQuery(text, dictionary, text.count("?"))


@pytest.fixture
def anagram_dict():
    dictionary = AnagramDictionary(False)
    for word in ["listen", "silent", "enlist", "google"]:
        dictionary.add_word(word)
    return dictionary


def test_add_word_reports_new_anagram_only():
    dictionary = AnagramDictionary(False)
    assert dictionary.add_word("listen") is True
    assert dictionary.add_word("silent") is False
    assert dictionary.anagram_to_words["eilnst"] == ["listen", "silent"]


def test_has_word_ignores_letter_order(anagram_dict):
    assert anagram_dict.has_word(_query(anagram_dict, "tinsel"))
    assert anagram_dict.has_word(_query(anagram_dict, "elgoog"))
    assert not anagram_dict.has_word(_query(anagram_dict, "tinsle"[:-1]))


def test_has_word_is_case_insensitive(anagram_dict):
    assert anagram_dict.has_word(_query(anagram_dict, "TINSEL"))


def test_has_word_with_blanks(anagram_dict):
    assert anagram_dict.has_word(_query(anagram_dict, "?isten"))
    assert anagram_dict.has_word(_query(anagram_dict, "lis???"))
    assert anagram_dict.has_word(_query(anagram_dict, "??????"))
    assert not anagram_dict.has_word(_query(anagram_dict, "x?????"))
    assert not anagram_dict.has_word(_query(anagram_dict, "?????"))


def test_get_words_returns_all_anagrams(anagram_dict):
    found = anagram_dict.get_words(_query(anagram_dict, "tinsel"))
    assert sorted(found) == ["enlist", "listen", "silent"]


def test_get_words_with_blanks(anagram_dict):
    found = anagram_dict.get_words(_query(anagram_dict, "lis???"))
    assert sorted(found) == ["enlist", "listen", "silent"]
    everything = anagram_dict.get_words(_query(anagram_dict, "??????"))
    assert sorted(everything) == ["enlist", "google", "listen", "silent"]


def test_get_words_agrees_with_has_word(anagram_dict):
    for text in ["tinsel", "g?o?le", "xyz???", "?", "goo???"]:
        query = _query(anagram_dict, text)
        assert bool(anagram_dict.get_words(query)) == anagram_dict.has_word(query)


def test_get_words_without_match_is_empty(anagram_dict):
    assert anagram_dict.get_words(_query(anagram_dict, "abcdef")) == []


def test_too_many_unknowns_is_rejected(anagram_dict):
    with pytest.raises(ValueError):
        anagram_dict.has_word(WordQuery("ab", anagram_dict, 3))


def test_construct_reads_file_and_applies_filters(tmp_path, capsys):
    word_file = tmp_path / "words.txt"
    word_file.write_text("stone\nnotes\nonset\napple\n", encoding="utf-8")
    dictionary = AnagramDictionary(False)
    no_apples = Filter(False, lambda word: word.startswith("a"))
    result = dictionary.construct(str(word_file), [no_apples])
    assert result is dictionary
    assert "A dictionary containing 1 words has been constructed." in capsys.readouterr().out
    assert sorted(dictionary.get_words(_query(dictionary, "tones"))) == [
        "notes",
        "onset",
        "stone",
    ]
    assert not dictionary.has_word(_query(dictionary, "apple"))