import io

from raetsel import cli
from raetsel.dictionary import Word, WordQuery
from raetsel.input_reader import Puzzle
from raetsel.tree_dictionary import TreeDictionary


def make_dictionary(*words):
    dictionary = TreeDictionary()
    for word in words:
        dictionary.add_word(word)
    return dictionary


def make_query(text, dictionary):
    return WordQuery(text, dictionary, text.count("?"))


def test_single_query():
    dictionary = make_dictionary("cat")
    assert cli.single_query(make_query("c?t", dictionary)) is True
    assert cli.single_query(make_query("dog", dictionary)) is False


def test_check_query_counts_matches():
    dictionary = make_dictionary("cat", "dog")
    queries = [make_query(t, dictionary) for t in ("cat", "d?g", "xyz")]
    assert cli.check_query(queries, 0) is True
    assert cli.check_query(queries, 2) is True
    assert cli.check_query(queries, 3) is False


def test_check_query_goal_beyond_query_count():
    dictionary = make_dictionary("cat")
    assert cli.check_query([make_query("cat", dictionary)], 2) is False


def test_format_matched():
    dictionary = make_dictionary("cat")
    queries = [make_query("cat", dictionary), make_query("xyz", dictionary)]
    assert cli.format_matched(queries) == "+++ --- "


def test_format_matches_columns():
    dictionary = make_dictionary("cat", "cot")
    queries = [make_query("c?t", dictionary), make_query("x", dictionary)]
    lines = cli.format_matches(queries)
    assert sorted(lines) == ["cat   ", "cot   "]


def test_format_matches_without_matches():
    dictionary = make_dictionary("cat")
    assert cli.format_matches([make_query("zz", dictionary)]) == []


def test_dictionary_test_mode():
    dictionary = make_dictionary("cat", "cot")
    output = list(cli.test_dictionary(dictionary, ["c?t\n", "zzz\n"]))
    assert output == ["1", "cat cot ", "0"]


def test_query_test_mode_wrong_word_count():
    dictionary = make_dictionary("cat")
    puzzle = Puzzle(words=[Word(dictionary=dictionary)])
    output = list(cli.query_test_mode(puzzle, ["cat dog\n"]))
    assert output == ["A query needs to consist of 1 words (2 words were given)."]


def test_query_test_mode_matched():
    dictionary = make_dictionary("cat")
    puzzle = Puzzle(words=[Word(dictionary=dictionary), Word(dictionary=dictionary)])
    assert list(cli.query_test_mode(puzzle, ["cat dog\n"])) == ["+++ --- "]


def write_puzzle(tmp_path, dictionary_name="d"):
    (tmp_path / "words.txt").write_text("cat\ndog\n")
    (tmp_path / "dict.txt").write_text("cg\n")
    config = tmp_path / "puzzle.txt"
    config.write_text(
        "general {\n total_words = 2;\n min_matches = 1;\n words_file = words.txt;\n"
        " show_config = true;\n};\n"
        "dictionary {\n name = d;\n filename = dict.txt;\n type = single_word;\n};\n"
        f"word {{\n dictionary = {dictionary_name};\n letters = [F1P1; B1P2];\n}};\n"
    )
    return str(config)


def test_main_finds_solution(tmp_path, capsys):
    config = write_puzzle(tmp_path)
    assert cli.main(["-f", config]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "1 orderings matching at least 1 words were found!" in lines
    assert "cg " in lines
    assert "++ " in lines
    assert "1 1 " in lines


def test_main_dictionary_test_mode(tmp_path, capsys, monkeypatch):
    config = write_puzzle(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("c?\n"))
    assert cli.main(["-f", config, "-t", "d"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Entering Dictionary Test Mode for d" in lines
    assert "cg " in lines


def test_main_unknown_test_dictionary(tmp_path, capsys):
    config = write_puzzle(tmp_path)
    assert cli.main(["-f", config, "-t", "missing"]) == 0
    out = capsys.readouterr().out
    assert "No Dictionary of name missing was defined." in out
    assert "Constructing word manager" not in out


def test_main_missing_dictionary(tmp_path, capsys):
    config = write_puzzle(tmp_path, dictionary_name="nowhere")
    assert cli.main(["-f", config]) == 1
    assert "Missing dictionary of name 'nowhere'." in capsys.readouterr().out