import pytest

from wordgrid.boggle import boggle, format_board, gen_board, main, parse_dict, print_board


def _grid(*rows):
    return [list(row) for row in rows]


def test_gen_board_shape_and_letters():
    board = gen_board(5, 7)
    assert len(board) == 5
    assert all(len(row) == 5 for row in board)
    assert all(cell.isalpha() and cell.isupper() and len(cell) == 1 for row in board for cell in row)


@pytest.mark.parametrize(
    ("seed", "letter"),
    [
        (1, "E"),
        (5489, "W"),
    ],
)
def test_gen_board_is_deterministic(seed, letter):
    board = gen_board(1, seed)
    assert board == [[letter]]
    assert gen_board(1, seed) == board


def test_gen_board_seed_changes_board():
    assert gen_board(6, 1) != gen_board(6, 2)


def test_gen_board_empty():
    assert gen_board(0, 5) == []


def test_format_board():
    assert format_board(_grid("AB", "CD")) == " A B\n C D\n"


def test_print_board(capsys):
    board = gen_board(3, 4)
    print_board(board)
    assert capsys.readouterr().out == format_board(board)


def test_parse_dict(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("CAT CATS\nDOG\n")
    words, prefixes = parse_dict(path)
    assert words == {"CAT", "CATS", "DOG"}
    assert prefixes == {"", "C", "CA", "CAT", "D", "DO"}


def test_parse_dict_missing_file(tmp_path):
    with pytest.raises(ValueError):
        parse_dict(tmp_path / "missing.txt")


BOARD = _grid(
    "CATS",
    "AXXX",
    "TXAX",
    "XXXT",
)


def test_only_longest_word_in_a_line():
    found = boggle({"CAT", "CATS"}, {"", "C", "CA", "CAT"}, BOARD)
    assert "CATS" in found
    assert "CAT" in found  # vertical C-A-T down the first column


def test_longest_only_along_row():
    board = _grid("CATS", "XXXX", "XXXX", "XXXX")
    found = boggle({"CAT", "CATS"}, {"", "C", "CA", "CAT"}, board)
    assert found == {"CATS"}


def test_diagonal_search():
    found = boggle({"CXAT"}, {"", "C", "CX", "CXA"}, BOARD)
    assert found == {"CXAT"}


def test_no_reverse_reading():
    board = _grid("TAC", "XXX", "XXX")
    assert boggle({"CAT"}, {"", "C", "CA"}, board) == set()


def test_shorter_word_kept_when_longer_fails():
    board = _grid("CATS", "XXXX", "XXXX", "XXXX")
    found = boggle({"CA", "CATZ"}, {"", "C", "CA", "CAT"}, board)
    assert found == {"CA"}


def test_boggle_with_parsed_dict(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("CAT CATS AT")
    words, prefixes = parse_dict(path)
    board = _grid("CATS", "XXXX", "XXXX", "XXXX")
    assert boggle(words, prefixes, board) == {"CATS", "AT"}


def test_main_usage(capsys):
    assert main(["4", "1"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_output(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("A E I O U")
    assert main(["4", "1", str(path)]) == 0
    out = capsys.readouterr().out
    board = gen_board(4, 1)
    assert out.startswith(format_board(board))
    words, prefixes = parse_dict(path)
    found = boggle(words, prefixes, board)
    assert f"Found {len(found)} words:\n" in out
    assert out.endswith(", ".join(sorted(found)) + "\n")