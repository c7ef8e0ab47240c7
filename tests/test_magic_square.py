import io
import sys

import pytest

from bitbench.magic_square import (
    MagicSquare,
    MagicSquareSizeError,
    check_size,
    generate_magic_square,
    main,
    read_size,
    write_magic_square,
)


def test_order_three_is_lo_shu():
    assert generate_magic_square(3).cells == [[8, 1, 6], [3, 5, 7], [4, 9, 2]]


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11, 15])
def test_generated_squares_are_magic(n):
    square = generate_magic_square(n)
    assert square.size == n
    assert square.is_magic()


@pytest.mark.parametrize("n", [3, 5, 7])
def test_one_starts_in_middle_of_top_row(n):
    assert generate_magic_square(n).cells[0][(n - 1) // 2] == 1


def test_is_magic_rejects_broken_square():
    square = generate_magic_square(5)
    square.cells[0][0], square.cells[0][1] = square.cells[0][1], square.cells[0][0]
    assert not square.is_magic()


def test_is_magic_rejects_wrong_values():
    assert not MagicSquare(2, [[1, 1], [1, 1]]).is_magic()


def test_to_csv_round_trip():
    square = generate_magic_square(7)
    lines = square.to_csv().splitlines()
    assert [[int(v) for v in line.split(",")] for line in lines] == square.cells
    assert square.to_csv().endswith("\n")


def test_check_size_accepts_odd():
    assert check_size(9) == 9


@pytest.mark.parametrize("size", [4, 0, -2])
def test_check_size_even(size):
    with pytest.raises(MagicSquareSizeError, match="must be odd"):
        check_size(size)


@pytest.mark.parametrize("size", [1, -3])
def test_check_size_small(size):
    with pytest.raises(MagicSquareSizeError, match=">= 3"):
        check_size(size)


@pytest.mark.parametrize(
    "text,expected", [("7\n", 7), ("  \n 5 rest\n", 5), ("0x7\n", 7), ("-3\n", -3)]
)
def test_read_size(text, expected):
    assert read_size(io.StringIO(text)) == expected


@pytest.mark.parametrize("text", ["abc\n", ""])
def test_read_size_scan_error(text):
    with pytest.raises(MagicSquareSizeError, match="scan error"):
        read_size(io.StringIO(text))


def test_write_magic_square(tmp_path):
    square = generate_magic_square(5)
    path = tmp_path / "out.txt"
    path.write_text("old content that must go\n" * 10)
    write_magic_square(square, path)
    assert path.read_text() == square.to_csv()


def test_main_writes_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "square.csv"
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert main([str(path)]) == 0
    assert path.read_text() == generate_magic_square(5).to_csv()
    assert capsys.readouterr().out == "Enter magic square's size (odd integer >=3)\n"


def test_main_rejects_even(tmp_path, monkeypatch, capsys):
    path = tmp_path / "square.csv"
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n"))
    assert main([str(path)]) == 1
    assert "Magic square size must be odd." in capsys.readouterr().out
    assert not path.exists()


def test_main_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Usage: ./myMagicSquare <output_filename>\n"