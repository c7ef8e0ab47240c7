import io
import string
import sys

import pytest

from bitbench.caesar import calculate_shifts, decode, main, read_cipher_file


def test_empty_key_gives_minimum_shift():
    assert calculate_shifts("") == 1


def test_key_xoring_to_zero_gives_minimum_shift():
    assert calculate_shifts("zz") == 1


@pytest.mark.parametrize("key", ["alexisl", "user", "a", "abc", "xyz123", "é"])
def test_shift_in_range(key):
    assert 1 <= calculate_shifts(key) <= 25


def test_decode_leaves_non_lowercase_untouched():
    text = "ABC XYZ 0123 !?,."
    assert decode(text, "user") == text


def test_decode_keeps_length_and_lowercase():
    result = decode(string.ascii_lowercase, "user")
    assert len(result) == 26
    assert sorted(result) == list(string.ascii_lowercase)


def test_decode_is_rotation():
    result = decode(string.ascii_lowercase, "user")
    shift = calculate_shifts("user")
    assert result[0] == string.ascii_lowercase[shift]
    assert result == string.ascii_lowercase[shift:] + string.ascii_lowercase[:shift]


def test_decoding_twenty_six_times_is_identity():
    text = "hello, world zebra"
    result = text
    for _ in range(26):
        result = decode(result, "alexisl")
    assert result == text


def test_read_cipher_file_strips_newline(tmp_path):
    path = tmp_path / "cipher.txt"
    path.write_text("abc def\nsecond line\n")
    assert read_cipher_file(path) == "abc def"


def test_read_cipher_file_without_newline(tmp_path):
    path = tmp_path / "cipher.txt"
    path.write_text("xyz")
    assert read_cipher_file(path) == "xyz"


def test_read_cipher_file_empty(tmp_path):
    path = tmp_path / "cipher.txt"
    path.write_text("")
    with pytest.raises(ValueError):
        read_cipher_file(path)


def test_read_cipher_file_missing(tmp_path):
    with pytest.raises(OSError):
        read_cipher_file(tmp_path / "missing.txt")


def test_main_decodes(tmp_path, monkeypatch, capsys):
    cipher = "uryyb jbeyq"
    (tmp_path / "cipher.txt").write_text(cipher + "\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("user\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == (
        f"Your cipher text:\n{cipher}\nYour CS login: "
        f"Plaintext:\n{decode(cipher, 'user')}\n"
    )


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "Cannot open file for reading." in capsys.readouterr().err


def test_main_no_login(tmp_path, monkeypatch, capsys):
    (tmp_path / "cipher.txt").write_text("abc\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Error reading user input." in capsys.readouterr().err