"""Caesar-cipher decoding keyed by a login name."""

from __future__ import annotations

import sys
from pathlib import Path

CIPHER_FILE = "cipher.txt"
_MAX_CIPHER_CHARS = 999
_MAX_KEY_CHARS = 49
_ALPHABET_SIZE = 26


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def read_cipher_file(path: str | Path = CIPHER_FILE) -> str:
    """Return the first line of *path* without its trailing newline.

    Raises OSError if the file cannot be opened and ValueError if it is empty.
    """
    with open(path, encoding="utf-8") as fh:
        line = fh.readline(_MAX_CIPHER_CHARS)
    if not line:
        raise ValueError("Error reading cipher text file.")
    return _strip_newline(line)


def calculate_shifts(key: str) -> int:
    """Return the right shift (1-25) derived by XOR-ing the key's bytes."""
    shifts = 0
    for byte in key.encode("utf-8"):
        shifts ^= byte - 256 if byte > 127 else byte
    shifts = abs(shifts) % _ALPHABET_SIZE
    return shifts or 1


def decode(cipher: str, key: str) -> str:
    """Right-shift every lowercase ASCII letter of *cipher* by the key's shift."""
    shifts = calculate_shifts(key)

    def shift(ch: str) -> str:
        if "a" <= ch <= "z":
            return chr((ord(ch) - ord("a") + shifts) % _ALPHABET_SIZE + ord("a"))
        return ch

    return "".join(shift(ch) for ch in cipher)


def main(argv: list[str] | None = None) -> int:
    """Decode ``cipher.txt`` with a login read from standard input.

    Arguments are ignored.
    """
    try:
        cipher = read_cipher_file()
    except OSError:
        print("Cannot open file for reading.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Your cipher text:\n{cipher}")

    print("Your CS login: ", end="", flush=True)
    line = sys.stdin.readline()
    if not line:
        print("Error reading user input.", file=sys.stderr)
        return 1
    key = _strip_newline(line[:_MAX_KEY_CHARS])

    print(f"Plaintext:\n{decode(cipher, key)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())