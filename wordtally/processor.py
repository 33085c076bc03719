"""Split files into words and feed them to a counter."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterable, Iterator

from .charclass import is_dash, is_valid_char
from .counter import WordCounter

CHUNK_SIZE = 2048


def tokenize(chunks: Iterable[bytes | str]) -> Iterator[str]:
    """Yield words from a stream of chunks.

    A word is a run of letters and apostrophes, possibly joined by single
    dashes. Two dashes in a row end the word, and a word never ends with a
    dash. Leading dashes and any other characters separate words.
    """
    word = bytearray()
    for chunk in chunks:
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        for code in chunk:
            if not word:
                if is_valid_char(code):
                    word.append(code)
                continue
            if is_dash(code):
                if is_dash(word[-1]):
                    del word[-1]
                    yield word.decode("ascii")
                    word.clear()
                else:
                    word.append(code)
                continue
            if not is_valid_char(code):
                if is_dash(word[-1]):
                    del word[-1]
                yield word.decode("ascii")
                word.clear()
                continue
            word.append(code)
    if word:
        if is_dash(word[-1]):
            del word[-1]
        yield word.decode("ascii")


def ends_with_txt(filename: str) -> bool:
    """Return True if the text after the last dot is exactly ``txt``."""
    _, dot, suffix = filename.rpartition(".")
    return bool(dot) and suffix == "txt"


def _read_chunks(handle) -> Iterator[bytes]:
    while chunk := handle.read(CHUNK_SIZE):
        yield chunk


def process_file(path: str | os.PathLike, counter: WordCounter) -> None:
    """Count every word in the file at ``path``.

    Raises OSError if the file cannot be opened or read.
    """
    with open(path, "rb") as handle:
        for word in tokenize(_read_chunks(handle)):
            counter.add(word)


def _report(path: str, exc: OSError) -> None:
    print(f"{path}: {exc.strerror or exc}", file=sys.stderr)


def process_directory(path: str | os.PathLike, counter: WordCounter) -> None:
    """Count words in every ``.txt`` file below ``path``.

    Hidden entries are skipped. Entries that cannot be listed or examined
    are reported on standard error and skipped.
    """
    dir_path = os.fspath(path)
    try:
        names = sorted(os.listdir(dir_path))
    except OSError as exc:
        _report(dir_path, exc)
        return

    for name in names:
        if name.startswith("."):
            continue
        entry = f"{dir_path}/{name}"
        try:
            mode = os.stat(entry).st_mode
        except OSError as exc:
            _report(entry, exc)
            continue
        if stat.S_ISREG(mode):
            if ends_with_txt(name):
                process_file(entry, counter)
        elif stat.S_ISDIR(mode):
            process_directory(entry, counter)