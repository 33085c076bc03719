"""Word frequency table bucketed by the first character of each word."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .charclass import is_apostrophe, is_lowercase, is_uppercase

BUCKET_COUNT = 53


def bucket_index(word: str) -> int | None:
    """Return the bucket for ``word``, or None if its first character has none.

    The apostrophe maps to 0, ``A``-``Z`` to 1-26 and ``a``-``z`` to 27-52.
    """
    if not word:
        return None
    first = word[0]
    if is_apostrophe(first):
        return 0
    if is_uppercase(first):
        return ord(first) - ord("A") + 1
    if is_lowercase(first):
        return ord(first) - ord("a") + 27
    return None


def _ranking(item: tuple[str, int]) -> tuple[int, str]:
    word, count = item
    return count, word


class WordCounter:
    """Counts word occurrences and yields them most frequent first."""

    def __init__(self) -> None:
        self._buckets: list[dict[str, int]] = [{} for _ in range(BUCKET_COUNT)]

    def add(self, word: str) -> None:
        """Count one occurrence of ``word``; words with no bucket are ignored."""
        index = bucket_index(word)
        if index is None:
            return
        bucket = self._buckets[index]
        bucket[word] = bucket.get(word, 0) + 1

    def bucket(self, index: int) -> list[tuple[str, int]]:
        """Return a bucket's entries, highest count first, ties by larger word."""
        if not 0 <= index < BUCKET_COUNT:
            raise IndexError(f"bucket index out of range: {index}")
        return sorted(self._buckets[index].items(), key=_ranking, reverse=True)

    def drain(self) -> Iterator[tuple[str, int]]:
        """Yield and remove every ``(word, count)`` pair in output order.

        Each step takes the head of every bucket and picks the one with the
        highest count; ties go to the bucket with the highest index.
        """
        while True:
            best: tuple[int, int, str] | None = None
            for index, bucket in enumerate(self._buckets):
                if not bucket:
                    continue
                word, count = max(bucket.items(), key=_ranking)
                if best is None or (count, index) > (best[0], best[1]):
                    best = (count, index, word)
            if best is None:
                return
            count, index, word = best
            del self._buckets[index][word]
            yield word, count

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)


def format_counts(pairs: Iterable[tuple[str, int]]) -> str:
    """Render pairs as lines of ``word count``."""
    return "".join(f"{word} {count}\n" for word, count in pairs)