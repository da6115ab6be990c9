"""
circcode Code model

A Code is the canonical form of a finite word set: the deduplicated words in
insertion order, the sorted alphabet those words use, and the sorted set of
word lengths. Every graph and property in circcode is computed from a Code.

Usage:
    code = Code(["BDC", "CA", "DB"])
    code.alphabet        # ['A', 'B', 'C', 'D']
    code.tuple_lengths   # [2, 3]

    code = Code.from_sequence("ABCCDE", 2)
    code.words           # ['AB', 'CC', 'DE']
"""

from __future__ import annotations

from typing import Iterable, Iterator

from circcode.errors import EmptyCodeError, EmptyWordError


def rotate(word: str, amount: int) -> str:
    """Rotate one word left by `amount` symbols (negative rotates right)."""
    offset = amount % len(word)
    return word[offset:] + word[:offset]


class Code:
    """A set of words over a finite alphabet.

    Equality compares the words as sets; the id plays no part in it.
    A Code is mutated only by shift().
    """

    def __init__(self, words: Iterable[str], id: str = "unknown") -> None:
        words = list(words)
        if not words:
            raise EmptyCodeError("no words given")
        for word in words:
            if len(word) == 0:
                raise EmptyWordError(f"in {words!r}")

        self.id = id
        self._words: list[str] = list(dict.fromkeys(words))
        self._tuple_lengths: list[int] = sorted({len(w) for w in self._words})
        self._alphabet: list[str] = sorted(set("".join(self._words)))

    @classmethod
    def from_sequence(cls, sequence: str, tuple_length: int, id: str = "unknown") -> Code:
        """Cut a sequence into consecutive tuples of `tuple_length` symbols.

        A trailing remainder shorter than tuple_length is dropped.
        """
        if not sequence:
            raise EmptyCodeError("empty sequence")
        if tuple_length < 1 or tuple_length > len(sequence):
            raise EmptyCodeError(
                f"cannot cut {len(sequence)} symbols into tuples of {tuple_length}"
            )
        stop = len(sequence) - len(sequence) % tuple_length
        words = [sequence[i:i + tuple_length] for i in range(0, stop, tuple_length)]
        return cls(words, id=id)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def words(self) -> list[str]:
        return list(self._words)

    @property
    def tuple_lengths(self) -> list[int]:
        """Sorted, distinct word lengths."""
        return list(self._tuple_lengths)

    @property
    def alphabet(self) -> list[str]:
        """Sorted, distinct symbols used by any word."""
        return list(self._alphabet)

    # ------------------------------------------------------------------
    # Transform
    # ------------------------------------------------------------------

    def shift(self, amount: int) -> None:
        """Rotate every word by `amount` positions, in place.

        Each word rotates independently, so words of different lengths
        move by different effective offsets. Let X = {123, 332}, then
        shift(2) gives {312, 233}.
        """
        self._words = [rotate(w, amount) for w in self._words]

    def copy(self) -> Code:
        return Code(self._words, id=self.id)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Code):
            return NotImplemented
        return sorted(self._words) == sorted(other._words)

    __hash__ = None  # mutable via shift()

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __str__(self) -> str:
        return (
            f"{self.id} -> {{ {', '.join(self._words)} }} "
            f"Alphabet = [{', '.join(self._alphabet)}]"
        )

    def __repr__(self) -> str:
        return f"<Code {self.id}: {len(self._words)} words, lengths={self._tuple_lengths}>"
