"""
circcode Decidability Graph

Decides whether a word set is uniquely decodable (a code) and, if it is not,
recovers the ambiguous sequences that prove it.

Every word is read as a loop ROOT -> w[0] -> ... -> w[-1] -> ROOT. A walker
sits at (word index, position); position 0 is the virtual ROOT symbol. For
each pair of distinct words two walkers start together and advance one
symbol at a time:

- a walker at the end of its word may restart at the beginning of any word
  (a new word starts here), so the search branches over the whole code;
- differing symbols close the branch: these walks spell different strings;
- equal symbols with both walkers at a word end at the same step mean the
  walked string has two decompositions: an ambiguous sequence;
- a position pair seen before on the same branch closes it as well, the
  walk can only repeat itself from there.

The branching search runs on an explicit worklist; its visiting order is the
depth-first pre-order of the recursive formulation, so reported sequences
come out in a stable order.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Iterator

from circcode.code import Code

logger = logging.getLogger(__name__)

ROOT = "_"

# (word index, symbol position)
Position = tuple[int, int]


class DecidabilityGraph:
    """Implicit graph G(X) of root-to-root loops, one loop per word."""

    def __init__(self, code: Code) -> None:
        self._sequences: list[str] = [ROOT] + [ROOT + w for w in code.words]

    @property
    def sequences(self) -> list[str]:
        """The root entry followed by every word prefixed with ROOT."""
        return list(self._sequences)

    def is_code(self) -> bool:
        """True iff no two walks spell the same string from root to root."""
        is_code, _ = self._search(find_all=False)
        return is_code

    def all_ambiguous_sequences(self) -> tuple[bool, list[str]]:
        """Walk every branch and return (is_code, ambiguous sequences).

        The list may repeat a sequence once per way it was reached.
        """
        return self._search(find_all=True)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _at_boundary(self, pos: Position) -> bool:
        return pos == (0, 0) or pos[1] == len(self._sequences[pos[0]]) - 1

    def _search(self, find_all: bool) -> tuple[bool, list[str]]:
        count = len(self._sequences)
        is_code = True
        found: list[str] = []

        for i in range(1, count - 1):
            for j in range(i + 1, count):
                pair_ok, witnesses = self._walk_pair((i, 0), (j, 0), find_all)
                found.extend(witnesses)
                if not pair_ok:
                    is_code = False
                    if not find_all:
                        logger.debug("words %d and %d overlap ambiguously", i, j)
                        return False, found

        logger.debug(
            "decidability search over %d words: is_code=%s, %d ambiguous sequences",
            count - 1, is_code, len(found),
        )
        return is_code, found

    def _walk_pair(
        self, first: Position, second: Position, find_all: bool
    ) -> tuple[bool, list[str]]:
        """Run the simultaneous walk for one start pair.

        Returns (no ambiguity found, ambiguous sequences found).
        """
        seqs = self._sequences
        words = range(1, len(seqs))
        ok = True
        found: list[str] = []
        # (walker a, walker b, pairs seen on this branch, spelled string)
        stack: list[tuple[Position, Position, frozenset, str]] = [
            (first, second, frozenset(), "")
        ]

        while stack:
            p0, p1, history, spelled = stack.pop()
            key = (p0, p1) if p0 <= p1 else (p1, p0)
            if key in history:
                continue
            history = history | {key}

            # a walker at a word end restarts at every word, the other stays put
            if self._at_boundary(p0):
                fixed = p1
            elif self._at_boundary(p1):
                fixed = p0
            else:
                fixed = None

            if fixed is not None:
                # reversed so the first word is explored first
                for k in reversed(words):
                    stack.append(((k, 0), fixed, history, spelled))
                continue

            a = (p0[0], p0[1] + 1)
            b = (p1[0], p1[1] + 1)
            symbol = seqs[a[0]][a[1]]
            if symbol != seqs[b[0]][b[1]]:
                continue

            spelled += symbol
            if a[1] == len(seqs[a[0]]) - 1 and b[1] == len(seqs[b[0]]) - 1:
                ok = False
                if not find_all:
                    return False, found
                found.append(spelled)
                continue

            stack.append((a, b, history, spelled))

        return ok, found


# ----------------------------------------------------------------------
# Decompositions
# ----------------------------------------------------------------------

def decompositions(sequence: str, words: Iterable[str]) -> Iterator[tuple[str, ...]]:
    """Yield every way to write `sequence` as a concatenation of `words`.

    An ambiguous sequence yields at least two tuples. The parse table is
    built right to left so only prefixes that can still be completed are
    followed.
    """
    vocabulary = set(words)
    length = len(sequence)
    continuations: dict[int, list[int]] = defaultdict(list)
    continuations[length] = []
    for start in reversed(range(length)):
        for word in sorted(vocabulary):
            end = start + len(word)
            if end <= length and sequence[start:end] == word and end in continuations:
                continuations[start].append(end)

    if 0 not in continuations:
        return

    def chains(start: int) -> Iterator[tuple[str, ...]]:
        if start == length:
            yield ()
            return
        for end in continuations[start]:
            for rest in chains(end):
                yield (sequence[start:end],) + rest

    yield from chains(0)
