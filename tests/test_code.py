"""
circcode Code Test Suite

Tests the Code model:
1. Construction from a word list (dedup, lengths, alphabet)
2. Construction from a sequence cut into tuples
3. Construction errors (empty code, empty word)
4. Set equality
5. Shift (rotation) and its round trip
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from circcode import Code, CodeError, EmptyCodeError, EmptyWordError, ErrorKind
from circcode.code import rotate


# --- Test 1: Word list ---

def test_from_words():
    code = Code(["BDC", "CA", "DB"])
    assert code.words == ["BDC", "CA", "DB"]
    assert code.tuple_lengths == [2, 3]
    assert code.alphabet == ["A", "B", "C", "D"]
    assert code.id == "unknown"


def test_duplicates_keep_first_occurrence():
    code = Code(["AB", "CD", "AB", "EF", "CD"])
    assert code.words == ["AB", "CD", "EF"]
    assert len(code) == 3


def test_custom_id_and_rendering():
    code = Code(["ACG", "CGG"], id="X0")
    assert code.id == "X0"
    assert str(code) == "X0 -> { ACG, CGG } Alphabet = [A, C, G]"
    assert "ACG" in code
    assert list(code) == ["ACG", "CGG"]


# --- Test 2: Sequence ---

def test_from_sequence_pairs():
    code = Code.from_sequence("ABCCDE", 2)
    assert code.words == ["AB", "CC", "DE"]
    assert code.alphabet == ["A", "B", "C", "D", "E"]
    assert code.tuple_lengths == [2]
    assert code.id == "unknown"


def test_from_sequence_drops_remainder():
    code = Code.from_sequence("ABCCDEE", 3)
    assert code.words == ["ABC", "CDE"]
    assert code.tuple_lengths == [3]


def test_from_sequence_dedups():
    code = Code.from_sequence("ACGACGTTT", 3)
    assert code.words == ["ACG", "TTT"]


# --- Test 3: Errors ---

def test_empty_word_list():
    with pytest.raises(EmptyCodeError) as info:
        Code([])
    assert info.value.kind is ErrorKind.EMPTY_CODE
    assert str(info.value).startswith("Empty Code")


def test_empty_word():
    with pytest.raises(EmptyWordError) as info:
        Code(["BDC", "", "DB"])
    assert info.value.kind is ErrorKind.EMPTY_WORD
    assert str(info.value).startswith("Empty Word")


@pytest.mark.parametrize("sequence, length", [("", 3), ("AB", 3), ("ABC", 0)])
def test_sequence_too_short(sequence, length):
    with pytest.raises(CodeError) as info:
        Code.from_sequence(sequence, length)
    assert info.value.kind is ErrorKind.EMPTY_CODE


# --- Test 4: Equality ---

def test_equality_is_set_equality():
    a = Code(["BDC", "CA", "DB"])
    b = Code(["CA", "DB", "BDC"], id="other")
    c = Code(["C", "DB", "BDC"])
    assert a == b
    assert b == a
    assert a != c
    assert b != c


def test_code_is_unhashable():
    with pytest.raises(TypeError):
        hash(Code(["AB"]))


# --- Test 5: Shift ---

def test_shift_in_place():
    code = Code(["BDC", "CA", "DB"])
    code.shift(-1)
    assert code.words == ["CBD", "AC", "BD"]
    code.shift(1)
    assert code.words == ["BDC", "CA", "DB"]
    code.shift(3)
    assert code.words == ["BDC", "AC", "BD"]
    code.shift(-4)
    assert code.words == ["CBD", "AC", "BD"]


def test_shift_keeps_alphabet_and_lengths():
    code = Code(["BDC", "CA", "DB"])
    code.shift(2)
    assert code.alphabet == ["A", "B", "C", "D"]
    assert code.tuple_lengths == [2, 3]


def test_rotate_by_length_is_identity():
    assert rotate("ACGT", 4) == "ACGT"
    assert rotate("ACGT", -8) == "ACGT"
    assert rotate("123", 2) == "312"
    assert rotate("332", 2) == "233"


@pytest.mark.parametrize("amount", [-7, -3, -1, 0, 1, 2, 5, 12])
def test_shift_round_trip(amount):
    original = Code(["BDC", "CA", "DB", "AAAD", "C"])
    code = original.copy()
    code.shift(amount)
    code.shift(-amount)
    assert code == original
    assert code.words == original.words


def test_copy_is_independent():
    code = Code(["ACG", "GTA"], id="X")
    clone = code.copy()
    clone.shift(1)
    assert code.words == ["ACG", "GTA"]
    assert clone.id == "X"
