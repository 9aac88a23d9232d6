import random

import pytest

from twiddle.models.errors import (
    EmptyDictionaryError,
    InvalidEntryError,
    LengthMismatchError,
)
from twiddle.services.dictionary import Dictionary


def test_first_entry_sets_word_length():
    dictionary = Dictionary()
    assert dictionary.word_length is None

    dictionary.add("crane")

    assert dictionary.word_length == 5
    assert len(dictionary) == 1


def test_add_normalizes_whitespace_and_case():
    dictionary = Dictionary()
    dictionary.add("  crane\n")

    assert list(dictionary) == ["CRANE"]
    assert dictionary.contains("CRANE")
    assert dictionary.contains("crane")
    assert dictionary.contains(" Crane ")


def test_add_rejects_length_mismatch():
    dictionary = Dictionary(["CRANE"])

    with pytest.raises(LengthMismatchError) as excinfo:
        dictionary.add("CAT")

    assert excinfo.value.expected == 5
    assert "CAT" in str(excinfo.value)
    assert len(dictionary) == 1


def test_add_duplicate_is_noop():
    dictionary = Dictionary(["CRANE"])
    dictionary.add("crane")
    dictionary.add("CRANE ")

    assert len(dictionary) == 1


def test_add_rejects_empty_entry():
    with pytest.raises(InvalidEntryError):
        Dictionary().add("   ")


@pytest.mark.parametrize("word", ["CR4NE", "CRA-E", "CRÊPE", "STRAßE"])
def test_add_rejects_non_letters(word):
    dictionary = Dictionary(["CRANE"])

    with pytest.raises(InvalidEntryError):
        dictionary.add(word)

    assert len(dictionary) == 1


def test_contains_and_in_operator():
    dictionary = Dictionary(["CRANE", "TRAIN"])

    assert "train" in dictionary
    assert "BRAVE" not in dictionary
    assert 42 not in dictionary


def test_pick_random_entry_from_empty_dictionary():
    with pytest.raises(EmptyDictionaryError):
        Dictionary().pick_random_entry()


def test_pick_random_entry_returns_an_entry():
    dictionary = Dictionary(["CRANE", "TRAIN", "BRAVE"])

    for _ in range(20):
        assert dictionary.pick_random_entry() in dictionary


def test_pick_random_entry_is_deterministic_with_seeded_rng():
    dictionary = Dictionary(["CRANE", "TRAIN", "BRAVE", "BREAD", "TRADE"])

    first = [dictionary.pick_random_entry(random.Random(7)) for _ in range(3)]
    second = [dictionary.pick_random_entry(random.Random(7)) for _ in range(3)]

    assert first == second


def test_instance_rng_is_used_when_no_rng_given():
    words = ["CRANE", "TRAIN", "BRAVE", "BREAD", "TRADE"]
    a = Dictionary(words, rng=random.Random(3))
    b = Dictionary(reversed(words), rng=random.Random(3))

    assert [a.pick_random_entry() for _ in range(5)] == [b.pick_random_entry() for _ in range(5)]


def test_pick_random_entry_covers_all_entries():
    dictionary = Dictionary(["CRANE", "TRAIN", "BRAVE"])
    rng = random.Random(0)

    picked = {dictionary.pick_random_entry(rng) for _ in range(200)}

    assert picked == {"CRANE", "TRAIN", "BRAVE"}


def test_from_text_skips_blank_lines():
    dictionary = Dictionary.from_text("crane\ntrain\n\nbrave\n")

    assert list(dictionary) == ["BRAVE", "CRANE", "TRAIN"]
    assert dictionary.word_length == 5


def test_from_text_rejects_mixed_lengths():
    with pytest.raises(LengthMismatchError):
        Dictionary.from_text("crane\ncat\n")


def test_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("plant\nglass\n", encoding="utf-8")

    dictionary = Dictionary.from_file(path)

    assert dictionary.contains("GLASS")
    assert len(dictionary) == 2
