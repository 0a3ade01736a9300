import pytest

from text_analysis_engine.word_store import (
    WordStore,
    bucket_index,
    detect_proper_noun,
    detect_verb,
)


def test_insert_or_increment_counts_repeats():
    store = WordStore()
    word, created = store.insert_or_increment("chat")
    assert created
    assert (word.frequency, word.length) == (1, 4)

    again, created = store.insert_or_increment("chat")
    assert not created
    assert again is word
    assert word.frequency == 2
    assert len(store) == 1
    assert "chat" in store
    assert store.get("chien") is None


def test_insert_rejects_empty_word():
    with pytest.raises(ValueError):
        WordStore().insert_or_increment("")


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        WordStore(capacity=0)


def test_bucket_index_is_stable_djb2():
    assert bucket_index("a", 10007) == 7551
    assert bucket_index("", 7) == 5381 % 7
    assert bucket_index("parler", 10007) == bucket_index("parler", 10007)
    assert 0 <= bucket_index("anticonstitutionnellement", 13) < 13


def test_collisions_keep_distinct_keys():
    store = WordStore(capacity=1)
    for text in ["alpha", "beta", "gamma", "alpha"]:
        store.insert_or_increment(text)

    assert len(store) == 3
    assert store.get("alpha").frequency == 2
    assert sorted(word.text for word in store) == ["alpha", "beta", "gamma"]


def test_iteration_is_restartable_and_clear_disposes():
    store = WordStore(capacity=17)
    for text in ["un", "deux", "trois"]:
        store.insert_or_increment(text)

    assert [w.text for w in store.iterate()] == [w.text for w in store.iterate()]
    store.clear()
    assert len(store) == 0
    assert list(store) == []


@pytest.mark.parametrize(
    "word, expected",
    [
        ("parler", True),
        ("finir", True),
        ("prendre", True),
        ("lire", True),
        ("chat", False),
        ("are", False),
        ("er", False),
        ("hello", False),
    ],
)
def test_detect_verb(word, expected):
    assert detect_verb(word) is expected


def test_proper_noun_uses_original_casing():
    assert detect_proper_noun("Paris")
    assert not detect_proper_noun("paris")
    assert not detect_proper_noun("")

    store = WordStore()
    word, _ = store.insert_or_increment("paris", original="Paris")
    assert word.is_proper_noun
    # Without the original spelling only the lowercase key is available.
    lower, _ = store.insert_or_increment("lyon")
    assert not lower.is_proper_noun


def test_flags_are_fixed_at_first_insertion():
    store = WordStore()
    store.insert_or_increment("paris", original="paris")
    word, created = store.insert_or_increment("paris", original="Paris")
    assert not created
    assert not word.is_proper_noun
    assert word.frequency == 2
