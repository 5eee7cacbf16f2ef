from strongpass import rng
from strongpass.rng import (
    SystemRandomSource,
    secure_choice,
    secure_random_int,
    secure_shuffle,
    set_default_source,
)


def test_random_int_in_range():
    for max_value in (1, 2, 10, 26, 88):
        for _ in range(200):
            n = secure_random_int(max_value)
            assert 0 <= n < max_value


def test_random_int_reduces_modulo(fixed_source):
    assert secure_random_int(10, fixed_source(2**32 - 1)) == 5
    assert secure_random_int(26, fixed_source(27)) == 1
    assert secure_random_int(1, fixed_source(123456)) == 0


def test_random_int_rejects_non_positive_max():
    for bad in (0, -1):
        try:
            secure_random_int(bad)
            raised = False
        except ValueError:
            raised = True
        assert raised


def test_injected_source_is_consumed(counting_source):
    assert [secure_random_int(3, counting_source) for _ in range(4)] == [0, 1, 2, 0]
    assert counting_source.calls == 4


def test_choice(fixed_source):
    assert secure_choice("abc", fixed_source(4)) == "b"


def test_system_source_words_are_32_bit():
    src = SystemRandomSource()
    words = [src.randbits32() for _ in range(100)]
    assert all(0 <= w < 2**32 for w in words)
    # 100 identical 32-bit words would mean a broken source
    assert len(set(words)) > 1


def test_shuffle_fisher_yates_order(counting_source):
    # draws 0, 1, 2: i=3 -> j=0, i=2 -> j=1, i=1 -> j=0
    assert secure_shuffle(["a", "b", "c", "d"], counting_source) == ["c", "d", "b", "a"]
    assert counting_source.calls == 3


def test_shuffle_does_not_mutate_input():
    original = ["x", "y", "z", "w", "v"]
    snapshot = list(original)
    out = secure_shuffle(original)
    assert original == snapshot
    assert out is not original


def test_shuffle_is_permutation():
    seq = list("AAbb1!@#xyz")
    for _ in range(50):
        out = secure_shuffle(seq)
        assert sorted(out) == sorted(seq)


def test_shuffle_is_permutation_with_deterministic_source(fixed_source):
    seq = list(range(20))
    for word in (0, 1, 7, 2**32 - 1):
        assert sorted(secure_shuffle(seq, fixed_source(word))) == seq


def test_shuffle_short_sequences():
    assert secure_shuffle([]) == []
    assert secure_shuffle(("only",)) == ["only"]


def test_set_default_source(fixed_source):
    previous = set_default_source(fixed_source(2))
    try:
        assert secure_random_int(10) == 2
    finally:
        set_default_source(previous)
    assert rng.get_default_source() is previous


def test_set_default_source_none_restores_system(fixed_source):
    previous = set_default_source(fixed_source(0))
    set_default_source(None)
    try:
        assert isinstance(rng.get_default_source(), SystemRandomSource)
    finally:
        set_default_source(previous)


def test_random_int_upper_keyword(fixed_source):
    assert secure_random_int(upper=7, source=fixed_source(9)) == 2
