from strongpass.score import (
    MEDIUM_COLOR,
    NONE_COLOR,
    NONE_RESULT,
    STRONG_COLOR,
    WEAK_COLOR,
    StrengthResult,
    score,
)


def test_empty_password():
    result = score("")
    assert result == StrengthResult(0, "None", NONE_COLOR)
    assert result is NONE_RESULT


def test_eight_lowercase_is_weak():
    result = score("aaaaaaaa")
    assert result.score == 30
    assert result.label == "Weak"
    assert result.color == WEAK_COLOR


def test_twelve_chars_all_classes_is_strong():
    result = score("Aa1!Aa1!Aa1!")
    assert result.score == 80
    assert result.label == "Strong"
    assert result.color == STRONG_COLOR


def test_sixteen_lowercase_is_medium():
    result = score("abcdefghijklmnop")
    assert result.score == 55
    assert result.label == "Medium"
    assert result.color == MEDIUM_COLOR


def test_single_lowercase_char():
    assert score("a").score == 15
    assert score("a").label == "Weak"


def test_class_buckets():
    assert score("A").score == 15
    assert score("7").score == 10
    assert score("!").score == 10
    assert score(" ").score == 10  # space is outside [A-Za-z0-9]


def test_non_ascii_counts_as_symbol_only():
    # accented letters are not in the ASCII pools
    assert score("é").score == 10
    assert score("Éé").score == 10


def test_maximum_score():
    result = score("Aa1!" * 6)
    assert result.score == 100
    assert result.label == "Strong"


def test_length_buckets_are_cumulative():
    assert score("1" * 7).score == 10
    assert score("1" * 8).score == 25
    assert score("1" * 12).score == 40
    assert score("1" * 16).score == 50
    assert score("1" * 24).score == 60


def test_label_thresholds():
    assert score("abcdefghABCD").score == 60
    assert score("abcdefghABCD").label == "Medium"
    assert score("abcdefgh1234").score == 55
    assert score("abcdefgA").score == 45
    assert score("abcdefgA").label == "Weak"
    assert score("abcdefA1").score == 55
    assert score("abcdefA1").label == "Medium"
    assert score("abcdefghijkA1").score == 70
    assert score("abcdefghijkA1").label == "Medium"
    assert score("abcdefghijkA1!").score == 80


def test_boundary_scores():
    # 40 length + lower + digit + symbol
    assert score("abcdefghijklm12!").score == 75
    assert score("abcdefghijklm12!").label == "Strong"
    # 30 length + digit + symbol
    assert score("123456789!@#").score == 50
    assert score("123456789!@#").label == "Medium"
    assert score("12345678!").score == 35
    assert score("12345678!").label == "Weak"


def test_deterministic():
    assert score("Tr0ub4dor&3") == score("Tr0ub4dor&3")


def test_as_dict():
    assert score("aaaaaaaa").as_dict() == {"score": 30, "label": "Weak", "color": WEAK_COLOR}
