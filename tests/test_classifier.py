from __future__ import annotations

from bracket_colorizer import (
    BracketSide,
    BracketType,
    HeuristicAnglePolicy,
    StrictAnglePolicy,
    classify,
    is_likely_generic,
)


def test_classify_brackets() -> None:
    assert classify("(") == (BracketType.ROUND, BracketSide.OPENING)
    assert classify("]") == (BracketType.SQUARE, BracketSide.CLOSING)
    assert classify("{") == (BracketType.CURLY, BracketSide.OPENING)
    assert classify(">") == (BracketType.ANGLE, BracketSide.CLOSING)


def test_classify_other_characters() -> None:
    for char in "a1 _\"'/\\\n":
        assert classify(char) is None


def test_generic_after_identifier() -> None:
    assert is_likely_generic("Vec<T>", 3)
    assert is_likely_generic("Vec<T>", 5)
    assert is_likely_generic("foo_<", 4)


def test_generic_before_identifier_or_list() -> None:
    assert is_likely_generic("<T", 0)
    assert is_likely_generic("<, ", 0)
    assert is_likely_generic("< ", 0)


def test_not_generic() -> None:
    assert not is_likely_generic("a <= b", 2)
    assert not is_likely_generic("(<", 1)
    assert not is_likely_generic("<", 0)


def test_policies() -> None:
    assert not HeuristicAnglePolicy().is_bracket("Vec<T>", 3)
    assert HeuristicAnglePolicy().is_bracket("(<)", 1)
    assert StrictAnglePolicy().is_bracket("Vec<T>", 3)
