from __future__ import annotations

from bracket_colorizer import (
    BracketType,
    Language,
    analyze,
    build_bracket_trees,
    enclosing_pairs,
    nearest_pair,
)


def trees_for(content: str):
    return build_bracket_trees(analyze(content, Language.GENERIC).pairs)


def test_trees_nest_by_containment() -> None:
    trees = trees_for("{ [ ( ) ] } ()")
    assert len(trees) == 2
    outer = trees[0]
    assert outer.pair.type is BracketType.CURLY
    assert (outer.begin, outer.end) == (0, 11)
    assert outer.contain[0].pair.type is BracketType.SQUARE
    assert outer.contain[0].contain[0].pair.type is BracketType.ROUND
    assert trees[1].contain == []


def test_enclosing_pairs_outermost_first() -> None:
    trees = trees_for("{ [ ( ) ] }")
    path = enclosing_pairs(trees, 5, 5)
    assert [p.type for p in path] == [
        BracketType.CURLY, BracketType.SQUARE, BracketType.ROUND]


def test_enclosing_pairs_for_range() -> None:
    trees = trees_for("{ [ ( ) ] }")
    path = enclosing_pairs(trees, 3, 8)
    assert [p.type for p in path] == [BracketType.CURLY, BracketType.SQUARE]


def test_nearest_pair() -> None:
    trees = trees_for("{ [ ( ) ] }")
    assert nearest_pair(trees, 1).type is BracketType.CURLY
    assert nearest_pair(trees, 5).type is BracketType.ROUND


def test_cursor_touching_bracket() -> None:
    trees = trees_for("x {} y")
    assert nearest_pair(trees, 2).type is BracketType.CURLY
    assert nearest_pair(trees, 4).type is BracketType.CURLY
    assert nearest_pair(trees, 0) is None


def test_unmatched_brackets_leave_no_nodes() -> None:
    trees = trees_for("( { ] }")
    assert trees == []
