from typing import Iterable, List, Optional

from typing_extensions import Self

from .model import BracketPair


class BracketTree:
    __slots__ = ['pair', 'contain']

    def __init__(self, pair: BracketPair, contain: List[Self]):
        self.pair = pair
        self.contain = contain

    @property
    def begin(self) -> int:
        return self.pair.opening.position.byte_offset

    @property
    def end(self) -> int:
        return self.pair.closing.position.byte_offset + 1

    def __repr__(self):
        return f'BracketTree({self.begin}, {self.end}, {self.contain!r})'


def build_bracket_trees(pairs: Iterable[BracketPair]) -> List[BracketTree]:
    """
    Nest matched pairs by containment. Pairs come out of the matcher in
    closing order, the trees are ordered by opening offset at every level.
    """
    roots: List[BracketTree] = []
    node_stack: List[BracketTree] = []
    ordered = sorted(pairs, key=lambda p: p.opening.position.byte_offset)
    for pair in ordered:
        node = BracketTree(pair, [])
        while node_stack and node_stack[-1].end <= node.begin:
            node_stack.pop()
        if node_stack:
            node_stack[-1].contain.append(node)
        else:
            roots.append(node)
        node_stack.append(node)
    return roots


def enclosing_pairs(
    trees: List[BracketTree],
    r_begin: int,
    r_end: int
) -> List[BracketPair]:
    """
    The pairs enclosing the byte range [r_begin, r_end], outermost first.
    An empty range right at an opening bracket or right after a closing
    bracket is enclosed by that pair.
    """
    bracket_path: List[BracketPair] = []
    while True:
        found_closer = False
        lo, hi = 0, len(trees) - 1
        while lo <= hi:
            mi = (lo + hi) >> 1
            tr = trees[mi]
            oa = tr.begin
            cb = tr.end
            if cb < r_begin:
                lo = mi + 1
            elif oa > r_end:
                hi = mi - 1
            else:
                if (oa < r_begin and r_end < cb or
                    r_begin == r_end and (r_end == oa or r_begin == cb)):
                    found_closer = True
                    trees = tr.contain
                    bracket_path.append(tr.pair)
                break
        if not found_closer:
            break
    return bracket_path


def nearest_pair(
    trees: List[BracketTree],
    r_begin: int,
    r_end: Optional[int] = None
) -> Optional[BracketPair]:
    if r_end is None:
        r_end = r_begin
    path = enclosing_pairs(trees, r_begin, r_end)
    return path[-1] if path else None
