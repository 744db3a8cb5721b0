from typing import Dict, Optional, Sequence, Tuple

from typing_extensions import Protocol

from .model import BracketSide, BracketType


BRACKETS: Dict[str, Tuple[BracketType, BracketSide]] = {
    '(': (BracketType.ROUND,  BracketSide.OPENING),
    ')': (BracketType.ROUND,  BracketSide.CLOSING),
    '[': (BracketType.SQUARE, BracketSide.OPENING),
    ']': (BracketType.SQUARE, BracketSide.CLOSING),
    '{': (BracketType.CURLY,  BracketSide.OPENING),
    '}': (BracketType.CURLY,  BracketSide.CLOSING),
    '<': (BracketType.ANGLE,  BracketSide.OPENING),
    '>': (BracketType.ANGLE,  BracketSide.CLOSING),
}


def classify(char: str) -> Optional[Tuple[BracketType, BracketSide]]:
    return BRACKETS.get(char)


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == '_'


def is_likely_generic(chars: Sequence[str], index: int) -> bool:
    """
    Guess whether the angle bracket at `index` belongs to a type
    parameter list, as in `Vec<T>` or `HashMap<K, V>`, rather than
    being a comparison. Comparisons written next to identifiers are
    taken for generics too.
    """
    if index > 0 and _is_word_char(chars[index - 1]):
        return True
    if index + 1 < len(chars):
        following = chars[index + 1]
        if _is_word_char(following) or following in (',', ' '):
            return True
    return False


class AnglePolicy(Protocol):
    def is_bracket(self, chars: Sequence[str], index: int) -> bool:
        ...


class HeuristicAnglePolicy:
    def is_bracket(self, chars: Sequence[str], index: int) -> bool:
        return not is_likely_generic(chars, index)


class StrictAnglePolicy:
    def is_bracket(self, chars: Sequence[str], index: int) -> bool:
        return True
